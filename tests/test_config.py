"""Tests for assetly.config: AssetsConfig frozen dataclass."""

import pytest

from assetly import AssetsConfig, RootBuilder, assetly


class TestAssetsConfig:
    def test_defaults(self) -> None:
        cfg = AssetsConfig()

        assert cfg.base is None
        assert cfg.query is None
        assert cfg.version is None
        assert cfg.provides == {}

    def test_frozen(self) -> None:
        cfg = AssetsConfig()

        with pytest.raises(AttributeError):
            cfg.base = "/static"  # type: ignore[misc]

    def test_build_empty(self) -> None:
        assets = AssetsConfig().build()
        assert isinstance(assets, RootBuilder)
        assert assets("app.js") == "app.js"

    def test_build_base_and_query(self) -> None:
        assets = AssetsConfig(base="/static", query="v=1").build()
        assert assets("app.js") == "/static/app.js?v=1"

    def test_build_version(self) -> None:
        assets = AssetsConfig(base="//cdn.example.com", version=42).build()
        assert assets("app.js") == "//cdn.example.com/42/app.js"

    def test_build_version_and_query(self) -> None:
        assets = AssetsConfig(base="//cdn.example.com", query={"v": 1}, version=2).build()
        assert assets("app.js") == "//cdn.example.com/2/app.js?v=1"

    def test_build_provides_query_spec(self) -> None:
        assets = AssetsConfig(base="/static", provides={"css": {"v": 2}}).build()
        assert assets.css("main.css") == "/static/css/main.css?v=2"

    def test_build_provides(self) -> None:
        cfg = AssetsConfig(base="/static", provides={"css": "css", "vendor": assetly("lib")})
        assets = cfg.build()
        assert assets.css("main.css") == "/static/css/main.css"
        assert assets.vendor("htmx.js") == "/static/lib/htmx.js"


class TestPerEnvironment:
    @pytest.mark.parametrize(
        ("cfg", "expected"),
        [
            (AssetsConfig(base="/static"), "/static/css/main.css"),
            (
                AssetsConfig(base="//cdn.example.com", version=7),
                "//cdn.example.com/7/css/main.css",
            ),
        ],
    )
    def test_same_call_site(self, cfg: AssetsConfig, expected: str) -> None:
        assets = cfg.build().provides("css")
        assert assets.css("main.css") == expected
