"""Assetly: hierarchical URI builders for static assets.

One root builder holds the asset base URL and cache-busting query;
every asset URI is derived from it, so switching from a local path in
development to a CDN in production never touches call sites.

Basic usage::

    from assetly import assetly

    assets = assetly("/static", {"v": 3})
    assets.provides("css").provides("js", "scripts")

    assets.css("main.css")   # "/static/css/main.css?v=3"
    assets.js("app.js")      # "/static/scripts/app.js?v=3"

Publishing to a web app and its templates::

    assets.express(app)      # app.assets, {{ assets("logo.svg") }}
"""

from importlib import import_module

__version__ = "0.2.0"
__all__ = [
    "UNSET",
    "AssetlyError",
    "AssetsConfig",
    "Builder",
    "ConfigurationError",
    "ExposeOptions",
    "RootBuilder",
    "assetly",
    "expose",
    "install_globals",
    "setup",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "UNSET": "assetly._internal.types",
    "AssetlyError": "assetly.errors",
    "AssetsConfig": "assetly.config",
    "Builder": "assetly.builder",
    "ConfigurationError": "assetly.errors",
    "ExposeOptions": "assetly.config",
    "RootBuilder": "assetly.builder",
    "assetly": "assetly.builder",
    "expose": "assetly.integration",
    "install_globals": "assetly.integration",
    "setup": "assetly.integration",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import assetly`` free of the templating import until the
    integration helpers are actually used.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
