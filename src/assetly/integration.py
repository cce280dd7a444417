"""Publishing builders to web applications.

A root builder is installed once at startup, both on the application
object and in the defaults every rendered template sees::

    assets = assetly("//cdn.example.com", {"v": 42}).provides("css")
    expose(app, assets)

    app.assets.css("main.css")
    # template: <link rel="stylesheet" href="{{ assets.css('main.css') }}">

The template context is located on the app, in order:

1. ``app.template_globals``: a mutable mapping (middleware-style globals)
2. ``app.locals``: a mutable mapping of render-time defaults
3. ``app.kida_env``: a kida ``Environment``
"""

import logging
from collections.abc import MutableMapping
from typing import Any

from kida import Environment

from assetly.builder import Builder
from assetly.config import ExposeOptions
from assetly.errors import ConfigurationError

logger = logging.getLogger("assetly.integration")

_DEFAULT_OPTIONS = ExposeOptions()


def install_globals(env: Environment, builder: Builder, *, property_name: str = "assets") -> None:
    """Register *builder* as a global on a kida environment."""
    env.add_global(property_name, builder)


def _install_context(app: Any, name: str, builder: Builder) -> None:
    for attr in ("template_globals", "locals"):
        context = getattr(app, attr, None)
        if isinstance(context, MutableMapping):
            context[name] = builder
            return

    env = getattr(app, "kida_env", None)
    if isinstance(env, Environment):
        install_globals(env, builder, property_name=name)
        return

    msg = (
        f"Cannot publish assets on {type(app).__name__}: it has no "
        "'template_globals' or 'locals' mapping and no 'kida_env' Environment."
    )
    raise ConfigurationError(msg)


def expose(
    app: Any,
    builder: Builder,
    options: ExposeOptions | None = None,
    *,
    property_name: str | None = None,
) -> None:
    """Install *builder* on *app* and in its template context.

    Args:
        app: The web application object.
        builder: Usually the root builder.
        options: Publishing options. Defaults to ``ExposeOptions()``.
        property_name: Shorthand for ``ExposeOptions(property_name=...)``;
            takes precedence over *options*.

    Calling it again overwrites the previous value under the same name.
    """
    if property_name is not None:
        options = ExposeOptions(property_name=property_name)
    options = options or _DEFAULT_OPTIONS
    name = options.property_name

    _install_context(app, name, builder)
    setattr(app, name, builder)
    logger.debug("Exposed %r on %s as %r", builder, type(app).__name__, name)


def setup(app: Any, builder: Builder) -> None:
    """Install *builder* on *app* under the default ``assets`` name."""
    expose(app, builder)
