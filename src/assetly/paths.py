"""Path composition for builder hierarchies.

Paths are plain strings joined with ``/``. Nothing here parses URLs:
``"//cdn.example.com"`` and ``"/static"`` are both just prefixes.
"""


def normalize_base(base: str | None) -> str | None:
    """Strip a single trailing ``/`` from a local base.

    Empty results collapse to ``None`` so an absent base and ``""``
    compose the same way.
    """
    if not base:
        return None
    if base.endswith("/"):
        base = base[:-1]
    return base or None


def compose_path(
    parent_path: str | None,
    local_base: str | None,
    *,
    relative: bool = False,
) -> str | None:
    """Join a parent's full path with a child's local base.

    With *relative*, one leading ``/`` of *local_base* is dropped before
    joining, so a standalone ``"/baz"`` builder mounted at construction
    time lands under its parent instead of after a doubled separator.

    Examples::

        >>> compose_path("//cdn", "css")
        '//cdn/css'
        >>> compose_path("//cdn", "/css")
        '//cdn//css'
        >>> compose_path("//cdn", "/css", relative=True)
        '//cdn/css'
        >>> compose_path(None, "css")
        'css'
        >>> compose_path("//cdn", None)
        '//cdn'
    """
    if not parent_path:
        return local_base or None
    if not local_base:
        return parent_path
    if relative and local_base.startswith("/"):
        local_base = local_base[1:]
    return f"{parent_path}/{local_base}"


def append_filename(full_path: str | None, filename: str | None) -> str:
    """Append *filename* to *full_path*.

    - ``None`` returns the path as-is (``""`` when there is none)
    - ``""`` and ``"/"`` append a bare separator: ``"base/"``
    - one leading ``/`` on the filename is dropped before joining
    - with no path, the filename is returned without a leading separator
    """
    uri = full_path or ""
    if filename is None:
        return uri
    if filename.startswith("/"):
        filename = filename[1:]
    if not uri:
        return filename
    return f"{uri}/{filename}"
