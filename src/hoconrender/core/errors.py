# topmark:header:start
#
#   project      : HoconRender
#   file         : errors.py
#   file_relpath : src/hoconrender/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while rendering configuration trees.

Usage:
    Rendering performs no local recovery. Any of these exceptions aborts the
    current render call and no partial text is returned. Where the failing
    node is known, the exception carries its path from the root, e.g.
    ``("server", "ports", 2)`` rendered as ``server.ports[2]``.

Taxonomy:
    - `UnsupportedValueError`: a scalar cannot be written as a literal.
    - `UnstableTreeError`: the tree changed while it was being enumerated.
    - `OptionsConstraintError`: a value outside a closed option or node-kind
      set reached a dispatch point (a programming fault).
"""

from __future__ import annotations

PathElement = str | int


def format_path(path: tuple[PathElement, ...]) -> str:
    """Render a node path as ``a.b[2].c``; the root path renders as ``<root>``."""
    if not path:
        return "<root>"
    parts: list[str] = []
    for element in path:
        if isinstance(element, int):
            parts.append(f"[{element}]")
        elif parts:
            parts.append(f".{element}")
        else:
            parts.append(element)
    return "".join(parts)


class HoconRenderError(Exception):
    """Base class for all rendering errors."""

    def __init__(self, message: str, *, path: tuple[PathElement, ...] = ()) -> None:
        super().__init__(message)
        self.message: str = message
        self.path: tuple[PathElement, ...] = path

    @property
    def path_text(self) -> str:
        """Human-readable path of the offending node."""
        return format_path(self.path)

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} (at {self.path_text})"
        return self.message


class UnsupportedValueError(HoconRenderError):
    """A scalar value has no literal form in the output dialect."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        detail: str = reason or f"unsupported type {type(value).__name__}"
        super().__init__(f"Cannot render value {value!r}: {detail}")
        self.value: object = value


class UnstableTreeError(HoconRenderError):
    """The tree was mutated while the renderer was enumerating it."""


class OptionsConstraintError(HoconRenderError):
    """An option or node kind outside its closed set reached the renderer."""
