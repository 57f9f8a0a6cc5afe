# topmark:header:start
#
#   project      : HoconRender
#   file         : nodes.py
#   file_relpath : src/hoconrender/tree/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration tree nodes.

A configuration tree is built from three node kinds:

    * `MapNode`: ordered key → child mapping (insertion order is the authoring
      order and is preserved on output);
    * `ListNode`: ordered sequence of children;
    * `ScalarNode`: a single primitive (``str``, ``int``, ``float``, ``bool``
      or ``None``).

Every kind may carry an optional ``comment``; one comment may span several
lines. `ConfigNode` is the closed union of the three kinds, and consumers
dispatch on it with ``match``.

The renderer only reads nodes. Children collections are not copied on
construction, so a tree built over caller-owned dicts/lists reflects later
mutations of those containers; callers must not mutate a tree while it is
being rendered.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace

from hoconrender.core.errors import UnsupportedValueError

Primitive = str | int | float | bool | None

_PRIMITIVE_TYPES: tuple[type, ...] = (str, int, float, bool, type(None))


@dataclass(frozen=True)
class MapNode:
    """Ordered mapping of keys to child nodes."""

    children: Mapping[object, ConfigNode] = field(default_factory=lambda: {})
    comment: str | None = None


@dataclass(frozen=True)
class ListNode:
    """Ordered sequence of child nodes."""

    children: Sequence[ConfigNode] = ()
    comment: str | None = None


@dataclass(frozen=True)
class ScalarNode:
    """A single primitive value."""

    value: Primitive = None
    comment: str | None = None


ConfigNode = MapNode | ListNode | ScalarNode

_NODE_TYPES: tuple[type, ...] = (MapNode, ListNode, ScalarNode)


def is_node(obj: object) -> bool:
    """Return True if ``obj`` is one of the three node kinds."""
    return isinstance(obj, _NODE_TYPES)


def to_node(value: object, *, comment: str | None = None) -> ConfigNode:
    """Build a configuration tree from plain Python data.

    Mappings become `MapNode` (keys kept as given, order preserved), lists and
    tuples become `ListNode`, primitives become `ScalarNode`. Values that are
    already nodes are kept; when ``comment`` is given it replaces theirs.

    Args:
        value (object): Python data or an existing node.
        comment (str | None): Comment to attach to the returned node.

    Returns:
        ConfigNode: The root of the built tree.

    Raises:
        UnsupportedValueError: If ``value`` (or any nested value) is of a type
            that has no node representation.
    """
    match value:
        case MapNode() | ListNode() | ScalarNode():
            return value if comment is None else replace(value, comment=comment)
        case Mapping():
            children: dict[object, ConfigNode] = {k: to_node(v) for k, v in value.items()}
            return MapNode(children, comment=comment)
        case list() | tuple():
            return ListNode(tuple(to_node(v) for v in value), comment=comment)
        case _ if isinstance(value, _PRIMITIVE_TYPES):
            return ScalarNode(value, comment=comment)  # type: ignore[arg-type]
        case _:
            raise UnsupportedValueError(value)


def to_python(node: ConfigNode) -> object:
    """Return the plain Python data held by ``node``, dropping comments."""
    match node:
        case MapNode(children=children):
            return {k: to_python(v) for k, v in children.items()}
        case ListNode(children=children):
            return [to_python(v) for v in children]
        case ScalarNode(value=value):
            return value
