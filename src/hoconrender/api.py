# topmark:header:start
#
#   project      : HoconRender
#   file         : api.py
#   file_relpath : src/hoconrender/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public entry points.

Example:
    ```python
    from hoconrender import LineSeparator, RenderOptions, render_value

    options = RenderOptions().replace(line_separator=LineSeparator.LF)
    text = render_value({"a": 1, "b": {"c": 2}}, options)
    assert text == "a: 1\\nb {\\n    c: 2\\n}\\n"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hoconrender.rendering.renderer import HoconRenderer
from hoconrender.tree.nodes import to_node

if TYPE_CHECKING:
    from hoconrender.config.options import RenderOptions
    from hoconrender.tree.nodes import ConfigNode


def render(root: ConfigNode, options: RenderOptions | None = None) -> str:
    """Render a configuration tree.

    Args:
        root (ConfigNode): Root node; a map root is written without braces.
        options (RenderOptions | None): Formatting options; defaults when None.

    Returns:
        str: The complete document.

    Raises:
        HoconRenderError: If the tree cannot be rendered. No partial output is
            returned.
    """
    return HoconRenderer(options).render(root)


def render_value(value: object, options: RenderOptions | None = None) -> str:
    """Render plain Python data (dicts, lists, primitives and nodes).

    Args:
        value (object): Data converted with `hoconrender.tree.nodes.to_node`.
        options (RenderOptions | None): Formatting options; defaults when None.

    Returns:
        str: The complete document.
    """
    return render(to_node(value), options)
