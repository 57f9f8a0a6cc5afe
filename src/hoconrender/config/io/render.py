# topmark:header:start
#
#   project      : HoconRender
#   file         : render.py
#   file_relpath : src/hoconrender/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render option tables as TOML.

TOML has no `null` value, so `None` entries are stripped during rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from hoconrender.config.logging import get_logger

if TYPE_CHECKING:
    from hoconrender.config.logging import HoconRenderLogger

    from .types import TomlTable

logger: HoconRenderLogger = get_logger(__name__)


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings and lists."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            k: str = k_any if isinstance(k_any, str) else str(k_any)
            out[k] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]

    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def nest_toml_under_section(toml_dict: TomlTable, section: str) -> TomlTable:
    """Return ``toml_dict`` nested under a dotted ``section`` (e.g. ``tool.hoconrender``).

    Raises:
        ValueError: If ``section`` is empty or contains an empty segment.
    """
    segments: list[str] = section.split(".")
    if not section or any(not s for s in segments):
        raise ValueError(f"Invalid TOML section path: {section!r}")
    nested: TomlTable = toml_dict
    for segment in reversed(segments):
        nested = {segment: nested}
    return nested
