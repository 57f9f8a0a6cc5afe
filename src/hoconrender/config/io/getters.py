# topmark:header:start
#
#   project      : HoconRender
#   file         : getters.py
#   file_relpath : src/hoconrender/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML option tables.

Each getter validates the expected shape, records a **warning** in a
`DiagnosticLog` (and logs it) when the value is unusable, and returns
``None`` so the setting falls back to its inherited value.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeVar

from hoconrender.core.enum_mixins import PayloadStrEnum

if TYPE_CHECKING:
    from hoconrender.config.logging import HoconRenderLogger
    from hoconrender.core.diagnostics import DiagnosticLog

    from .types import TomlTable

E = TypeVar("E", bound=Enum)


def get_non_negative_int_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: HoconRenderLogger,
) -> int | None:
    """Return an optional non-negative int, warning when present but unusable.

    Notes:
        - Missing key -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
        - Negative integers are rejected.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    # Note: bool is a subclass of int; exclude it.
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
        return None

    if value < 0:
        logger.warning("Expected non-negative int in %s, got %r", loc, value)
        diagnostics.add_warning(f"Expected non-negative int in {loc}, got {value!r}")
        return None

    return int(value)


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: HoconRenderLogger,
) -> E | None:
    """Parse an enum value from TOML.

    Expected input is a `str` matching one of the Enum values (case-insensitive,
    ``-`` and ``_`` interchangeable). Members of `PayloadStrEnum` also accept
    their aliases (e.g. ``"="`` for `SeparatorCharacter.EQUALS`).

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown enum value -> warning + None
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        logger.warning(
            "Expected string enum value in %s, got %s: %r",
            loc,
            type(raw).__name__,
            raw,
        )
        diagnostics.add_warning(
            f"Expected string enum value in {loc}, got {type(raw).__name__}: {raw!r}"
        )
        return None

    member: E | None
    if issubclass(enum_cls, PayloadStrEnum):
        member = enum_cls.parse(raw)
    else:
        token: str = raw.strip().lower().replace("-", "_")
        member = next((m for m in enum_cls if m.value == token), None)

    if member is None:
        allowed: str = ", ".join(str(e.value) for e in enum_cls)
        logger.warning("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
        diagnostics.add_warning(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
    return member
