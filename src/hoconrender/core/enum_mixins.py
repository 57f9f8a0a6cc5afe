# topmark:header:start
#
#   project      : HoconRender
#   file         : enum_mixins.py
#   file_relpath : src/hoconrender/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enum utilities for closed option sets that carry a literal payload.

Render options are closed enumerations (separator character, indent
character, comment prefix, ...). Each member carries:

    - a stable machine key (``.value``) used in TOML,
    - a literal payload (``.payload``) written into rendered output,
    - optional aliases accepted by ``parse()``.

Example:
    ```python
    class Separator(PayloadStrEnum):
        COLON = ("colon", ":", (":",))
        EQUALS = ("equals", "=", ("=",))

    assert Separator.COLON.payload == ":"
    assert Separator.parse("=") is Separator.EQUALS
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_PS = TypeVar("_PS", bound="PayloadStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match config keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class PayloadStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key and `.payload` a literal.

    Attributes:
        payload (str): Literal text this member contributes to rendered output.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    payload: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_PS],
        key: str,
        payload: str,
        aliases: Iterable[str] = (),
    ) -> _PS:
        """Create a new member with key, payload, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            payload (str): The literal written into rendered output.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _PS: The newly created enum member.
        """
        obj: _PS = str.__new__(cls, key)
        obj._value_ = key
        obj.payload = payload
        obj.aliases = tuple(aliases)
        return obj

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_PS], raw: str | None) -> _PS | None:
        """Parse a token into an enum member.

        Matches against the stable key (`.value`), the member name (`.name`),
        and any configured aliases. Key and name matching is case-insensitive
        and normalizes '-' and ' ' to '_'; aliases are compared verbatim first
        so punctuation aliases such as ``":"`` or ``"//"`` stay distinct.
        """
        if raw is None:
            return None
        for m in cls:
            if raw in m.aliases:
                return m

        token: str = _norm_token(raw)
        if not token:
            return None
        for m in cls:
            if token == _norm_token(m.value):
                return m
            if token == _norm_token(m.name):
                return m
            for a in m.aliases:
                if token == _norm_token(a):
                    return m
        return None
