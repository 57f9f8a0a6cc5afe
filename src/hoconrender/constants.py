# topmark:header:start
#
#   project      : HoconRender
#   file         : constants.py
#   file_relpath : src/hoconrender/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HoconRender constants."""

from __future__ import annotations

from typing import Final

# Lists whose rendered elements reach this many characters are written in block form.
INLINE_LIST_MAX_LENGTH: Final[int] = 80

# Option files
DEFAULT_TOML_CONFIG_NAME: Final[str] = "hoconrender.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "tool.hoconrender"
