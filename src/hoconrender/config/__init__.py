# topmark:header:start
#
#   project      : HoconRender
#   file         : __init__.py
#   file_relpath : src/hoconrender/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render options, option files and logging."""
