# topmark:header:start
#
#   project      : HoconRender
#   file         : __init__.py
#   file_relpath : src/hoconrender/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared across HoconRender: errors, diagnostics and enum helpers."""
