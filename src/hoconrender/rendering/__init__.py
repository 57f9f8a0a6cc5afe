# topmark:header:start
#
#   project      : HoconRender
#   file         : __init__.py
#   file_relpath : src/hoconrender/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar literals, layout decisions and the tree renderer."""
