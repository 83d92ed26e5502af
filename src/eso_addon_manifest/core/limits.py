"""Thresholds applied when full validation is enabled.

Values follow the ESOUI wiki description of the addon manifest format:
https://wiki.esoui.com/Addon_manifest_(.txt)_format
"""

# The game client ignores anything past this many bytes on a directive line
MAX_DIRECTIVE_LINE_BYTES = 301

MAX_COMMENT_CHARS = 1024

MAX_TITLE_CHARS = 64

# Oldest APIVersion the client still loads
MIN_API_VERSION = 100003
