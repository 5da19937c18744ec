"""Amount constants for the wallet codec.

Centralizes the native coin scale and the display limits shared by the
converter and the formatter.
"""

# Native coin: 1 NXT = 10^8 NQT
NXT_DECIMALS = 8

# Asset quantities with more decimals are truncated to this many on display
MAX_DISPLAY_DECIMALS = 8

# Coin amounts passed as native numbers are rounded to cents on request
ROUND_DECIMALS = 2

# Percentages are always rendered with two fractional digits
PERCENTAGE_DECIMALS = 2

# Byte volume units, each 1024 times the previous one
VOLUME_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")
VOLUME_BASE = 1024
VOLUME_SEPARATOR = "'"

# HTML entity for an apostrophe, used where the output goes straight into markup
WEIGHT_SEPARATOR = "&#39;"
