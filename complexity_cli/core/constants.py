"""
Constants used throughout the application.
"""

# Complexity labels
CONSTANT = "O(1)"
LOGARITHMIC = "O(log n)"
LINEAR = "O(n)"
QUADRATIC = "O(n²)"
LINEARITHMIC = "O(n log n)"
EXPONENTIAL = "O(2^n)"

# Block scanning
MAX_BLOCK_SPAN = 50  # Lines scanned past a declaration before giving up
TAB_WIDTH = 4

# File names
CONFIG_FILENAME = "complexity_cli_config.json"
STORE_DIR_NAME = ".complexity"
STORE_FILENAME = "results.json"

# Lens decorations
ANALYZE_LENS_TITLE = "🔍 Analyze Complexity"
TIME_ICON = "⏱️"
SPACE_ICON = "💾"
CLOCK_ICON = "🕒"
