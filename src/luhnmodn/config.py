# Shared library constants

MIN_BASE = 2
MAX_BASE = 16
DEFAULT_BASE = 10

# Glyphs for digit values 0..15. Parsing is case-insensitive, rendering is lower case.
DIGIT_ALPHABET = "0123456789abcdef"

# --- Integer width classes ---
INT32_MAX = 2**31 - 1
INT64_MAX = 2**63 - 1

# --- Logging Configuration ---
# Read on first use; tests can monkeypatch the environment variable.
LOG_LEVEL_ENV = "LUHNMODN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
