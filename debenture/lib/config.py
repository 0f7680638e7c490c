"""Application configuration constants."""

from pathlib import Path

# Instrument arithmetic
BASIS_POINTS_DIVISOR = 100  # coupon_rate is in basis points; final payment divides by this
HOLDER_ID_BYTES = 32  # Fixed width of a debenture holder identity

# Contract scoping
DEFAULT_CONTRACT_ID = "default"
CONTRACT_ID_MAX_LENGTH = 64

# Environment overrides
DB_PATH_ENV_VAR = "DEBENTURE_DB_PATH"
CONTRACT_ID_ENV_VAR = "DEBENTURE_CONTRACT_ID"
LOG_FILE_ENV_VAR = "LOG_FILE"

# Local data directory (database, logs)
DATA_DIR = Path.home() / ".debenture"
