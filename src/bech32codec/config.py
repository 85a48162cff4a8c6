# Shared codec constants

# --- Wire format ---
CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
SEPARATOR = "1"
CHECKSUM_LENGTH = 6

# --- Checksum polynomial ---
GENERATORS = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
BECH32_CONST = 1
BECH32M_CONST = 0x2BC830A3

# --- Logging ---
# The level can be overridden per process without touching code.
LOG_LEVEL_ENV = "BECH32CODEC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
