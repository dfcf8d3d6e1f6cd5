# Shared library constants

# --- Logging ---
# Level name read from the environment the first time a logger is used.
LOG_LEVEL_ENV = "MULTIHASH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# --- Encoding ---
# Text form used by str() on a multihash digest.
DEFAULT_BASE = "base58"

# Bases printed by the `mh hash` command, in order.
CLI_BASES = ("base16", "base58", "base64")

# --- Streaming ---
# These values can be monkeypatched in tests to force many small chunks.
STREAM_CHUNK_SIZE = 64 * 1024

# --- Errors ---
# Callers match on this prefix, spelling included.
CORRUPTED_PREFIX = "Corrupted MultihasDigest"
