"""Global configuration: hashing constants and environment keys."""

from pathlib import Path

# Content hash used for files and for the rendered table
HASH_ALGORITHM = "sha256"

# Raw digest size in bytes (64 lowercase hex characters)
DIGEST_SIZE = 32

# Read size when streaming file contents into the hasher
CHUNK_SIZE = 65536

# Separator between digest and path, as written by sha256sum
LINE_SEPARATOR = "  "

# Prefix of root-relative output paths
RELATIVE_PREFIX = "./"

# SHA-256 of the empty byte sequence (digest of an empty table)
EMPTY_DIGEST_HEX = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

# Environment variables read by the ConfigManager
ENV_PREFIX = "TREEHASH_"
ENV_LOG_LEVEL = "TREEHASH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Default directory hashed by the command line when no path is given
DEFAULT_ROOT = Path(".")
