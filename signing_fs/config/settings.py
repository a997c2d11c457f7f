"""Filesystem utility settings and configuration."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Temporary file settings
TEMP_DIR = os.getenv("SIGNING_FS_TEMP_DIR") or None  # None means the system temp dir
TEMP_FILE_PREFIX = os.getenv("SIGNING_FS_TEMP_PREFIX", "tempfile_")

# Hex decoding settings
HEX_STRICT = os.getenv("SIGNING_FS_HEX_STRICT", "false").lower() == "true"

# Permission bits added before a modification-time write
OWNER_RW_MODE = 0o600
