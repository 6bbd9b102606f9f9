"""Constants shared by BOM processing and option building."""

from __future__ import annotations

UTF8_BOM = b"\xef\xbb\xbf"
UTF8_BOM_LENGTH = len(UTF8_BOM)

# 4KB chunk for shift/copy loops
MAX_BUFFER_SIZE = 4096

COPY_DIRECTORY_NAME = "DeBOM Copied"
DEFAULT_PATTERN = "*"
