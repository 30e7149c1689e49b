from __future__ import annotations


# Block geometry
BLOCK_SIZE = 512
EOF_PADDING = 512

NUL = "\x00"

# Header field offsets/widths (bytes)
NAME_OFFSET = 0
NAME_WIDTH = 100
MODE_OFFSET = 100
UID_OFFSET = 108
GID_OFFSET = 116
SIZE_OFFSET = 124
MTIME_OFFSET = 136
CHKSUM_OFFSET = 148
CHKSUM_WIDTH = 8
TYPEFLAG_OFFSET = 156
MAGIC_OFFSET = 257

SIZE_DIGITS = 11
MTIME_DIGITS = 11
CHKSUM_DIGITS = 6

# Fixed field text
MODE_FIELD = "0100777" + NUL
UID_FIELD = "0000000" + NUL
GID_FIELD = "0000000" + NUL
CHKSUM_PLACEHOLDER = "000000" + NUL + " "
TYPEFLAG_REGULAR = "0"
MAGIC_FIELD = "ustar" + NUL + "00"   # magic[6] + version[2]

LINKNAME_WIDTH = 100
TRAILING_WIDTH = BLOCK_SIZE - (MAGIC_OFFSET + len(MAGIC_FIELD))  # 247

# sum(CHKSUM_PLACEHOLDER) - 8 * ord(" "): the placeholder counts as 320,
# readers count the field as eight spaces (256).
CHKSUM_CORRECTION = 64

# Multi-tar part naming
TAR_SUFFIX = ".tar"

# Stage names: _part_ (entry), __part__ (checksummed), ___name___ (merged)
STAGE_MARK = "_"
STAGE_ENTRY = 1
STAGE_CHECKSUMMED = 2
STAGE_MERGED = 3
