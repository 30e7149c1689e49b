"""
multitar: a write-only UStar tape-archive encoder.

Features:

- Fixed 512-byte UStar headers (name, size, mtime, checksum, "ustar\\0" "00" magic)
  followed by NUL-padded data blocks.
- Multi-tar assembly: each input file is encoded as its own archive part
  (``out.tar`` -> ``out.0.tar``, ``out.1.tar``...) and the parts are merged into
  a single output stream.
- Intermediate buffers are kept in memory, or spooled to disk with ``spool_dir``.

There is no reading or extraction path; any standard tar reader can list and
extract the output.
"""

from .errors import MultitarError, FileAccessError, FileWriteError
from .writer import TarWriter, create_single_tar, create_multi_tar

__version__ = "0.1"

__all__ = [
    "constants",
    "codec",
    "header",
    "checksum",
    "volume",
    "writer",
    "TarWriter",
    "create_single_tar",
    "create_multi_tar",
    "MultitarError",
    "FileAccessError",
    "FileWriteError",
]
