from __future__ import annotations

import os
from dataclasses import dataclass

from .codec import null_padding, pad_data, to_octal_padded
from .constants import (
    NAME_WIDTH,
    LINKNAME_WIDTH,
    TRAILING_WIDTH,
    MODE_FIELD,
    UID_FIELD,
    GID_FIELD,
    CHKSUM_PLACEHOLDER,
    TYPEFLAG_REGULAR,
    MAGIC_FIELD,
    SIZE_DIGITS,
    MTIME_DIGITS,
    NUL,
    STAGE_ENTRY,
)
from .errors import FileAccessError, NameTooLongError
from .stage import stage_name


# Header record (512 bytes)
#  - name[100]      NUL-padded
#  - mode[8]        "0100777\0"
#  - uid[8]         "0000000\0"
#  - gid[8]         "0000000\0"
#  - size[12]       11 octal digits + NUL
#  - mtime[12]      11 octal digits + NUL
#  - chksum[8]      "000000\0 ", digits patched later
#  - typeflag[1]    "0"
#  - linkname[100]  NUL
#  - magic[8]       "ustar\0" "00"
#  - pad[247]       NUL


@dataclass
class HeaderRecord:
    name: str
    size: int
    mtime: int

    def text(self) -> str:
        """Unpatched header text; the checksum is computed over this string."""
        name_len = len(self.name.encode("utf-8"))
        if name_len >= NAME_WIDTH:
            raise NameTooLongError(f"Name is {name_len} bytes; header holds at most {NAME_WIDTH - 1}: {self.name}")
        return "".join((
            self.name,
            null_padding(NAME_WIDTH - name_len + 1),
            MODE_FIELD,
            UID_FIELD,
            GID_FIELD,
            to_octal_padded(self.size, SIZE_DIGITS) + NUL,
            to_octal_padded(self.mtime, MTIME_DIGITS) + NUL,
            CHKSUM_PLACEHOLDER,
            TYPEFLAG_REGULAR,
            null_padding(LINKNAME_WIDTH + 1),
            MAGIC_FIELD,
            null_padding(TRAILING_WIDTH + 1),
        ))


def build_header(name: str, size: int, mtime: int) -> str:
    return HeaderRecord(name=name, size=size, mtime=mtime).text()


def read_input(fs_path: str):
    """Return (size, mtime_sec, content) for ``fs_path``."""
    try:
        st = os.stat(fs_path)
        with open(fs_path, "rb") as fh:
            content = fh.read()
    except OSError as exc:
        raise FileAccessError(f"Cannot read {fs_path}: {exc}") from exc
    return st.st_size, int(st.st_mtime), content


def write_tar_entry(stage, part: str, fs_path: str) -> str:
    """Stage header + padded data for ``fs_path`` under ``_<part>_``.

    The header is named after ``fs_path`` as given. Returns the unpatched
    header text for the checksum pass.
    """
    size, mtime, content = read_input(fs_path)
    record = HeaderRecord(name=fs_path, size=size, mtime=mtime)
    header = record.text()
    stage.put(stage_name(part, STAGE_ENTRY), header.encode("utf-8") + pad_data(content))
    return header
