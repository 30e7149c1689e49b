from __future__ import annotations

from .codec import to_octal_padded
from .constants import CHKSUM_CORRECTION, CHKSUM_DIGITS, CHKSUM_OFFSET, STAGE_ENTRY, STAGE_CHECKSUMMED
from .stage import stage_name


def calc_checksum(header: str) -> str:
    """Header checksum as 6 octal digits.

    Sums the code points of the unpatched header text (placeholder included),
    then removes CHKSUM_CORRECTION so the result matches a reader that counts
    the checksum field as eight spaces.
    """
    total = sum(ord(c) for c in header)
    return to_octal_padded(total - CHKSUM_CORRECTION, CHKSUM_DIGITS)


def write_checksum(stage, part: str, header: str) -> str:
    """Copy ``_<part>_`` to ``__<part>__`` with the checksum patched in at offset 148.

    Only the six digits are written; the NUL and space that close the field
    stay from the placeholder. Returns the new stage name.
    """
    src = stage_name(part, STAGE_ENTRY)
    dst = stage_name(part, STAGE_CHECKSUMMED)
    stage.put(dst, stage.read(src))
    stage.patch(dst, CHKSUM_OFFSET, calc_checksum(header).encode("ascii"))
    stage.remove(src)
    return dst
