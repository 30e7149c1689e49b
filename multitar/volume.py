from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .constants import NAME_WIDTH, STAGE_MERGED, TAR_SUFFIX
from .stage import stage_name


_TAR_SUFFIX_RE = re.compile(re.escape(TAR_SUFFIX) + r"$")


@dataclass
class ArchiveEntry:
    index: int  # ordinal in the caller's input list, not among included entries
    part: str
    file: str


def part_name(tarname: str, index: int) -> str:
    """Derive the archive-part name for the entry at ``index``.

    ``out.tar`` -> ``out.<index>.tar``; names without a ``.tar`` suffix get
    ``.<index>`` appended.
    """
    if _TAR_SUFFIX_RE.search(tarname):
        return _TAR_SUFFIX_RE.sub(f".{index}{TAR_SUFFIX}", tarname)
    return f"{tarname}.{index}"


def fits_name_field(path: str) -> bool:
    return len(path.encode("utf-8")) < NAME_WIDTH


def plan_entries(tarname: str, filenames: Sequence[str], *, quiet: bool = True) -> List[ArchiveEntry]:
    """Build one ArchiveEntry per input whose path fits the header name field.

    Paths of NAME_WIDTH bytes or more are dropped without error. Included
    entries keep their original ordinal, so a dropped path leaves a gap in
    the part numbering.
    """
    entries: List[ArchiveEntry] = []
    for i, filename in enumerate(filenames):
        if not fits_name_field(filename):
            if not quiet:
                print(f"Warning: skipping {filename} (path is {NAME_WIDTH} bytes or longer)", file=sys.stderr)
            continue
        entries.append(ArchiveEntry(index=i, part=part_name(tarname, i), file=filename))
    return entries


def merge_entries(stage, tarname: str, staged: Iterable[str]) -> str:
    """Concatenate staged parts, in order, into ``___<tarname>___``.

    Each source is removed as soon as it has been consumed.
    """
    merged = bytearray()
    for name in staged:
        merged += stage.take(name)
    return stage.put(stage_name(tarname, STAGE_MERGED), bytes(merged))
