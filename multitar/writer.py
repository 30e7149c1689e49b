from __future__ import annotations

from typing import List, Optional, Sequence

from .checksum import write_checksum
from .codec import null_padding
from .constants import BLOCK_SIZE, EOF_PADDING, NUL, STAGE_CHECKSUMMED
from .errors import FileWriteError
from .header import write_tar_entry
from .stage import DiskStage, MemoryStage, stage_name
from .volume import ArchiveEntry, merge_entries, part_name, plan_entries


def end_of_archive() -> bytes:
    """Two NUL blocks followed by EOF_PADDING * 2 - 1 further NUL bytes."""
    # Longer than the conventional two-block terminator by EOF_PADDING * 2 - 1 bytes.
    return (NUL * (BLOCK_SIZE * 2) + null_padding(EOF_PADDING * 2)).encode("ascii")


def finalize_tar(stage, temp: str, tarname: str) -> int:
    """Write staged ``temp`` plus the end-of-archive trailer to ``tarname``.

    ``temp`` is removed from the stage once the output has been written and
    closed. Returns the number of bytes written.
    """
    contents = stage.read(temp) + end_of_archive()
    try:
        with open(tarname, "wb") as fh:
            fh.write(contents)
    except OSError as exc:
        raise FileWriteError(f"Cannot write archive {tarname}: {exc}") from exc
    stage.remove(temp)
    return len(contents)


class TarWriter:
    """Writer that encodes files one at a time into staged archive parts.

    A writer holding a single entry named after the output itself is
    finalized directly; any other set of entries is merged in order first.
    """

    def __init__(self, out_path: str, *, spool_dir: Optional[str] = None, quiet: bool = True):
        self.out_path = out_path
        self.quiet = quiet
        self.stage = DiskStage(spool_dir) if spool_dir is not None else MemoryStage()
        self.entries: List[ArchiveEntry] = []
        self._staged: List[str] = []
        self._merged: Optional[str] = None
        self._finalized = False
        self._closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Drop in-memory buffers; spooled files from an unfinished archive are left in place."""
        if isinstance(self.stage, MemoryStage):
            self.stage.discard()
        self._staged = []
        self._merged = None
        self.entries = []
        self._closed = True

    def _check_open(self):
        if self._closed:
            raise RuntimeError("Archive not open")
        if self._finalized:
            raise RuntimeError("Archive already finalized")

    def add_file(self, fs_path: str, part: Optional[str] = None) -> str:
        """Encode ``fs_path`` as the next entry; ``part`` defaults to the indexed part name."""
        index = len(self.entries)
        entry = ArchiveEntry(index=index, part=part or part_name(self.out_path, index), file=fs_path)
        return self.add_entry(entry)

    def add_entry(self, entry: ArchiveEntry) -> str:
        self._check_open()
        if self._merged is not None:
            raise RuntimeError("Archive parts already merged")
        if stage_name(entry.part, STAGE_CHECKSUMMED) in self._staged:
            raise ValueError(f"Archive part {entry.part} already staged")
        header = write_tar_entry(self.stage, entry.part, entry.file)
        staged = write_checksum(self.stage, entry.part, header)
        self.entries.append(entry)
        self._staged.append(staged)
        if not self.quiet:
            print(f" adding: {entry.file} -> {entry.part}")
        return staged

    def finalize(self) -> int:
        """Merge staged parts (once) and write the output archive.

        If writing the output fails, the merged buffer stays staged and
        ``finalize()`` may be called again.
        """
        self._check_open()
        if self._merged is None:
            if len(self.entries) == 1 and self.entries[0].part == self.out_path:
                self._merged = self._staged[0]
            else:
                self._merged = merge_entries(self.stage, self.out_path, self._staged)
            self._staged = []
        written = finalize_tar(self.stage, self._merged, self.out_path)
        self._merged = None
        self._finalized = True
        if not self.quiet:
            print(f"Done: {len(self.entries)} files, {written} bytes -> {self.out_path}")
        self.entries = []
        return written


def create_single_tar(tarname: str, filename: str, *, spool_dir: Optional[str] = None, quiet: bool = True) -> None:
    """Build a one-file archive at ``tarname``."""
    with TarWriter(tarname, spool_dir=spool_dir, quiet=quiet) as w:
        w.add_entry(ArchiveEntry(index=0, part=tarname, file=filename))
        w.finalize()


def create_multi_tar(tarname: str, filenames: Sequence[str], *, spool_dir: Optional[str] = None, quiet: bool = True) -> None:
    """Build an archive at ``tarname`` from ``filenames``, one archive part per file.

    Paths of 100 bytes or more are skipped without error.
    """
    with TarWriter(tarname, spool_dir=spool_dir, quiet=quiet) as w:
        for entry in plan_entries(tarname, filenames, quiet=quiet):
            w.add_entry(entry)
        w.finalize()
