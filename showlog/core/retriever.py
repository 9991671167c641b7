"""Retrieval of the latest matching log entries."""

import logging
from typing import BinaryIO, Callable, Iterator, TypeVar

from .layout import RecordLayout
from .matcher import basename, match_any_pattern, matchpath, subcomp
from .models import DirEntry, DirStatus, LogQuery, NukeEntry, NukeStatus
from .scanner import ReverseScanner

Entry = TypeVar("Entry", DirEntry, NukeEntry)


class LogRetriever:
    """Pulls the newest qualifying entries out of a dirlog or nukelog."""

    def __init__(self, layout: RecordLayout, excluded_paths: str = "", excluded_subdirs: str = ""):
        """Initialize log retriever.

        Args:
            layout: Record layout of the installed glftpd build.
            excluded_paths: Space separated root paths hidden from dirlog output.
            excluded_subdirs: Comma separated subdirectory name tokens hidden
                from dirlog output.
        """
        self.layout = layout
        self.excluded_paths = excluded_paths
        self.excluded_subdirs = excluded_subdirs
        self.logger = logging.getLogger(__name__)

    def newdirs(self, fp: BinaryIO, query: LogQuery) -> Iterator[DirEntry]:
        """Yield the latest dirlog entries matching ``query``, newest first.

        Only NEWDIR entries are returned unless ``query.search_mode`` is set.
        """
        return self._retrieve(
            fp, query, self.layout.dirlog_size, self.layout.decode_dir,
            DirStatus.NEWDIR, self._is_excluded
        )

    def nukes(self, fp: BinaryIO, query: LogQuery) -> Iterator[NukeEntry]:
        """Yield the latest nukelog entries matching ``query``, newest first.

        ``query.status`` selects nukes or unnukes and defaults to NUKED.
        """
        status = NukeStatus.NUKED if query.status is None else query.status
        return self._retrieve(
            fp, query, self.layout.nukelog_size, self.layout.decode_nuke,
            status, lambda entry: False
        )

    def _is_excluded(self, entry: DirEntry) -> bool:
        return (matchpath(self.excluded_paths, entry.dirname)
                or subcomp(self.excluded_subdirs, entry.dirname))

    def _retrieve(self, fp: BinaryIO, query: LogQuery, record_size: int,
                  decode: Callable[[bytes], Entry], status: int,
                  excluded: Callable[[Entry], bool]) -> Iterator[Entry]:
        found = 0
        scanned = 0

        for record in ReverseScanner(fp, record_size):
            scanned += 1
            entry = decode(record)

            if not query.search_mode and entry.status != status:
                continue
            if excluded(entry):
                continue
            if query.patterns is not None and not self._matches(entry, query):
                continue

            yield entry
            found += 1
            if found >= query.max_results:
                break

        self.logger.debug(f"Scanned {scanned} records, returned {found}")

    @staticmethod
    def _matches(entry: Entry, query: LogQuery) -> bool:
        target = entry.dirname if query.match_full else basename(entry.dirname)
        return match_any_pattern(query.patterns, target)
