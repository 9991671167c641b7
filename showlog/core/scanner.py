"""Backward scanning of fixed-size record files."""

import io
import logging
from typing import BinaryIO, Iterator


class ReverseScanner:
    """Walks a file of fixed-size records from the newest record to the oldest."""

    def __init__(self, fp: BinaryIO, record_size: int):
        """Initialize reverse scanner.

        Args:
            fp: Open, readable and seekable binary file handle.
            record_size: Size of one record in bytes.
        """
        if record_size <= 0:
            raise ValueError(f"Record size must be positive, got {record_size}")
        self.fp = fp
        self.record_size = record_size
        self.logger = logging.getLogger(__name__)

    def __iter__(self) -> Iterator[bytes]:
        return self.records()

    def records(self) -> Iterator[bytes]:
        """Yield raw records, newest first.

        The scan ends quietly at the start of the file, on a failed seek or
        read, or on a short read. Trailing bytes that do not form a whole
        record are never returned.
        """
        try:
            end = self.fp.seek(0, io.SEEK_END)
        except OSError as e:
            self.logger.warning(f"Unable to seek to end of log: {e}")
            return

        partial = end % self.record_size
        if partial:
            self.logger.warning(f"Skipping {partial} trailing bytes of a partial record")
        position = end - partial

        while position >= self.record_size:
            position -= self.record_size
            try:
                self.fp.seek(position)
                record = self.fp.read(self.record_size)
            except OSError as e:
                self.logger.warning(f"Read failed at offset {position}: {e}")
                return

            if len(record) < self.record_size:
                self.logger.debug(f"Short read at offset {position}, ending scan")
                return

            yield record
