"""Data models for glftpd log entries."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union


class DirStatus(IntEnum):
    """Status of a dirlog entry."""
    NEWDIR = 0
    NUKE = 1
    UNNUKE = 2
    DELETED = 3


class NukeStatus(IntEnum):
    """Status of a nukelog entry."""
    NUKED = 0
    UNNUKED = 1


def _as_status(enum_type, value: int) -> Union[IntEnum, int]:
    """Map a raw status to its enum member, keeping unknown values as ints."""
    try:
        return enum_type(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class DirEntry:
    """A single dirlog record."""
    status: int
    creation_time: int
    uploader_id: int
    group_id: int
    file_count: int
    byte_count: int
    dirname: str

    @classmethod
    def from_raw(cls, status: int, *fields) -> "DirEntry":
        return cls(_as_status(DirStatus, status), *fields)


@dataclass(frozen=True)
class NukeEntry:
    """A single nukelog record."""
    status: int
    nuke_time: int
    nuker: str
    unnuker: str
    nukee: str
    multiplier: int
    byte_amount: float
    reason: str
    dirname: str

    @classmethod
    def from_raw(cls, status: int, *fields) -> "NukeEntry":
        return cls(_as_status(NukeStatus, status), *fields)


@dataclass(frozen=True)
class LogQuery:
    """Parameters of a single log retrieval."""
    max_results: int = 10
    search_mode: bool = False
    status: Optional[int] = None
    patterns: Optional[str] = None
    match_full: bool = False

    def __post_init__(self):
        if self.max_results < 1:
            raise ValueError(f"max_results must be at least 1, got {self.max_results}")
