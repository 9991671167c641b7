from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pytest

from showlog.core.layout import GL_20032
from showlog.core.layout import RecordLayout
from showlog.core.models import DirEntry
from showlog.core.models import DirStatus
from showlog.core.models import NukeEntry
from showlog.core.models import NukeStatus


@pytest.fixture
def reset_logging():
    """Drop the handlers the CLI installs on the root logger."""
    root_logger = logging.getLogger()
    level = root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def dir_entry() -> Callable[..., DirEntry]:
    def factory(index: int, status: int = DirStatus.NEWDIR, dirname: str | None = None) -> DirEntry:
        return DirEntry(
            status=status,
            creation_time=1_700_000_000 + index,
            uploader_id=100 + index,
            group_id=200,
            file_count=index,
            byte_count=2048 * index,
            dirname=dirname or f"/site/incoming/Release.{index:02d}-GRP",
        )

    return factory


@pytest.fixture
def nuke_entry() -> Callable[..., NukeEntry]:
    def factory(index: int, status: int = NukeStatus.NUKED, dirname: str | None = None) -> NukeEntry:
        return NukeEntry(
            status=status,
            nuke_time=1_700_000_000 + index,
            nuker="siteop",
            unnuker="" if status == NukeStatus.NUKED else "admin",
            nukee="uploader",
            multiplier=3,
            byte_amount=float(index),
            reason="dupe",
            dirname=dirname or f"/site/incoming/Nuked.{index:02d}-GRP",
        )

    return factory


@pytest.fixture
def write_dirlog() -> Callable[..., Path]:
    """Write dirlog entries oldest first, the way glftpd appends them."""

    def writer(path: Path, entries: list[DirEntry], layout: RecordLayout = GL_20032) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"".join(layout.encode_dir(entry) for entry in entries))
        return path

    return writer


@pytest.fixture
def write_nukelog() -> Callable[..., Path]:
    def writer(path: Path, entries: list[NukeEntry], layout: RecordLayout = GL_20032) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"".join(layout.encode_nuke(entry) for entry in entries))
        return path

    return writer
