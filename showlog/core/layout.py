"""On-disk record layouts of the glftpd dirlog and nukelog.

glftpd has shipped several incompatible binary layouts for its log
records. Builds for 32-bit hosts and the "packed" 64-bit builds force
4-byte structure alignment and store times as 32-bit integers, while the
2.01 64-bit build (20164) uses natural alignment, 64-bit ``time_t`` and
carries two unused list pointers at the end of every record.

Only one layout is ever active for a given installation, so the layout
is looked up once from the configured glftpd version and then used for
every record of a scan.
"""

import struct
from dataclasses import dataclass
from typing import Tuple

from .models import DirEntry, NukeEntry

TEXT_ENCODING = "latin-1"

_DIR_FIELDS = 7
_NUKE_FIELDS = 9


class LayoutError(ValueError):
    """Raised when a buffer or version does not fit a known record layout."""


def _text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(TEXT_ENCODING)


def _raw(text: str) -> bytes:
    return text.encode(TEXT_ENCODING)


@dataclass(frozen=True)
class RecordLayout:
    """Binary shape of the dirlog and nukelog records for one glftpd build.

    Both structs are little-endian with every alignment gap spelled out,
    so the sizes do not depend on the host running showlog.
    """
    name: str
    versions: Tuple[int, ...]
    dir_struct: struct.Struct
    nuke_struct: struct.Struct
    dir_padding: tuple
    nuke_padding: tuple

    @property
    def dirlog_size(self) -> int:
        return self.dir_struct.size

    @property
    def nukelog_size(self) -> int:
        return self.nuke_struct.size

    def decode_dir(self, buffer: bytes) -> DirEntry:
        """Decode one dirlog record from the start of ``buffer``.

        Raises:
            LayoutError: If the buffer is shorter than one record.
        """
        self._check_length(buffer, self.dir_struct, "dirlog")
        fields = self.dir_struct.unpack_from(buffer)[:_DIR_FIELDS]
        status, uptime, uploader, group, files, size, dirname = fields
        return DirEntry.from_raw(status, uptime, uploader, group, files, size, _text(dirname))

    def decode_nuke(self, buffer: bytes) -> NukeEntry:
        """Decode one nukelog record from the start of ``buffer``.

        Raises:
            LayoutError: If the buffer is shorter than one record.
        """
        self._check_length(buffer, self.nuke_struct, "nukelog")
        fields = self.nuke_struct.unpack_from(buffer)[:_NUKE_FIELDS]
        status, nuketime, nuker, unnuker, nukee, mult, amount, reason, dirname = fields
        return NukeEntry.from_raw(
            status, nuketime, _text(nuker), _text(unnuker), _text(nukee),
            mult, amount, _text(reason), _text(dirname)
        )

    def encode_dir(self, entry: DirEntry) -> bytes:
        """Encode a dirlog record, zero filling the unused trailing fields."""
        return self.dir_struct.pack(
            int(entry.status), entry.creation_time, entry.uploader_id, entry.group_id,
            entry.file_count, entry.byte_count, _raw(entry.dirname), *self.dir_padding
        )

    def encode_nuke(self, entry: NukeEntry) -> bytes:
        """Encode a nukelog record, zero filling the unused trailing fields."""
        return self.nuke_struct.pack(
            int(entry.status), entry.nuke_time, _raw(entry.nuker), _raw(entry.unnuker),
            _raw(entry.nukee), entry.multiplier, entry.byte_amount, _raw(entry.reason),
            _raw(entry.dirname), *self.nuke_padding
        )

    @staticmethod
    def _check_length(buffer: bytes, record: struct.Struct, kind: str) -> None:
        if len(buffer) < record.size:
            raise LayoutError(
                f"Short {kind} record: got {len(buffer)} bytes, expected {record.size}"
            )


# 4-byte packed nukelog shared by every build except 20164.
_PACKED_NUKELOG = struct.Struct("<H2xi12s12s12sH2xf60s255s8s1x")

GL_13232 = RecordLayout(
    name="13232",
    versions=(13232,),
    dir_struct=struct.Struct("<H2xiHHH2xi255s8s1x"),
    nuke_struct=_PACKED_NUKELOG,
    dir_padding=(b"",),
    nuke_padding=(b"",),
)

GL_20032 = RecordLayout(
    name="20032",
    versions=(20032, 20132, 20232, 20264),
    dir_struct=struct.Struct("<H2xiHHH2xQ255s8s1x"),
    nuke_struct=_PACKED_NUKELOG,
    dir_padding=(b"",),
    nuke_padding=(b"",),
)

GL_20164 = RecordLayout(
    name="20164",
    versions=(20164,),
    dir_struct=struct.Struct("<H6xqHHH2xQ255s1xQQ"),
    nuke_struct=struct.Struct("<H6xq12s12s12sH2xf60s255s1xQQ"),
    dir_padding=(0, 0),
    nuke_padding=(0, 0),
)

LAYOUT_VARIANTS = (GL_13232, GL_20032, GL_20164)

KNOWN_VERSIONS = tuple(sorted(
    version for layout in LAYOUT_VARIANTS for version in layout.versions
))

DEFAULT_VERSION = 20264


def get_layout(version: int) -> RecordLayout:
    """Return the record layout used by the given glftpd version id.

    Raises:
        LayoutError: If the version is not one of ``KNOWN_VERSIONS``.
    """
    for layout in LAYOUT_VARIANTS:
        if version in layout.versions:
            return layout
    raise LayoutError(
        f"Unknown glftpd version {version!r}, expected one of {list(KNOWN_VERSIONS)}"
    )
