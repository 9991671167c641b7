"""Formatting of log entries for script consumption."""

import struct

from ..core.models import DirEntry, NukeEntry


def as_float32(value: float) -> float:
    """Round a number to the nearest single precision float.

    Args:
        value: Number to round.

    Returns:
        The value as it would be stored in a C ``float``.
    """
    return struct.unpack("<f", struct.pack("<f", value))[0]


def as_uint32(value: int) -> int:
    """Wrap an integer into the unsigned 32-bit range.

    Args:
        value: Integer to wrap.

    Returns:
        Value modulo 2**32.
    """
    return value & 0xFFFFFFFF


def format_kilobytes(value: float) -> str:
    """Format a kilobyte amount without decimals.

    Args:
        value: Amount in kilobytes.

    Returns:
        Rounded amount, e.g. ``"2"``.
    """
    return f"{value:.0f}"


def format_dir_entry(entry: DirEntry) -> str:
    """Format a dirlog entry.

    Format: ``status|uptime|uploader|group|files|kilobytes|dirname``.
    Byte counts are converted to kilobytes (divided by 1024).

    Args:
        entry: Decoded dirlog entry.

    Returns:
        Pipe delimited line without trailing newline.
    """
    kilobytes = as_float32(entry.byte_count) / 1024.0
    return "|".join([
        str(int(entry.status)),
        str(as_uint32(entry.creation_time)),
        str(entry.uploader_id),
        str(entry.group_id),
        str(entry.file_count),
        format_kilobytes(kilobytes),
        entry.dirname,
    ])


def format_nuke_entry(entry: NukeEntry) -> str:
    """Format a nukelog entry.

    Format: ``status|nuketime|nuker|unnuker|nukee|multiplier|reason|kilobytes|dirname``.
    The stored amount is multiplied by 1024, unlike dirlog byte counts.

    Args:
        entry: Decoded nukelog entry.

    Returns:
        Pipe delimited line without trailing newline.
    """
    return "|".join([
        str(int(entry.status)),
        str(as_uint32(entry.nuke_time)),
        entry.nuker,
        entry.unnuker,
        entry.nukee,
        str(entry.multiplier),
        entry.reason,
        format_kilobytes(entry.byte_amount * 1024.0),
        entry.dirname,
    ])
