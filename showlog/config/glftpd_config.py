"""Reading of the glftpd configuration file."""

import logging
import os
import re
from dataclasses import dataclass, field

DEFAULT_GLFTPD_CONFIG = "/etc/glftpd.conf"
DEFAULT_ROOTPATH = "/glftpd"
DEFAULT_DATAPATH = "/ftp-data"

logger = logging.getLogger(__name__)

# ASCII whitespace only, latin-1 \xa0 and \x85 stay part of a word.
_WHITESPACE = re.compile(r"[ \t\n\r\f\v]+")


@dataclass(frozen=True)
class GlftpdPaths:
    """Location of the glftpd data directory."""
    rootpath: str = DEFAULT_ROOTPATH
    datapath: str = DEFAULT_DATAPATH
    loaded: bool = field(default=True, compare=False)

    @property
    def logs_dir(self) -> str:
        return f"{self.rootpath}{self.datapath}/logs"

    @property
    def dirlog_path(self) -> str:
        return f"{self.logs_dir}/dirlog"

    @property
    def nukelog_path(self) -> str:
        return f"{self.logs_dir}/nukelog"


def _printable(text: str) -> str:
    return "".join(ch for ch in text if " " <= ch <= "~")


def parse_config_line(line: str):
    """Split a glftpd.conf line into a key and a value.

    Comments start at ``#``. Runs of whitespace collapse to a single space.

    Returns:
        Tuple of (key, value); both empty for blank or comment lines.
    """
    words = _WHITESPACE.split(line.split("#", 1)[0])
    line = " ".join(word for word in words if word)
    key, _, value = line.partition(" ")
    return _printable(key), _printable(value)


def load_glftpd_config(config_file: str = DEFAULT_GLFTPD_CONFIG) -> GlftpdPaths:
    """Load ``rootpath`` and ``datapath`` from a glftpd configuration file.

    Args:
        config_file: Path to glftpd.conf.

    Returns:
        The configured paths, with defaults for anything not set. An
        unreadable file yields the defaults with ``loaded`` set to False.
    """
    rootpath = DEFAULT_ROOTPATH
    datapath = DEFAULT_DATAPATH

    try:
        with open(os.path.expanduser(config_file), "r", encoding="latin-1") as f:
            for line in f:
                key, value = parse_config_line(line)
                if key.lower() == "datapath":
                    datapath = value
                elif key.lower() == "rootpath":
                    rootpath = value
    except OSError as e:
        logger.debug(f"Cannot read glftpd config {config_file}: {e}")
        return GlftpdPaths(loaded=False)

    logger.debug(f"Loaded glftpd config {config_file}: rootpath={rootpath} datapath={datapath}")
    return GlftpdPaths(rootpath=rootpath, datapath=datapath)
