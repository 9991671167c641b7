"""
showlog - Display the latest glftpd dirlog and nukelog entries.

This package decodes the binary dirlog and nukelog files written by glftpd
and prints the newest entries in an easy to parse, pipe delimited format
for scripts.
"""

__version__ = "1.0.0"

from .core.retriever import LogRetriever
from .core.scanner import ReverseScanner
from .core.layout import get_layout

__all__ = ["LogRetriever", "ReverseScanner", "get_layout"]
