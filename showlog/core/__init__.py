"""Core log decoding and retrieval."""

from .layout import RecordLayout, LayoutError, get_layout
from .models import DirEntry, NukeEntry, DirStatus, NukeStatus, LogQuery
from .retriever import LogRetriever
from .scanner import ReverseScanner

__all__ = [
    "RecordLayout", "LayoutError", "get_layout",
    "DirEntry", "NukeEntry", "DirStatus", "NukeStatus", "LogQuery",
    "LogRetriever", "ReverseScanner",
]
