"""
Core domain layer: records, the record store, window loading, sorting,
filtering and view composition
"""

from .data_view import DataView
from .record import Record
from .record_store import RecordStore
from .sort_engine import SortDirection, SortDirective
from .view_composer import ViewComposer
from .window_loader import LoadState, WindowLoader

__all__ = [
    "DataView",
    "LoadState",
    "Record",
    "RecordStore",
    "SortDirection",
    "SortDirective",
    "ViewComposer",
    "WindowLoader",
]
