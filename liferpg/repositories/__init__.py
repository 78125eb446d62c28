"""
Repositories Layer
Data persistence and query operations for brain dumps.
"""
from .connection import db_manager, get_database, DatabaseManager
from .brain_dumps import BrainDumpRepository, ProcessingRecordRepository
from .base import BaseRepository

__all__ = [
    "db_manager",
    "get_database",
    "DatabaseManager",
    "BrainDumpRepository",
    "ProcessingRecordRepository",
    "BaseRepository",
]
