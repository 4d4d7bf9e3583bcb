# -*- coding: utf-8 -*-
"""
Persistence of the best score through small key-value stores.
"""

from .best import BEST_SCORE_KEY, BestScoreRecord, parse_score
from .store import JsonFileStore, KeyValueStore, MemoryStore, StorageError

__all__ = [
    "BEST_SCORE_KEY",
    "BestScoreRecord",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "StorageError",
    "parse_score",
]
