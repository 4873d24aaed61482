"""Data sources supplying games and controllers to the engine."""

from padmatch.sources.base import DataSource
from padmatch.sources.memory import MemorySource
from padmatch.sources.records import parse_controller_record, parse_game_record
from padmatch.sources.supabase import SupabaseSource

__all__ = [
    "DataSource",
    "MemorySource",
    "SupabaseSource",
    "parse_controller_record",
    "parse_game_record",
]
