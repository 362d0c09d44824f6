from gamerverse.services.sessions import MemorySessionStore, SessionStore, SqlSessionStore, build_session_store
from gamerverse.services.stats import compute_level_progress, compute_win_ratio, get_stats

__all__ = [
    "MemorySessionStore",
    "SessionStore",
    "SqlSessionStore",
    "build_session_store",
    "compute_level_progress",
    "compute_win_ratio",
    "get_stats",
]
