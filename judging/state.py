"""
Global application state
Shared resources accessible across all modules
"""
from judging.core.store import ScoreStore
from judging.models import Settings

# Loaded at startup from the YAML config
SETTINGS: Settings = Settings()

# Single store instance used by every router
STORE: ScoreStore = ScoreStore()
