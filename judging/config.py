"""
Configuration loader
"""
import logging
import os
from pathlib import Path

import yaml

from judging.core.store import ScoreStore
from judging.models import Settings


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/judging.yaml"


def get_config_path() -> str:
    """Config path from JUDGING_CONFIG, falling back to the default"""
    return os.environ.get("JUDGING_CONFIG", DEFAULT_CONFIG_PATH)


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Settings:
    """
    Load configuration from YAML file

    Args:
        config_path: Path to config file

    Returns:
        Settings object

    Raises:
        FileNotFoundError: If config file not found
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return Settings(**data)


def seed_store(store: ScoreStore, settings: Settings) -> None:
    """
    Populate an empty store from settings

    Default categories and experts are only inserted when the store has none.
    Configured teams are always added.
    """
    if not store.list_categories():
        for name in settings.default_categories:
            store.add_category(name)

    if not store.list_experts():
        for name in settings.default_experts:
            store.add_expert(name)

    for team in settings.teams:
        store.add_team(team.name, team.order_number)

    counts = store.counts()
    logger.info(
        f"✅ Store seeded: {counts['categories']} categories, "
        f"{counts['experts']} experts, {counts['teams']} teams"
    )
