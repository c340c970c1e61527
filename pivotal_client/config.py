"""
Configuration loader for the Pivotal Tracker client.
Loads settings from config.json with fallback defaults.
"""

import json
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Optional, Union

from pivotal_client.utils.logging_config import get_logger

logger = get_logger("config")

DEFAULT_BASE_URL = "https://www.pivotaltracker.com/services/v5"


@dataclass
class ApiConfig:
    """API configuration."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    connect_timeout: float = 10.0
    user_agent: str = "pivotal-client/0.1.0"


@dataclass
class AuthConfig:
    """API token sent as X-TrackerToken."""
    token: str = ""


@dataclass
class PaginationConfig:
    """Paginated listing configuration."""
    page_limit: int = 10


@dataclass
class Config:
    """Root configuration object."""
    api: ApiConfig = field(default_factory=ApiConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create Config from dictionary."""
        return cls(
            api=ApiConfig(**data.get("api", {})),
            auth=AuthConfig(**data.get("auth", {})),
            pagination=PaginationConfig(**data.get("pagination", {})),
        )

    def to_dict(self) -> dict:
        """Convert Config to dictionary."""
        return asdict(self)


def load_config(config_path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to config.json. If None, looks in the package directory.

    Returns:
        Config populated from JSON, or defaults if the file is missing or invalid.
    """
    if config_path is None:
        resolved_path = Path(__file__).parent / "config.json"
    else:
        resolved_path = Path(config_path)

    if not resolved_path.exists():
        logger.debug(f"{resolved_path} not found. Using defaults.")
        return Config()

    try:
        with open(resolved_path) as f:
            data = json.load(f)
        config = Config.from_dict(data)
    except (ValueError, TypeError, AttributeError) as e:
        logger.warning(f"Error loading {resolved_path}: {e}. Using defaults.")
        return Config()

    logger.debug(f"Loaded configuration from {resolved_path}")
    return config


# Global config singleton
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global config singleton, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[Config]) -> None:
    """Set global config singleton (for testing)."""
    global _config
    _config = config
