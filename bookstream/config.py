"""
Configuration management for bookstream.

Query thresholds default to the values the operations are defined with.
Users may override them in:
- XDG config directory: ~/.config/bookstream/config.json
- Fallback: ~/.bookstream/config.json
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class QueryConfig:
    """Constants used by the book queries."""
    author_prefix: str = "Автор"
    recommend_keyword: str = "рекомендую"
    cheap_price_limit: float = 100.0
    partition_threshold: float = 50.0
    title_sample_size: int = 3

    def __post_init__(self):
        for name in ('author_prefix', 'recommend_keyword'):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be a string, got {getattr(self, name)!r}")
        for name in ('cheap_price_limit', 'partition_threshold'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a number, got {value!r}")
        if isinstance(self.title_sample_size, bool) or not isinstance(self.title_sample_size, int):
            raise TypeError(f"title_sample_size must be an integer, got {self.title_sample_size!r}")
        if self.title_sample_size < 0:
            raise ValueError(f"title_sample_size must not be negative, got {self.title_sample_size}")


@dataclass
class BookstreamConfig:
    """Main bookstream configuration."""
    query: QueryConfig = field(default_factory=QueryConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"query": asdict(self.query)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BookstreamConfig':
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise TypeError(f"Config must be a JSON object, got {type(data).__name__}")
        return cls(query=QueryConfig(**data.get("query", {})))


def get_config_path() -> Path:
    """
    Get configuration file path.

    Follows XDG Base Directory specification:
    1. ~/.config/bookstream/config.json
    2. Fallback: ~/.bookstream/config.json
    """
    xdg_config_home = Path.home() / ".config"
    if xdg_config_home.exists():
        config_dir = xdg_config_home / "bookstream"
    else:
        config_dir = Path.home() / ".bookstream"

    return config_dir / "config.json"


def load_config() -> BookstreamConfig:
    """
    Load configuration from file.

    Returns:
        BookstreamConfig with loaded values, or defaults when the file is
        missing or unreadable
    """
    config_path = get_config_path()

    if not config_path.exists():
        return BookstreamConfig()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return BookstreamConfig.from_dict(data)
    except (json.JSONDecodeError, OSError, TypeError, ValueError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}; using defaults")
        return BookstreamConfig()


def save_config(config: BookstreamConfig) -> None:
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)

    logger.info(f"Configuration saved to {config_path}")


def update_config(
    author_prefix: Optional[str] = None,
    recommend_keyword: Optional[str] = None,
    cheap_price_limit: Optional[float] = None,
    partition_threshold: Optional[float] = None,
    title_sample_size: Optional[int] = None,
) -> BookstreamConfig:
    """
    Update configuration.

    Only updates provided values, leaving others unchanged.

    Raises:
        TypeError, ValueError: If a value is invalid; nothing is saved then
    """
    config = load_config()

    if author_prefix is not None:
        config.query.author_prefix = author_prefix
    if recommend_keyword is not None:
        config.query.recommend_keyword = recommend_keyword
    if cheap_price_limit is not None:
        config.query.cheap_price_limit = cheap_price_limit
    if partition_threshold is not None:
        config.query.partition_threshold = partition_threshold
    if title_sample_size is not None:
        config.query.title_sample_size = title_sample_size

    # Rebuild so the new values are validated
    config.query = QueryConfig(**asdict(config.query))

    save_config(config)
    return config
