"""
Configuration management for the keyword sentiment service
"""

import logging
import os
from typing import Dict, List, Optional, Callable, Any
from dataclasses import dataclass
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_ANALYZE_DELAY_MS = 800
DEFAULT_TIME_FORMAT = "%I:%M %p"

@dataclass
class Config:
    # Environment
    APP_ENV: str
    PORT: int
    LOG_LEVEL: str

    # Network safety
    ALLOWED_ORIGINS: List[str]

    # Analysis
    ANALYZE_DELAY_MS: int

    # History
    HISTORY_TIME_FORMAT: str


ConfigListener = Callable[["Config", Dict[str, Any]], None]

_CONFIG_INSTANCE: Optional[Config] = None
_CONFIG_LISTENERS: List[ConfigListener] = []


def _parse_int(var: str, default: int) -> int:
    raw = os.getenv(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _parse_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _build_config() -> Config:
    """Create a new ``Config`` instance from environment variables."""

    return Config(
        # Environment
        APP_ENV=os.getenv("APP_ENV", "prod"),
        PORT=_parse_int("PORT", 8000),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),

        # Network safety
        ALLOWED_ORIGINS=_parse_origins(os.getenv("ALLOWED_ORIGINS", "*")) or ["*"],

        # Analysis
        ANALYZE_DELAY_MS=max(0, _parse_int("ANALYZE_DELAY_MS", DEFAULT_ANALYZE_DELAY_MS)),

        # History
        HISTORY_TIME_FORMAT=os.getenv("HISTORY_TIME_FORMAT", DEFAULT_TIME_FORMAT),
    )


def _notify_listeners(changes: Dict[str, Any]) -> None:
    """Notify registered listeners of configuration changes."""

    if not changes:
        return

    cfg = get_config()
    for listener in list(_CONFIG_LISTENERS):
        try:
            listener(cfg, changes)
        except Exception:
            # Listeners must not break config updates.
            logging.getLogger(__name__).exception("Config listener failed")
            continue


def get_config() -> Config:
    """Return the shared configuration object."""

    global _CONFIG_INSTANCE
    if _CONFIG_INSTANCE is None:
        _CONFIG_INSTANCE = _build_config()
    return _CONFIG_INSTANCE


def update_config(**updates: Any) -> Config:
    """Mutate the shared config in place and notify listeners."""

    cfg = get_config()
    applied: Dict[str, Any] = {}

    for key, value in updates.items():
        if not hasattr(cfg, key):
            raise AttributeError(f"Config has no attribute '{key}'")
        current = getattr(cfg, key)
        if current == value:
            continue
        setattr(cfg, key, value)
        applied[key] = value

    if applied:
        _notify_listeners(applied)
    return cfg


def subscribe_to_updates(listener: ConfigListener) -> Callable[[], None]:
    """Register a callback invoked when the configuration changes."""

    if listener not in _CONFIG_LISTENERS:
        _CONFIG_LISTENERS.append(listener)

    def _unsubscribe() -> None:
        try:
            _CONFIG_LISTENERS.remove(listener)
        except ValueError:
            pass

    return _unsubscribe


def reset_config() -> Config:
    """Reload configuration from the environment and notify listeners."""

    global _CONFIG_INSTANCE
    _CONFIG_INSTANCE = _build_config()
    _notify_listeners({"__reset__": True})
    return _CONFIG_INSTANCE
