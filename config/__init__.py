from .env import get_env, is_set, load_env
from .logging import configure_logging
from .settings import Settings, load_settings

__all__ = [
    "get_env",
    "is_set",
    "load_env",
    "configure_logging",
    "Settings",
    "load_settings",
]
