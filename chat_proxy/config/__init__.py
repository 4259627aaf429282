from .logging_config import setup_logging
from .settings import ChatMode, Settings, get_settings

__all__ = ["ChatMode", "Settings", "get_settings", "setup_logging"]
