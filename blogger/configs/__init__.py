from blogger.configs.logger import file_logger
from blogger.configs.settings import (
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_PAGE,
    MAX_PER_PAGE,
    Settings,
    settings,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "DEFAULT_PAGE",
    "MAX_PER_PAGE",
    "Settings",
    "file_logger",
    "settings",
]
