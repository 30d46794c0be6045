from .config import Config
from .file_handler import is_local_directory
from .github import build_clone_url
from .logger import setup_logger

__all__ = [
    "Config",
    "build_clone_url",
    "is_local_directory",
    "setup_logger",
]
