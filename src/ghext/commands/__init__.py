from .base import Command, all_commands, register
from .clone import CloneResult, CloneStatus, clone, cmd_clone, transform_clone_args

__all__ = [
    "Command",
    "all_commands",
    "register",
    "CloneResult",
    "CloneStatus",
    "clone",
    "cmd_clone",
    "transform_clone_args",
]
