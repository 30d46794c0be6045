"""Command definitions and the registry the CLI dispatches through"""

from dataclasses import dataclass
from typing import Callable, Dict, List

from ..args import Args


@dataclass(frozen=True)
class Command:
    """A ghext subcommand

    git_extension marks commands that wrap a git subcommand of the same name
    rather than adding a new one.
    """
    name: str
    run: Callable[..., object]
    usage: str
    short: str
    long: str = ""
    git_extension: bool = False

    def __call__(self, args: Args, **kwargs):
        return self.run(args, **kwargs)


_registry: Dict[str, Command] = {}


def register(command: Command) -> Command:
    if command.name in _registry:
        raise ValueError(f"Command already registered: {command.name}")
    _registry[command.name] = command
    return command


def all_commands() -> List[Command]:
    return sorted(_registry.values(), key=lambda command: command.name)
