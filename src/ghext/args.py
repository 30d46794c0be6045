"""The argument vector handed to a ghext command"""

from typing import Iterable, Iterator, List, Optional


class Args:
    """Command line parameters after the subcommand name

    ``params`` is edited in place by commands that rewrite arguments.
    ``noop`` asks commands to print what they would run instead of running it.
    """

    def __init__(self, params: Optional[Iterable[str]] = None, noop: bool = False):
        self.params: List[str] = list(params or [])
        self.noop = noop

    def __len__(self) -> int:
        return len(self.params)

    def __iter__(self) -> Iterator[str]:
        return iter(self.params)

    def __getitem__(self, index: int) -> str:
        return self.params[index]

    def __eq__(self, other):
        if not isinstance(other, Args):
            return NotImplemented
        return self.params == other.params and self.noop == other.noop

    def __repr__(self) -> str:
        return f"Args({self.params!r}, noop={self.noop!r})"

    def is_params_empty(self) -> bool:
        return not self.params

    def index_of_param(self, value: str) -> int:
        """Position of ``value``, or -1 if it isn't there"""
        try:
            return self.params.index(value)
        except ValueError:
            return -1

    def remove_param(self, index: int) -> str:
        return self.params.pop(index)

    def replace_param(self, index: int, value: str) -> None:
        self.params[index] = value

    def to_command(self, subcommand: str) -> str:
        """The git command line these args stand for"""
        return " ".join(["git", subcommand, *self.params])
