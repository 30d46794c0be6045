"""
ghext clone - git clone with GitHub shorthand

  $ ghext clone jingweno/gh
  > git clone git://github.com/jingweno/gh.git

  $ ghext clone -p jingweno/gh
  > git clone git@github.com:jingweno/gh.git

  $ ghext clone jekyll_and_hyde
  > git clone git@github.com:YOUR_LOGIN/jekyll_and_hyde.git

Only the first shorthand is rewritten. Anything that already looks like a URL
is left for git to deal with.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from ..args import Args
from ..models.repository import RepositoryIdentifier, Transport
from ..utils.file_handler import is_local_directory
from ..utils.github import DEFAULT_HOST
from .base import Command, register

logger = logging.getLogger(__name__)

PRIVATE_FLAG = "-p"


@dataclass(frozen=True)
class TokenMatcher:
    """A named predicate over a single argument"""
    name: str
    patterns: Tuple[re.Pattern, ...]

    @classmethod
    def compile(cls, name: str, *patterns: str) -> 'TokenMatcher':
        return cls(name, tuple(re.compile(p) for p in patterns))

    def matches(self, token: str) -> bool:
        return any(p.search(token) for p in self.patterns)


# Flags whose value is the next argument
VALUE_FLAG = TokenMatcher.compile(
    "value-flag",
    r"^(--(upload-pack|template|depth|origin|branch|reference|name)|-[ubo])$",
)

URL = TokenMatcher.compile(
    "url",
    r"(https?|git)://(.+)/(.+)$",
    r"^(.+)@(.+):(.+)$",
)

# name or owner/name; owners start alphanumeric, names never start with -
SHORTHAND = TokenMatcher.compile(
    "shorthand",
    r"^(?:[A-Za-z0-9][\w.-]*/)?(?!-)[\w.-]+$",
)

# Checked in this order for every token
CLASSIFIERS = (VALUE_FLAG, URL, SHORTHAND)


def classify(token: str) -> Optional[TokenMatcher]:
    """First classifier that accepts ``token``, or None"""
    for matcher in CLASSIFIERS:
        if matcher.matches(token):
            return matcher
    return None


class CloneStatus(Enum):
    UNCHANGED = "unchanged"
    REWRITTEN = "rewritten"
    DRY_RUN = "dry-run"


@dataclass
class CloneResult:
    """What transform_clone_args did to the args

    A DRY_RUN result means the caller should print ``command`` and exit 0
    without running anything.
    """
    status: CloneStatus
    args: Args
    index: Optional[int] = None
    url: Optional[str] = None
    transport: Optional[Transport] = None

    @property
    def command(self) -> str:
        return self.args.to_command("clone")

    @property
    def is_dry_run(self) -> bool:
        return self.status is CloneStatus.DRY_RUN


def parse_clone_private_flag(args: Args) -> bool:
    """Remove -p from args; True if it was there"""
    i = args.index_of_param(PRIVATE_FLAG)
    if i != -1:
        args.remove_param(i)
        return True

    return False


def transform_clone_args(
    args: Args,
    current_login: Callable[[], str],
    is_dir: Callable[[str], bool] = is_local_directory,
    host: str = DEFAULT_HOST,
) -> CloneResult:
    """Rewrite the first repository shorthand in args into a clone URL

    ``current_login`` is only called once a shorthand has been found.
    """
    use_ssh = parse_clone_private_flag(args)

    for i, token in enumerate(args):
        matcher = classify(token)

        if matcher is VALUE_FLAG:
            continue

        if matcher is URL:
            logger.debug(f"{token} is already a URL, leaving args alone")
            break

        if matcher is SHORTHAND:
            if is_dir(token):
                logger.debug(f"{token} is a local directory, not a repository")
                continue

            repo = RepositoryIdentifier.parse(token)
            login = current_login()

            # Your own repositories always go over SSH
            use_ssh = use_ssh or repo.owner == login
            if not repo.owner:
                use_ssh = True

            project = repo.resolve(login, host=host)
            url = project.git_url(use_ssh)
            args.replace_param(i, url)
            logger.debug(f"Rewrote {token} -> {url}")

            status = CloneStatus.DRY_RUN if args.noop else CloneStatus.REWRITTEN
            return CloneResult(status, args, index=i, url=url,
                               transport=Transport.from_flag(use_ssh))

    return CloneResult(CloneStatus.UNCHANGED, args)


def clone(
    args: Args,
    current_login: Callable[[], str],
    is_dir: Callable[[str], bool] = is_local_directory,
    host: str = DEFAULT_HOST,
) -> CloneResult:
    if args.is_params_empty():
        return CloneResult(CloneStatus.UNCHANGED, args)

    return transform_clone_args(args, current_login, is_dir=is_dir, host=host)


cmd_clone = register(Command(
    name="clone",
    run=clone,
    git_extension=True,
    usage="clone [-p] OPTIONS [USER/]REPOSITORY DIRECTORY",
    short="Clone a remote repository into a new directory",
    long="""Clone repository "git://github.com/USER/REPOSITORY.git" into
DIRECTORY as with git-clone(1). When USER/ is omitted, assumes
your GitHub login. With -p, clone private repositories over SSH.
For repositories under your GitHub login, -p is implicit.""",
))
