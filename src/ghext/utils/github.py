"""
GitHub clone URLs

Just builds the strings, nothing here talks to GitHub.
"""

DEFAULT_HOST = "github.com"

SSH_URL_TEMPLATE = "git@{host}:{owner}/{name}.git"
READ_ONLY_URL_TEMPLATE = "git://{host}/{owner}/{name}.git"


def build_clone_url(name: str, owner: str, use_ssh: bool, host: str = DEFAULT_HOST) -> str:
    """Build the clone URL for ``owner/name``

    SSH:       git@github.com:owner/name.git
    Read-only: git://github.com/owner/name.git
    """
    template = SSH_URL_TEMPLATE if use_ssh else READ_ONLY_URL_TEMPLATE
    return template.format(host=host, owner=owner, name=name)
