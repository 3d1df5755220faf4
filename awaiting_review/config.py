"""Read the action's inputs and the workflow environment."""
import os
from typing import NamedTuple, Optional

HOURS_INPUT = "hours-before-add-label"
# Name used by the first releases of the action.
LEGACY_HOURS_INPUT = "hours-before-label-add"
LABEL_INPUT = "label-name"
SKIP_APPROVED_INPUT = "skip-approved-pull-request"
TOKEN_INPUT = "repo-token"

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"


class ConfigError(Exception):
    """Required configuration is missing or malformed."""


def input_var(name):
    """Environment variable the Actions runner stores an input in."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(environ, name):
    return environ.get(input_var(name), "").strip()


def parse_hours(value):
    """Return the threshold in hours, or None if it isn't a non-negative integer."""
    try:
        hours = int(value, 10)
    except ValueError:
        return None
    if hours < 0:
        return None
    return hours


def split_repository(repository):
    owner, sep, repo = repository.partition("/")
    if not (owner and sep and repo) or "/" in repo:
        raise ConfigError(f"GITHUB_REPOSITORY must look like 'owner/repo', not {repository!r}")
    return owner, repo


class Config(NamedTuple):
    hours_before_add_label: Optional[int]
    label_name: str
    skip_approved: bool
    token: Optional[str]
    owner: str
    repo: str
    api_url: str = DEFAULT_API_URL
    graphql_url: str = DEFAULT_GRAPHQL_URL

    @property
    def repository(self):
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_environ(cls, environ=os.environ):
        hours = get_input(environ, HOURS_INPUT) or get_input(environ, LEGACY_HOURS_INPUT)
        if not hours:
            raise ConfigError(f"Input required and not supplied: {HOURS_INPUT}")
        token = get_input(environ, TOKEN_INPUT) or environ.get("GH_AUTH")
        owner, repo = split_repository(environ.get("GITHUB_REPOSITORY", ""))
        return cls(
            hours_before_add_label=parse_hours(hours),
            label_name=get_input(environ, LABEL_INPUT),
            skip_approved=get_input(environ, SKIP_APPROVED_INPUT) == "true",
            token=token or None,
            owner=owner,
            repo=repo,
            api_url=environ.get("GITHUB_API_URL") or DEFAULT_API_URL,
            graphql_url=environ.get("GITHUB_GRAPHQL_URL") or DEFAULT_GRAPHQL_URL,
        )
