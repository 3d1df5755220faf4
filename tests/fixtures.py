import pytest
from gidgethub import sansio


class FakeGH:
    def __init__(self, *, search=None, post=None):
        self._search_return = search if search is not None else []
        self._post_return = post
        self.graphql_ = []
        self.post_ = []

    async def graphql(self, query, *, endpoint="https://api.github.com/graphql", **variables):
        self.graphql_.append((query, endpoint, variables))
        if isinstance(self._search_return, Exception):
            raise self._search_return
        return {"search": {"nodes": self._search_return}}

    async def post(self, url, url_vars={}, *, data):
        post_url = sansio.format_url(url, url_vars)
        if isinstance(self._post_return, Exception):
            raise self._post_return
        self.post_.append((post_url, data))


def pull_request(number, created_at, *, review_decision=None, ready_for_review_at=None):
    nodes = [{"createdAt": ready_for_review_at}] if ready_for_review_at else []
    return {
        "number": number,
        "createdAt": created_at,
        "reviewDecision": review_decision,
        "timelineItems": {"nodes": nodes},
    }


@pytest.fixture
def action_env(monkeypatch):
    """Set the environment an Actions runner would give the step."""
    env = {
        "GITHUB_REPOSITORY": "kentaro-m/waiting-for-review-labeler",
        "INPUT_REPO-TOKEN": "token",
        "INPUT_HOURS-BEFORE-ADD-LABEL": "3",
        "INPUT_LABEL-NAME": "waiting for review",
        "INPUT_SKIP-APPROVED-PULL-REQUEST": "false",
    }
    for name in ("GITHUB_API_URL", "GITHUB_GRAPHQL_URL", "GH_AUTH",
                 "INPUT_HOURS-BEFORE-LABEL-ADD"):
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return env
