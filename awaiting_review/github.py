"""Talk to GitHub: search for open pull requests and label them."""
from .config import DEFAULT_GRAPHQL_URL

PAGE_SIZE = 20

SEARCH_QUERY = """\
fragment pr on PullRequest {
  ... on PullRequest {
    number
    createdAt
    reviewDecision
    timelineItems(itemTypes: READY_FOR_REVIEW_EVENT, first: 1) {
      nodes {
        ... on ReadyForReviewEvent {
          createdAt
        }
      }
    }
  }
}

query ($q: String!, $limit: Int = 20) {
  search(first: $limit, type: ISSUE, query: $q) {
    nodes {
      ...pr
    }
  }
}
"""

LABELS_URL = "/repos/{owner}/{repo}/issues/{issue_number}/labels"


def search_terms(owner, repo):
    """Search for the open pull requests of a repository which aren't drafts."""
    return f"is:pr is:open draft:false repo:{owner}/{repo}"


async def fetch_pull_requests(gh, owner, repo, *, limit=PAGE_SIZE,
                              endpoint=DEFAULT_GRAPHQL_URL):
    """Return the first page of open, non-draft pull requests."""
    data = await gh.graphql(SEARCH_QUERY, endpoint=endpoint,
                            q=search_terms(owner, repo), limit=limit)
    # Search hits which aren't pull requests don't match the fragment.
    return [node for node in data["search"]["nodes"] if node]


async def add_label(gh, owner, repo, number, label_name):
    """Add a single label to an issue or pull request."""
    print(f"Adding {label_name!r} label to #{number}")
    await gh.post(
        LABELS_URL,
        {"owner": owner, "repo": repo, "issue_number": number},
        data={"labels": [label_name]},
    )
