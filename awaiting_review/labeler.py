"""Label the pull requests which have been waiting too long for a review."""
from . import github, util, waiting


async def label_waiting_prs(gh, config):
    """Add the configured label to every pull request waiting too long.

    Labels are added one pull request at a time, in search order. The first
    failure stops the run, leaving the labels added before it in place.

    Returns the numbers of the pull requests which were labelled.
    """
    pull_requests = await github.fetch_pull_requests(
        gh, config.owner, config.repo, endpoint=config.graphql_url
    )
    util.debug_json("fetch pull request data:", pull_requests)
    if not pull_requests:
        return []

    if config.hours_before_add_label is None:
        return []

    targets = waiting.target_pull_requests(
        pull_requests, config.hours_before_add_label, config.skip_approved
    )
    if not targets:
        return []
    util.debug_json("get target pull request data:", targets)

    labelled = []
    for pull_request in targets:
        await github.add_label(
            gh, config.owner, config.repo, pull_request["number"], config.label_name
        )
        labelled.append(pull_request["number"])
    return labelled
