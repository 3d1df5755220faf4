"""Decide which pull requests have been waiting too long for a review."""
import datetime
import enum
import math

from . import util

# Pull requests that become reviewable right before the weekend get some slack.
WEEKEND_MARGIN = 1  # hours
THURSDAY = 3
FRIDAY = 4


@enum.unique
class ReviewDecision(enum.Enum):
    approved = "APPROVED"
    changes_requested = "CHANGES_REQUESTED"
    review_required = "REVIEW_REQUIRED"


def ready_for_review_at(pull_request):
    """Return when the pull request started waiting for a review.

    That is the first "ready for review" event for pull requests which were
    opened as drafts, and the creation time for all the others.
    """
    events = (pull_request.get("timelineItems") or {}).get("nodes") or []
    if events:
        return util.parse_timestamp(events[0]["createdAt"])
    return util.parse_timestamp(pull_request["createdAt"])


def waiting_hours(since, now):
    """Whole hours between `since` and `now`, rounded down."""
    return math.floor((now - since) / datetime.timedelta(hours=1))


def threshold_for(since, hours_before_add_label):
    if since.weekday() in {THURSDAY, FRIDAY}:
        return hours_before_add_label + WEEKEND_MARGIN
    return hours_before_add_label


def is_approved(pull_request):
    return pull_request.get("reviewDecision") == ReviewDecision.approved.value


def is_waiting(pull_request, hours_before_add_label, now):
    since = ready_for_review_at(pull_request)
    waited = waiting_hours(since, now)
    util.debug(f"ready for review at: {util.format_timestamp(since)}")
    util.debug(f"waiting time for review: {waited}")
    return waited >= threshold_for(since, hours_before_add_label)


def target_pull_requests(pull_requests, hours_before_add_label, skip_approved, *, now=None):
    """Return the pull requests which should get the label, in their original order."""
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    util.debug(f"now: {util.format_timestamp(now)}")
    return [
        pull_request
        for pull_request in pull_requests
        if is_waiting(pull_request, hours_before_add_label, now)
        and not (skip_approved and is_approved(pull_request))
    ]
