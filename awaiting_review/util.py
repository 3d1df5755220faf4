import json
from datetime import datetime, timezone

from gidgethub import actions

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def parse_timestamp(timestamp):
    """Turn an ISO 8601 timestamp into an aware UTC datetime.

    Timestamps without an offset are taken to be in UTC.
    """
    moment = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def format_timestamp(moment):
    return moment.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def debug(message):
    """Emit a debug message, shown when step debug logging is enabled."""
    actions.command("debug", message)


def debug_json(title, data):
    debug(title)
    debug(json.dumps(data))


def error(message):
    """Mark the step as failed with the given message."""
    actions.command("error", message)
