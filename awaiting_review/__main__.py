import asyncio
import os
import sys
import traceback

import aiohttp
import sentry_sdk
from gidgethub import aiohttp as gh_aiohttp

from . import labeler, util
from .config import Config

sentry_sdk.init(os.environ.get("SENTRY_DSN"))


async def main(environ=os.environ):
    """Run the labeler once; return the exit status for the step."""
    try:
        config = Config.from_environ(environ)
        async with aiohttp.ClientSession() as session:
            gh = gh_aiohttp.GitHubAPI(
                session,
                config.repository,
                oauth_token=config.token,
                base_url=config.api_url,
            )
            labelled = await labeler.label_waiting_prs(gh, config)
        print(f"Labelled {len(labelled)} pull request(s) in {config.repository}")
        try:
            print("GH requests remaining:", gh.rate_limit.remaining)
        except AttributeError:
            pass
        return 0
    except Exception as exc:
        traceback.print_exc(file=sys.stderr)
        sentry_sdk.capture_exception(exc)
        util.error(str(exc) or type(exc).__name__)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(asyncio.run(main()))
