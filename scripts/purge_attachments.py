#!/usr/bin/env python3
"""Delete stored attachment files that no comment references.

Meant to run periodically (cron). Files younger than
STORAGE__ORPHAN_GRACE_PERIOD_SECONDS are kept, they may belong to a
comment that is being created.
"""

import asyncio
import sys

import logfire

from huddle.config import Settings
from huddle.domain.service import CommentService
from huddle.util.di.container import create_container
from huddle.util.observability import configure_logfire


async def purge() -> int:
    container = create_container()
    try:
        async with container() as request_container:
            comment_service = await request_container.get(CommentService)
            return await comment_service.purge_orphaned_attachments()
    finally:
        await container.close()


def main() -> int:
    """Run one purge pass."""
    configure_logfire(Settings())

    try:
        purged = asyncio.run(purge())
        logfire.info("Attachment purge finished", purged=purged)
        return 0

    except Exception as e:
        logfire.error(
            "Attachment purge failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
