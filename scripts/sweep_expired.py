#!/usr/bin/env python3
"""Expire pending invites whose validity window has passed.

Run on a schedule (e.g. hourly cron). Each batch runs in its own request
scope, so each batch commits on its own.
"""

import asyncio
import sys

import logfire

from tablesplit.application.usecase.invite import (
    SweepExpiredInvitesUseCase,
    SweepExpiredRequest,
)
from tablesplit.config import Settings
from tablesplit.util.di.container import create_container
from tablesplit.util.logging import setup_logging
from tablesplit.util.observability import configure_logfire


async def sweep(settings: Settings) -> int:
    """Sweep in batches until a batch comes back short.

    Returns:
        Total number of invites expired
    """
    batch_size = settings.invitations.sweep_batch_size
    container = create_container()
    total = 0
    try:
        while True:
            async with container() as request_container:
                use_case = await request_container.get(SweepExpiredInvitesUseCase)
                response = await use_case.execute(
                    SweepExpiredRequest(batch_size=batch_size)
                )
            if not response.ok:
                raise RuntimeError(f"Invite sweep failed: {response.message}")
            total += response.expired
            if response.expired < batch_size:
                return total
    finally:
        await container.close()


def main() -> int:
    """Run the sweep and log the outcome to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings, service_name="tablesplit-invite-sweep")

    try:
        with logfire.span("sweep_expired_invites"):
            total = asyncio.run(sweep(settings))
        logfire.info("Invite sweep completed", expired=total)
        return 0

    except Exception as e:
        logfire.error(
            "Invite sweep failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
