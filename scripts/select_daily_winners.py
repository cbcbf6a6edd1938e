#!/usr/bin/env python3
"""Record yesterday's daily winners without going through the HTTP cron route.

Usage:
    python scripts/select_daily_winners.py
    python scripts/select_daily_winners.py --now 2026-10-19T00:05:00+00:00
"""

import argparse
import asyncio
import sys
from datetime import datetime

import logfire

from showcase.application.usecase.winner import (
    SelectDailyWinnersRequest,
    SelectDailyWinnersUseCase,
)
from showcase.config import Settings
from showcase.domain.error import NoProjectsAvailableError
from showcase.util.di.container import create_container
from showcase.util.logging import setup_logging
from showcase.util.observability import configure_logfire


async def run(now: datetime | None) -> int:
    """Run one selection in its own request scope (one transaction)."""
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(SelectDailyWinnersUseCase)
            # Local operator runs are trusted
            response = await use_case.execute(
                SelectDailyWinnersRequest(trusted=True, now=now)
            )
    except NoProjectsAvailableError as e:
        logfire.error("Daily winner selection failed", error=str(e))
        return 1
    finally:
        await container.close()

    logfire.info(
        "Daily winner selection finished",
        win_date=response.win_date.isoformat(),
        winners=[w.project_id for w in response.winners],
        inserted=response.inserted,
    )
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Instant to run as (ISO 8601); the day before it is judged",
    )
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    return asyncio.run(run(args.now))


if __name__ == "__main__":
    sys.exit(main())
