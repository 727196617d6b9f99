"""CLI entrypoint for the loan service.

Usage:
    python -m loans init-db                  # create the loan table ($DATABASE_URL)
    python -m loans init-db --database-url sqlite+aiosqlite:///./loans.db
"""

import argparse
import asyncio
import os
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from .db.session import create_engine, init_db
from .logging_config import get_logger, setup_logging

logger = get_logger("loan_service")


async def run_init_db(database_url: str) -> None:
    engine = create_engine(database_url)
    try:
        await init_db(engine)
    finally:
        await engine.dispose()
    logger.info("Loan schema ready")


def main(argv: Optional[Sequence[str]] = None) -> None:
    load_dotenv(find_dotenv(usecwd=True), override=False)

    parser = argparse.ArgumentParser(prog="loan-service", description="Loan store maintenance")
    sub = parser.add_subparsers(dest="command", required=True)
    init_cmd = sub.add_parser("init-db", help="Create the loan table if it does not exist")
    init_cmd.add_argument("--database-url", default=os.getenv("DATABASE_URL"))
    args = parser.parse_args(argv)

    setup_logging(os.getenv("LOG_LEVEL", "INFO"), os.getenv("LOG_DIR") or None)

    if not args.database_url:
        parser.error("DATABASE_URL not set in .env and --database-url not given")

    asyncio.run(run_init_db(args.database_url))
    print("loan table ready")


if __name__ == "__main__":
    main()
