"""CLI entrypoint for the rate service.

Usage:
    python -m rates                         # settings from env / .env
    python -m rates --port 9000 --database-url sqlite+aiosqlite:///./rates.db
"""

import argparse
from typing import Optional, Sequence

import uvicorn

from .app import create_app
from .config import load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rate-service", description="Serve loan rates over HTTP")
    parser.add_argument("--host", help="Listen address (default: $HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Listen port (default: $PORT or 8002)")
    parser.add_argument("--database-url", help="SQLAlchemy async URL (default: $DATABASE_URL)")
    parser.add_argument("--log-level", help="Log level (default: $LOG_LEVEL or INFO)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.database_url)
    except RuntimeError:
        parser.error("DATABASE_URL not set in .env and --database-url not given")

    settings = settings.with_overrides(
        host=args.host,
        port=args.port,
        log_level=args.log_level.upper() if args.log_level else None,
    )
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
