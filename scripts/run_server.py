"""Launch the Workout Builder API under uvicorn."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import uvicorn

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import get_settings  # noqa: E402
from app.logging_config import configure_logging  # noqa: E402


logger = logging.getLogger("server")


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--host", default=settings.app_host, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.app_port, help="Port to listen on (default: %(default)s)")
    parser.add_argument("--reload", action="store_true", help="Restart the server when source files change")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings())
    logger.info("Starting Workout Builder API server on %s:%s", args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
