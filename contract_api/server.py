"""
Command-line entry point that serves the application with uvicorn.

    contract-api --host 0.0.0.0 --port 3000
"""

import argparse
import logging

import uvicorn

from contract_api.core.config import settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"Run the {settings.project_name} server.")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    parser.add_argument(
        "--reload", action="store_true", help="Reload on code changes (development only)"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and start uvicorn."""
    args = build_parser().parse_args(argv)
    logger.info("Starting server at http://%s:%d%s", args.host, args.port, settings.api_prefix)
    uvicorn.run(
        "contract_api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
