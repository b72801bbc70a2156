"""
CLI entry point for the error reporter demo service.

Usage:
    # Serve the demo application
    python -m error_reporter.cli serve --port 8000

    # Serve with production posture (no stacks, no diagnostic page)
    python -m error_reporter.cli serve --prod
"""

import argparse
import logging

from error_reporter.core.config import Settings

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the demo FastAPI application with uvicorn."""
    import uvicorn

    from error_reporter.main import create_app

    app_settings = Settings(reporter_prod=True) if args.prod else Settings()
    app = create_app(app_settings)
    logger.info(
        "Starting demo application at http://%s:%d (prod=%s)",
        args.host,
        args.port,
        app_settings.is_production,
    )
    uvicorn.run(app, host=args.host, port=args.port, reload=False)


def main() -> None:
    parser = argparse.ArgumentParser(description="Error Reporter CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Serve the demo application")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument(
        "--prod", action="store_true", help="Force production posture"
    )
    serve.set_defaults(func=cmd_serve)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
