#!/usr/bin/env python3
"""Run the Manuals Search API server."""

import argparse
import sys
import uvicorn
import anyio

from manuals_search.config import load_config
from manuals_search.logging_config import setup_logging


def main():
    """Run the API server."""
    parser = argparse.ArgumentParser(description="Run the Manuals Search API")
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind to (default: from config)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to (default: from config)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    try:
        config = anyio.run(load_config)
    except Exception as e:
        print(f"Failed to load config: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    setup_logging(
        "DEBUG" if args.debug else config.logging.level,
        json_format=config.logging.json_format,
    )

    host = args.host or config.api.host
    port = args.port or config.api.port

    missing = config.drive.missing_settings()
    if missing:
        print(f"Warning: {', '.join(missing)} not set; /api/manuals will return 500", file=sys.stderr)

    print(f"Starting Manuals Search on http://{host}:{port}")
    print(f"  - Search page: http://{host}:{port}/")
    print(f"  - Manuals: http://{host}:{port}/api/manuals")
    print(f"  - Swagger UI: http://{host}:{port}/docs")
    print(f"  - Health: http://{host}:{port}/health")

    uvicorn.run(
        "manuals_search.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level="debug" if args.debug else "info",
        log_config=None,
    )


if __name__ == "__main__":
    main()
