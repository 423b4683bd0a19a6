"""Command-line launcher for the coverage demo service.

Usage:
    coverage-demo                   # Start on the configured host/port
    coverage-demo --port 8080       # Use custom port
    coverage-demo --log-level DEBUG # Log parameter fallbacks
"""

import argparse
import os
import sys

from coverage_demo.env_config import DEFAULT_HOST, DEFAULT_PORT, LOG_LEVEL_ENV, get_log_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Launch the coverage demo service")
    parser.add_argument("--host", default=DEFAULT_HOST, help=f"Server host (default: {DEFAULT_HOST})")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help=f"Server port (default: {DEFAULT_PORT})")
    parser.add_argument(
        "--log-level",
        default=get_log_level(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Log level (default: {get_log_level()})",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        import uvicorn
    except ImportError:
        print("""
ERROR: Server dependencies not installed.

Install them with:
    pip install -e .
""")
        sys.exit(1)

    # Picked up by the server lifespan hook
    os.environ[LOG_LEVEL_ENV] = args.log_level

    print(f"Coverage demo running at: http://{args.host}:{args.port}")
    print("Press Ctrl+C to stop")

    uvicorn.run(
        "coverage_demo.server:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
