"""Unified entry point for Scratchpad.

Starts either the REST API server (default) or the CLI.
"""

import argparse


def main(argv: list[str] | None = None):
    """Main entry point with interface selection."""
    parser = argparse.ArgumentParser(
        description="Scratchpad - notes stored as plain Markdown files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Interfaces:
  api         Start the REST API server (default)
  cli         Run a CLI command

Examples:
  python -m scratchpad                      # Start API server
  python -m scratchpad api --port 8080      # Start API on custom port
  python -m scratchpad cli notes            # List notes
  python -m scratchpad cli search groceries # Search notes
""",
    )

    parser.add_argument(
        "interface",
        nargs="?",
        default="api",
        choices=["api", "cli"],
        help="Which interface to start (default: api)",
    )

    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind API server to (default: 127.0.0.1)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for API server (default: 8430)",
    )

    args, rest = parser.parse_known_args(argv)

    if args.interface == "api":
        from scratchpad.api.app import run_server
        from scratchpad.core.config import setup_logging

        setup_logging()
        run_server(host=args.host, port=args.port)

    elif args.interface == "cli":
        from scratchpad.interfaces.cli.app import app

        app(args=rest, prog_name="scratchpad")


if __name__ == "__main__":
    main()
