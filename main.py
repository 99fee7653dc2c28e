"""
Main entry point for the arc-blog application.

This module provides the console entry point for the CLI, handling
interruption and log flushing on exit.
"""

import sys
import signal
import logging

from cli.main_cli import main as cli_main


def signal_handler(signum, frame):
    """Handle shutdown signals gracefully."""
    signal_names = {signal.SIGINT: 'SIGINT', signal.SIGTERM: 'SIGTERM'}
    signal_name = signal_names.get(signum, f'Signal {signum}')

    print(f"\nReceived {signal_name}, shutting down...", file=sys.stderr)
    logging.shutdown()
    sys.exit(130 if signum == signal.SIGINT else 143)


def main():
    """Main entry point for the CLI application."""
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        cli_main(prog_name='arc-blog', standalone_mode=True)
        return 0

    except SystemExit as e:
        return e.code if isinstance(e.code, int) else (0 if e.code is None else 1)

    finally:
        logging.shutdown()


if __name__ == "__main__":
    sys.exit(main())
