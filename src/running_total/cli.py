"""Command line interface for the running-total calculator."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import load_settings
from .tui import BlessedTerminal, RunningTotalApp


class CLIInterface:
    """Command line interface for the calculator."""

    def __init__(self):
        """Initialize the CLI interface."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create and configure the argument parser."""
        parser = argparse.ArgumentParser(
            prog="running-total",
            description=(
                "Interactive running-total calculator. Type an amount and press "
                "Enter to add it, Tab to reset, Esc or Ctrl+C to quit."
            ),
        )

        parser.add_argument(
            "--config",
            type=str,
            default=None,
            help="Path to a YAML file with prompt, separator and style settings."
        )
        parser.add_argument(
            "--log-file",
            type=str,
            default=None,
            help="Append log messages to this file. Nothing is logged if omitted."
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """
        Run the CLI application.

        Args:
            argv: Arguments to parse instead of sys.argv

        Returns:
            Process exit code
        """
        args = self.parser.parse_args(argv)
        self._setup_logging(args.log_file)

        settings = load_settings(args.config)
        app = RunningTotalApp(BlessedTerminal(), settings)

        try:
            app.run()
        except Exception as e:
            logging.exception("Terminal failure, exiting.")
            print(f"running-total: {e}", file=sys.stderr)
            return 1

        return 0

    def _setup_logging(self, log_file: Optional[str]) -> None:
        """Set up logging; the screen itself is never a log target."""
        # Remove existing handlers
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)

        if not log_file:
            # Keeps the last-resort stderr handler from writing over the screen
            logging.root.addHandler(logging.NullHandler())
            return

        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s',
            filename=log_file,
            filemode='a'  # Append to the log file on each run
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI application."""
    cli = CLIInterface()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
