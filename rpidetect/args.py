"""
Command line argument parser for rpidetect

Handles option parsing, validation and the special actions that print
and exit immediately (--version, --description).
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Tuple

CPUINFO_ENV_VAR = "RPIDETECT_CPUINFO"


class ArgumentValidator:
    """Validates command-line arguments"""

    @staticmethod
    def validate_cpuinfo(cpuinfo: Optional[Path]) -> Tuple[bool, Optional[str]]:
        """
        Validate cpuinfo parameter

        A missing file is accepted (detection reports "not a Raspberry Pi"),
        but a directory can never be read as CPU info.

        Args:
            cpuinfo: CPU info file path to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if cpuinfo is None:
            return True, None

        try:
            is_dir = cpuinfo.is_dir()
        except OSError:
            # Unreachable paths are left to detection, which reports "no"
            return True, None

        if is_dir:
            return False, f"Parameter [--cpuinfo] must be a file, got directory: {cpuinfo}"

        return True, None


class ArgumentParser:
    """Command line argument parser for rpidetect"""

    def __init__(self):
        self.parser = self._create_parser()
        self.validator = ArgumentValidator()

    def _create_parser(self):
        """Create the argument parser with all options"""
        parser = argparse.ArgumentParser(
            prog="rpidetect",
            description="Detect whether this host is a Raspberry Pi",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_epilog_text(),
        )

        parser.add_argument(
            "--description", "-d", action="store_true",
            help="Show description and exit"
        )

        parser.add_argument(
            "--version", "-v", action="store_true",
            help="Show version and exit"
        )

        # Output selection
        output_group = parser.add_mutually_exclusive_group()
        output_group.add_argument(
            "--model", "-m", action="store_true",
            help="Print the Raspberry Pi model (empty when not a Raspberry Pi)"
        )

        output_group.add_argument(
            "--json", action="store_true",
            help="Print detection details as JSON"
        )

        # Log level selection
        level_group = parser.add_mutually_exclusive_group()
        level_group.add_argument(
            "--warning", "-w", action="store_true",
            help="Only warnings and errors"
        )

        level_group.add_argument(
            "--debug", action="store_true",
            help="All debug information (very verbose)"
        )

        # Console output control
        console_group = parser.add_mutually_exclusive_group()
        console_group.add_argument(
            "--console",
            action="store_true",
            help="Display active log level to console (can combine with --warning/--debug)",
        )

        console_group.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="No output at all, report through the exit status only",
        )

        parser.add_argument(
            "--cpuinfo", type=Path,
            help=f"CPU info file to inspect (default: ${CPUINFO_ENV_VAR} or /proc/cpuinfo)"
        )

        return parser

    def _get_epilog_text(self):
        """Get the epilog help text"""
        return f"""
Examples:
  rpidetect                                # Prints yes or no
  rpidetect --model                        # Prints the model string
  rpidetect --json --debug --console       # Details with debug log on stderr
  rpidetect --cpuinfo ./cpuinfo.txt        # Inspect a saved cpuinfo dump
  rpidetect --quiet && echo "on a Pi"      # Exit status only

Exit Status:
  0               Raspberry Pi detected
  1               Not a Raspberry Pi (or detection failed)
  2               Invalid arguments

Environment:
  {CPUINFO_ENV_VAR}   Default for --cpuinfo
        """

    def parse_args(self, args=None):
        """Parse command line arguments with validation"""
        args = self.parser.parse_args(args)

        # Handle special actions that exit immediately
        if self._handle_special_actions(args):
            sys.exit(0)

        self._apply_environment(args)
        self._validate_args(args)

        return args

    def _handle_special_actions(self, args) -> bool:
        """Handle special actions that exit immediately"""
        if args.description:
            print("Raspberry Pi detection from /proc/cpuinfo (rpidetect)")
            return True

        if args.version:
            from . import __version__
            print(__version__)
            return True

        return False

    def _apply_environment(self, args):
        """Fill --cpuinfo from the environment when not given"""
        if args.cpuinfo is None and os.environ.get(CPUINFO_ENV_VAR):
            args.cpuinfo = Path(os.environ[CPUINFO_ENV_VAR])

    def _validate_args(self, args):
        """Validate argument values"""
        valid, error = self.validator.validate_cpuinfo(args.cpuinfo)
        if not valid:
            self.parser.error(error)

    def get_logging_config(self, args):
        """Determine logging configuration from arguments"""
        config = {
            "level": "default",
            "console": False,
            "quiet": False,
        }

        if args.debug:
            config["level"] = "debug"
        elif args.warning:
            config["level"] = "warning"

        if args.console:
            config["console"] = True
        elif args.quiet:
            config["quiet"] = True

        return config
