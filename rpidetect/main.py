#!/usr/bin/env python3
"""
rpidetect - Raspberry Pi host detection

Command line front end: prints the detection result and reports it through
the exit status.
"""

import json
import logging
import sys

from .args import ArgumentParser
from .systems import HostEnvironment, RaspberryDetector

# Package version
from . import __version__


def setup_logging(logging_config: dict):
    """Setup logging configuration"""
    if logging_config["level"] == "warning":
        level = logging.WARNING
    elif logging_config["level"] == "debug":
        level = logging.DEBUG
    else:  # default
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # Console logging only if --console is specified (and not --quiet)
    if logging_config["console"] and not logging_config["quiet"]:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s: %(message)s")
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)
    else:
        root_logger.addHandler(logging.NullHandler())

    return root_logger


def main(argv=None):
    """Main function"""
    arg_parser = ArgumentParser()
    args = arg_parser.parse_args(argv)

    logging_config = arg_parser.get_logging_config(args)
    setup_logging(logging_config)

    logging.debug(f"rpidetect v{__version__}")

    host = HostEnvironment(args.cpuinfo)
    detector = RaspberryDetector(host)
    logging.debug(f"Using {host!r}")

    if args.json or args.model:
        # Single detection pass; an empty "model name" value still counts as a Pi
        info = detector.get_system_info()
        detected = info["is_raspberry_pi"]
        output = json.dumps(info, indent=2) if args.json else info["model"]
    else:
        detected = detector.is_raspberry_pi()
        output = "yes" if detected else "no"

    logging.info(f"Raspberry Pi detected: {detected}")

    if not logging_config["quiet"]:
        print(output)

    return 0 if detected else 1


if __name__ == "__main__":
    sys.exit(main())
