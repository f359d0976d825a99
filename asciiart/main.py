#!/usr/bin/env python3

"""
asciiart: interactive image to ASCII art shell.

Usage:
  asciiart input.jpg [--config asciiart.yaml] [--debug] [--log-path asciiart.log]

Commands inside the shell: exit, chars, add X|a-z|all|space, remove ...,
res up|down, round up|down|abs, output console|html, asciiart.
"""
import argparse
import logging
import os
import sys

from asciiart.imaging.picture import Picture
from asciiart.settings import AppSettings
from asciiart.service.shell import Shell

LOG = logging.getLogger("asciiart")


def setup_logging(level: str, log_path: str | None = None) -> None:
    LOG.setLevel(logging.DEBUG if log_path else level)

    fmt = logging.Formatter("%(levelname)s: %(message)s")

    handlers: list[logging.Handler] = []

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level)
    sh.setFormatter(fmt)
    handlers.append(sh)

    if log_path:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s"))
        handlers.append(fh)

    LOG.handlers[:] = handlers
    LOG.propagate = False       # prevent double logging via root logger


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convert an image to ASCII art interactively.")
    parser.add_argument("input", help="Path to input image")
    parser.add_argument("--config", default="", help="YAML settings file (default: $ASCIIART_CONFIG_FILE or asciiart.yaml)")
    parser.add_argument("--debug", action="store_true", help="Log debug messages to stderr")
    parser.add_argument("--log-path", default="", help="Also write a debug log to this file")
    args = parser.parse_args(argv)

    if args.config:
        os.environ["ASCIIART_CONFIG_FILE"] = args.config
    app_settings = AppSettings()
    setup_logging("DEBUG" if args.debug else app_settings.log_level.upper(), args.log_path or None)

    try:
        picture = Picture.open(args.input)
    except (FileNotFoundError, PermissionError, OSError) as e:
        print(f"Failed to open image: {e}", file=sys.stderr)
        return 1

    LOG.debug("settings: %s", app_settings.model_dump())
    Shell(app_settings).run(picture)
    return 0


if __name__ == "__main__":
    sys.exit(main())
