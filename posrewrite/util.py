"""Utility functions for posrewrite."""

from __future__ import annotations

__copyright__ = """
Copyright (c) 2025 RapidStream Design Automation, Inc. and contributors.
All rights reserved. The contributor(s) of this file has/have agreed to the
RapidStream Contributor License Agreement.
"""

import getpass
import logging
import os
import socket
import time

import coloredlogs

_logger = logging.getLogger().getChild(__name__)


class Options:
    """Global configuration options."""

    # Encoding of textual edits before they are spliced into byte buffers.
    text_encoding: str = "utf-8"


def encode_text(text: str) -> bytes:
    """Encode `text` with the configured encoding."""
    return text.encode(Options.text_encoding)


def decode_text(data: bytes) -> str:
    """Decode `data` with the configured encoding."""
    return data.decode(Options.text_encoding)


def get_logging_level(verbose: int | None, quiet: int | None) -> int:
    """Return the console logging level for the verbosity counters."""
    verbose = 0 if verbose is None else verbose
    quiet = 0 if quiet is None else quiet
    logging_level = (quiet - verbose) * 10 + logging.INFO
    return max(logging.DEBUG, min(logging.CRITICAL, logging_level))


def setup_logging(
    verbose: int | None,
    quiet: int | None,
    work_dir: str,
    program_name: str = "posrewrite",
) -> str:
    """Log to the console and to a file under `work_dir`.

    Returns:
        str: Path of the log file.
    """
    logging_level = get_logging_level(verbose, quiet)
    coloredlogs.install(
        level=logging_level,
        fmt="%(levelname).1s%(asctime)s %(name)s:%(lineno)d] %(message)s",
        datefmt="%m%d %H:%M:%S.%f",
    )

    log_dir = os.path.join(work_dir, "log")
    os.makedirs(log_dir, exist_ok=True)

    try:
        username = getpass.getuser()
    except (KeyError, OSError):
        # No passwd entry, e.g., in a container.
        username = str(os.getuid())
    time_str = time.strftime("%Y%m%d-%H%M%S", time.localtime())
    filename = os.path.join(
        log_dir,
        f"{program_name}.{socket.gethostname()}.{username}.log.INFO."
        f"{time_str}.{os.getpid()}",
    )

    handler = logging.FileHandler(filename, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter(
            fmt=(
                "%(levelname).1s%(asctime)s.%(msecs)03d "
                "%(name)s:%(lineno)d] %(message)s"
            ),
            datefmt="%m%d %H:%M:%S",
        ),
    )
    handler.setLevel(logging.DEBUG)
    logging.getLogger().addHandler(handler)

    _logger.info("logging level set to %s", logging.getLevelName(logging_level))
    return filename
