"""Unit tests for posrewrite.util."""

__copyright__ = """
Copyright (c) 2025 RapidStream Design Automation, Inc. and contributors.
All rights reserved. The contributor(s) of this file has/have agreed to the
RapidStream Contributor License Agreement.
"""

import logging
import os
from pathlib import Path
from unittest import mock

import pytest

import posrewrite.util


@pytest.mark.parametrize(
    ("verbose", "quiet", "level"),
    [
        (None, None, logging.INFO),
        (0, 0, logging.INFO),
        (1, 0, logging.DEBUG),
        (5, 0, logging.DEBUG),
        (0, 1, logging.WARNING),
        (2, 3, logging.WARNING),
        (0, 9, logging.CRITICAL),
    ],
)
def test_get_logging_level(verbose: int | None, quiet: int | None, level: int) -> None:
    assert posrewrite.util.get_logging_level(verbose, quiet) == level


@mock.patch("coloredlogs.install")
def test_setup_logging_writes_log_file(install_mock: mock.Mock, tmp_path: Path) -> None:
    filename = posrewrite.util.setup_logging(1, 0, str(tmp_path))
    try:
        install_mock.assert_called_once()
        assert install_mock.call_args.kwargs["level"] == logging.DEBUG
        assert os.path.dirname(filename) == str(tmp_path / "log")
        assert os.path.basename(filename).startswith("posrewrite.")
        assert os.path.exists(filename)
    finally:
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            if getattr(handler, "baseFilename", None) == os.path.abspath(filename):
                root_logger.removeHandler(handler)
                handler.close()


def test_text_codec_follows_options() -> None:
    assert posrewrite.util.encode_text("é") == b"\xc3\xa9"
    with mock.patch.object(posrewrite.util.Options, "text_encoding", "latin-1"):
        assert posrewrite.util.encode_text("é") == b"\xe9"
        assert posrewrite.util.decode_text(b"\xe9") == "é"
