# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ptypes

import json
import logging
import os
import subprocess
import sys
import threading
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from loguru import logger

from coreason_ptypes.config import PtypesSettings
from coreason_ptypes.string_or_uri import StringOrUri
from coreason_ptypes.utils.logger import configure_logging, trace_id_injector

_SRC_DIR = Path(__file__).parent.parent / "src"

_HOST_SETUP = """
import json, logging, sys
from loguru import logger
received = []
host_sink = logger.add(lambda msg: received.append(msg.record["message"]), level="DEBUG")
logging.basicConfig(handlers=[logging.StreamHandler(sys.stderr)], level=logging.DEBUG)
import coreason_ptypes
from coreason_ptypes import StringOrUri
StringOrUri.parse("alice")
logger.info("host message")
root = logging.getLogger()
print(json.dumps({
    "received": received,
    "root_handlers": [type(h).__name__ for h in root.handlers],
    "root_level": root.level,
}))
"""


def test_import_leaves_host_logging_untouched() -> None:
    """Verify importing the package keeps the application's sinks, handlers and level, and stays silent."""
    env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [str(_SRC_DIR), os.environ.get("PYTHONPATH")]))}
    result = subprocess.run([sys.executable, "-c", _HOST_SETUP], env=env, check=True, capture_output=True, text=True)
    state = json.loads(result.stdout)
    assert state["received"] == ["host message"]
    assert state["root_handlers"] == ["StreamHandler"]
    assert state["root_level"] == logging.DEBUG


def test_console_logging(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify human-readable logs go to stderr at the configured level."""
    configure_logging(PtypesSettings(log_level="INFO"))
    logger.info("Info message")
    logger.debug("Debug message")

    captured = capsys.readouterr()
    assert "Info message" in captured.err
    assert "Debug message" not in captured.err
    assert captured.out == ""


def test_configure_enables_package_logs(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify configure_logging turns on the package's own debug records."""
    configure_logging(PtypesSettings(log_level="DEBUG"))
    StringOrUri.parse("alice")

    assert "not a URI" in capsys.readouterr().err
    configure_logging(PtypesSettings())


def test_json_toggle(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify log_json switches to stdout and uses JSON."""
    configure_logging(PtypesSettings(log_json=True))
    logger.info("JSON Message")

    captured = capsys.readouterr()
    assert captured.err == ""
    log_record = json.loads(captured.out)
    assert log_record["record"]["message"] == "JSON Message"
    assert log_record["record"]["level"]["name"] == "INFO"


def test_env_configuration(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify settings are read from the environment when not given."""
    with patch.dict("os.environ", {"PTYPES_LOG_LEVEL": "DEBUG"}):
        configure_logging()
    logger.debug("Debug enabled")

    assert "Debug enabled" in capsys.readouterr().err


def test_reconfiguration_resilience(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify calling configure_logging multiple times doesn't duplicate logs."""
    settings = PtypesSettings()
    configure_logging(settings)
    configure_logging(settings)
    configure_logging(settings)

    logger.info("Single message")

    assert capsys.readouterr().err.count("Single message") == 1


def test_file_sink(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the optional file sink writes JSON records."""
    log_file = tmp_path / "nested" / "ptypes.log"
    configure_logging(PtypesSettings(log_file=log_file))
    logger.info("File message")
    logger.complete()

    lines = log_file.read_text().splitlines()
    assert json.loads(lines[-1])["record"]["message"] == "File message"
    configure_logging(PtypesSettings())


def test_file_sink_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify an unwritable log file keeps console logging and warns."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    configure_logging(PtypesSettings(log_file=blocker / "ptypes.log"))
    logger.info("Still logging")

    err = capsys.readouterr().err
    assert "File logging disabled" in err
    assert "Still logging" in err


def test_standard_logging_intercepted(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify records from the standard logging module reach loguru."""
    configure_logging(PtypesSettings())
    logging.getLogger("some.library").warning("Standard library warning")

    assert "Standard library warning" in capsys.readouterr().err


def test_trace_id_injection() -> None:
    """Verify trace and span ids are injected when a span is active."""
    span = MagicMock()
    span.get_span_context.return_value = MagicMock(is_valid=True, trace_id=1, span_id=2)
    record: dict = {"extra": {}}
    with patch("coreason_ptypes.utils.logger.trace.get_current_span", return_value=span):
        trace_id_injector(record)
    assert record["extra"]["trace_id"] == format(1, "032x")
    assert record["extra"]["span_id"] == format(2, "016x")


def test_trace_id_absent_without_span() -> None:
    """Verify nothing is injected outside a span."""
    record: dict = {"extra": {}}
    trace_id_injector(record)
    assert record["extra"] == {}


def test_concurrency_stress() -> None:
    """Verify logging is thread-safe under load."""
    configure_logging(PtypesSettings())

    def log_worker() -> None:
        for i in range(100):
            logger.debug(f"Worker thread {threading.get_ident()} iteration {i}")

    threads = [threading.Thread(target=log_worker) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
