# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

import importlib
import json
import shutil
from pathlib import Path
from typing import Any, Generator

import pytest

import coreason_botapi.utils.logger as logger_module

LOG_DIR = Path("logs")


@pytest.fixture
def fresh_logger(capsys: pytest.CaptureFixture[str]) -> Generator[Any, None, None]:
    if LOG_DIR.exists():
        shutil.rmtree(LOG_DIR)
    importlib.reload(logger_module)
    yield logger_module.logger
    # Flush the enqueued file sink before the directory goes away.
    logger_module.logger.remove()
    shutil.rmtree(LOG_DIR, ignore_errors=True)
    importlib.reload(logger_module)


def test_logger_configures_stderr_and_file_sinks(fresh_logger: Any) -> None:
    assert LOG_DIR.is_dir()
    assert len(fresh_logger._core.handlers) == 2


def test_logger_writes_json_lines(fresh_logger: Any, capsys: pytest.CaptureFixture[str]) -> None:
    fresh_logger.info("Uploading 2 file(s) with sendMediaGroup")
    fresh_logger.debug("Calling sendMediaGroup (possible form data, 2 file(s))")

    err = capsys.readouterr().err
    assert "Uploading 2 file(s) with sendMediaGroup" in err
    # stderr is INFO and above only.
    assert "Calling sendMediaGroup" not in err

    fresh_logger.remove()
    records = [json.loads(line) for line in (LOG_DIR / "app.log").read_text().splitlines()]
    messages = [record["record"]["message"] for record in records]
    assert "Uploading 2 file(s) with sendMediaGroup" in messages
    assert "Calling sendMediaGroup (possible form data, 2 file(s))" in messages
