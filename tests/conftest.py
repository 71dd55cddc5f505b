# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ptypes

from collections.abc import Generator

import pytest
from loguru import logger


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """
    Collects the messages of every record logged during the test, DEBUG included.
    """
    messages: list[str] = []
    logger.enable("coreason_ptypes")
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("coreason_ptypes")
