"""Shared fixtures for kernel tests."""

from __future__ import annotations

import pytest

from bridgeware.kernel.tests.support import Recorder
from bridgeware.kernel.types import ActionSource


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def dispatcher() -> ActionSource:
    return ActionSource(file="app/screen.py", function="on_tap", line=42)
