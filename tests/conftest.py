# tests/conftest.py

from __future__ import annotations

import pytest

from schtaskctl.config import SchedulerConfig
from schtaskctl.core import TaskRegistry

from .fakes import FakeScheduler


@pytest.fixture()
def config() -> SchedulerConfig:
    return SchedulerConfig(tool="schtasks.exe", timeout=5.0)


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def registry(config: SchedulerConfig, scheduler: FakeScheduler) -> TaskRegistry:
    return TaskRegistry(config, runner=scheduler)
