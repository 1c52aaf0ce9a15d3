# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared fixtures for pyezmenu tests.
#
# Notes:
#	- FakeClock drives ClockScheduler deterministically.
#	- tk_root skips when no display is available.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/04/2026	Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pyezmenu.core.config import MenubarConfig
from pyezmenu.core.scheduler import ClockScheduler
from pyezmenu.core.telemetry import MemorySink, Telemetry


class FakeClock:
	def __init__(self, start: float = 100.0) -> None:
		self.now = start

	def __call__(self) -> float:
		return self.now

	def advance_ms(self, ms: float) -> None:
		self.now += ms / 1000.0


@pytest.fixture
def clock() -> FakeClock:
	return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> ClockScheduler:
	return ClockScheduler(clock)


@pytest.fixture
def sink() -> MemorySink:
	return MemorySink()


@pytest.fixture
def telemetry(sink: MemorySink) -> Telemetry:
	return Telemetry(enabled=True, sink=sink)


@pytest.fixture
def config() -> MenubarConfig:
	return MenubarConfig(label="Application", id_prefix="mb")


@pytest.fixture
def tk_root():
	tk = pytest.importorskip("tkinter")
	try:
		root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"Tk display unavailable: {ex}")
	root.withdraw()
	try:
		yield root
	finally:
		root.destroy()
