# ---------------------------------------------------------------------------
# File: scheduler.py
# ---------------------------------------------------------------------------
# Description:
#	Timer abstraction used by the type-ahead matcher.
#
# Notes:
#	- Only one-shot, millisecond delays are needed.
#	- ClockScheduler is the headless implementation: callbacks fire from
#	  run_due(), which the controller calls before handling each event.
#	- The Tk implementation (after/after_cancel) lives in pyezmenu.ui.menubar.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/04/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import itertools
import time
from typing import Any, Callable, Protocol, runtime_checkable


TimerCallback = Callable[[], None]
Clock = Callable[[], float]


@runtime_checkable
class Scheduler(Protocol):
	"""
	Minimal timer interface the menu engine needs.
	"""
	def call_later(self, delay_ms: int, callback: TimerCallback) -> Any:
		...

	def cancel(self, handle: Any) -> None:
		...

	def run_due(self) -> None:
		...


class ClockScheduler:
	"""
	ClockScheduler

	Deadline-based scheduler driven by an injectable clock (seconds).
	Nothing runs in the background; due callbacks fire from run_due().
	"""

	def __init__(self, clock: Clock | None = None) -> None:
		self._clock: Clock = clock or time.monotonic
		self._ids = itertools.count(1)
		self._pending: dict[int, tuple[float, TimerCallback]] = {}

	def call_later(self, delay_ms: int, callback: TimerCallback) -> int:
		handle = next(self._ids)
		self._pending[handle] = (self._clock() + delay_ms / 1000.0, callback)
		return handle

	def cancel(self, handle: Any) -> None:
		self._pending.pop(handle, None)

	def run_due(self) -> None:
		now = self._clock()
		due = sorted(
			((deadline, handle) for handle, (deadline, _) in self._pending.items() if deadline <= now),
		)
		for _, handle in due:
			entry = self._pending.pop(handle, None)
			if entry is not None:
				entry[1]()

	def pending(self) -> int:
		return len(self._pending)
