# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#	Telemetry facade for pyezmenu.
#
#	The menubar controller reports interaction outcomes (menus opened and
#	closed, items selected or toggled, type-ahead misses) as:
#		- events	(name + attrs)
#		- counters	(name + numeric value + attrs)
#		- timers	(context manager reporting elapsed ms as a counter)
#
# Notes:
#	- A sink has a single emit() taking either record type.
#	- NullSink is the default, LogSink writes through stdlib logging and
#	  MemorySink records everything for test assertions.
#	- Sinks are picked by name from config ("null", "log", "memory").
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/02/2026	Initial coding / release
# 10/09/2026	Add MemorySink.named() for controller tests
# 10/12/2026	Single emit() per sink; sinks selected from a name table
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Protocol, Union


@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	attrs: dict[str, Any] = field(default_factory=dict)
	timestamp: float = field(default_factory=time.time)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: dict[str, Any] = field(default_factory=dict)


TelemetryRecord = Union[TelemetryEvent, TelemetryMetric]


class TelemetrySink(Protocol):
	def emit(self, record: TelemetryRecord) -> None:
		...


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class NullSink:
	def emit(self, record: TelemetryRecord) -> None:
		return


class LogSink:
	"""
	One INFO line per record.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit(self, record: TelemetryRecord) -> None:
		if isinstance(record, TelemetryMetric):
			self._log.info("%s=%g %s", record.name, record.value, record.attrs)
		else:
			self._log.info("%s %s", record.name, record.attrs)


class MemorySink:
	"""
	Keeps every record, in emission order.
	"""

	def __init__(self) -> None:
		self.records: list[TelemetryRecord] = []

	def emit(self, record: TelemetryRecord) -> None:
		self.records.append(record)

	@property
	def events(self) -> list[TelemetryEvent]:
		return [r for r in self.records if isinstance(r, TelemetryEvent)]

	@property
	def metrics(self) -> list[TelemetryMetric]:
		return [r for r in self.records if isinstance(r, TelemetryMetric)]

	def named(self, name: str) -> list[TelemetryEvent]:
		return [e for e in self.events if e.name == name]

	def clear(self) -> None:
		self.records.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry

	Front over one sink; a disabled instance drops everything before the sink.
	"""

	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	def event(self, name: str, attrs: Optional[dict[str, Any]] = None) -> None:
		self._emit(lambda: TelemetryEvent(name, dict(attrs or {})))

	def counter(self, name: str, value: float = 1, attrs: Optional[dict[str, Any]] = None) -> None:
		self._emit(lambda: TelemetryMetric(name, float(value), dict(attrs or {})))

	@contextmanager
	def timer(self, name: str, attrs: Optional[dict[str, Any]] = None) -> Iterator[None]:
		"""
		Report the with-block's elapsed time (ms) as a counter, even on error.
		"""
		start = time.perf_counter()
		try:
			yield
		finally:
			self.counter(name, (time.perf_counter() - start) * 1000.0, attrs)

	def _emit(self, build: Callable[[], TelemetryRecord]) -> None:
		if self._enabled:
			self._sink.emit(build())


# ---------------------------------------------------------------------------
# Process-wide instance
# ---------------------------------------------------------------------------

_SINKS: dict[str, Callable[[logging.Logger], TelemetrySink]] = {
	"null": lambda log: NullSink(),
	"log": LogSink,
	"memory": lambda log: MemorySink(),
}

_telemetry: Optional[Telemetry] = None


def build_telemetry(cfg: Any | None, logger: logging.Logger | None = None) -> Telemetry:
	"""
	Build a Telemetry from config.

	Recognized keys:
		telemetry_enabled:	bool
		telemetry_sink:		"null" | "log" | "memory" (unknown names -> "null")
	"""
	getter = getattr(cfg, "get", None)
	if not callable(getter) or not getter("telemetry_enabled", False):
		return Telemetry(False, NullSink())

	factory = _SINKS.get(str(getter("telemetry_sink", "null")), _SINKS["null"])
	return Telemetry(True, factory(logger or logging.getLogger("pyezmenu.telemetry")))


def init_telemetry(cfg: Any | None, logger: logging.Logger | None = None) -> Telemetry:
	global _telemetry
	_telemetry = build_telemetry(cfg, logger)
	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Process-wide telemetry; disabled until init_telemetry() runs.
	"""
	if _telemetry is None:
		return init_telemetry(None)
	return _telemetry
