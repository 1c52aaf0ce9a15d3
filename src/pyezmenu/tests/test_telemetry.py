# ---------------------------------------------------------------------------
# File: test_telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pyezmenu.core.telemetry.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Uses MemorySink for deterministic assertions.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/02/2026	Initial tests
# 10/09/2026	Cover MemorySink.named() and LogSink output
# 10/12/2026	Sink table and timer-on-error tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from pyezmenu.core.config import MenubarConfig
from pyezmenu.core.telemetry import (
	LogSink,
	MemorySink,
	NullSink,
	Telemetry,
	build_telemetry,
	get_telemetry,
	init_telemetry,
)


@pytest.fixture(autouse=True)
def _restore_global_telemetry():
	yield
	init_telemetry(None)


def test_telemetry_disabled_is_noop():
	sink = MemorySink()
	t = Telemetry(enabled=False, sink=sink)

	t.event("menubar.open", {"x": 1})
	t.counter("menubar.typeahead.miss", 3, {"k": "v"})

	with t.timer("menubar.render_ms"):
		pass

	assert sink.events == []
	assert sink.metrics == []
	assert t.enabled is False


def test_telemetry_event_emits_to_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	attrs = {"reason": "escape"}
	t.event("menubar.close", attrs)
	attrs["reason"] = "mutated"

	ev = sink.events[0]
	assert ev.name == "menubar.close"
	assert ev.attrs == {"reason": "escape"}
	assert isinstance(ev.timestamp, float)
	assert ev.timestamp > 0.0


def test_telemetry_counter_emits_metric_to_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.counter("menubar.typeahead.miss", 2, {"buffer": "zz"})

	m = sink.metrics[0]
	assert m.name == "menubar.typeahead.miss"
	assert m.value == 2.0
	assert m.attrs["buffer"] == "zz"


def test_telemetry_timer_emits_metric():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with t.timer("menubar.render_ms", {"entry_id": "file"}):
		pass

	assert len(sink.metrics) == 1
	assert sink.metrics[0].value >= 0.0
	assert sink.metrics[0].attrs == {"entry_id": "file"}


def test_memorysink_named_and_clear():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("menubar.open")
	t.event("menubar.close")
	t.event("menubar.open")
	t.counter("y")

	assert len(sink.named("menubar.open")) == 2

	sink.clear()

	assert sink.events == []
	assert sink.metrics == []


def test_logsink_writes_info(caplog):
	logger = logging.getLogger("pyezmenu.tests.telemetry")
	t = Telemetry(enabled=True, sink=LogSink(logger))

	with caplog.at_level(logging.INFO, logger="pyezmenu.tests.telemetry"):
		t.event("menubar.select", {"item_id": "save"})
		t.counter("menubar.typeahead.miss")

	messages = [r.getMessage() for r in caplog.records]
	assert any("menubar.select" in m and "save" in m for m in messages)
	assert any("menubar.typeahead.miss" in m for m in messages)


def test_nullsink_accepts_everything():
	t = Telemetry(enabled=True, sink=NullSink())
	t.event("x")
	t.counter("y")


def test_get_telemetry_safe_before_init_returns_disabled():
	init_telemetry(None)
	t = get_telemetry()

	t.event("should.not.raise")
	assert isinstance(t, Telemetry)
	assert t.enabled is False


def test_build_telemetry_reads_config_options():
	cfg = MenubarConfig(label="A", options={"telemetry_enabled": True, "telemetry_sink": "log"})
	assert build_telemetry(cfg).enabled is True

	assert build_telemetry({"telemetry_enabled": False}).enabled is False
	assert build_telemetry(None).enabled is False


def test_init_telemetry_enabled_unknown_sink_uses_nullsink():
	init_telemetry({"telemetry_enabled": True, "telemetry_sink": "nope"})

	t = get_telemetry()
	assert t.enabled is True

	# Should not raise.
	t.event("enabled.unknownsink")
	t.counter("enabled.unknownsink", 1)


def test_build_telemetry_memory_sink_records():
	t = build_telemetry({"telemetry_enabled": True, "telemetry_sink": "memory"})

	t.event("menubar.open", {"entry_id": "file"})
	assert t.enabled is True
	assert isinstance(t._sink, MemorySink)
	assert t._sink.named("menubar.open")[0].attrs == {"entry_id": "file"}


def test_timer_reports_even_when_block_raises():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with pytest.raises(RuntimeError):
		with t.timer("menubar.render_ms"):
			raise RuntimeError("boom")

	assert [m.name for m in sink.metrics] == ["menubar.render_ms"]
	assert sink.events == []
