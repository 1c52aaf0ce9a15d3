# ---------------------------------------------------------------------------
# File: test_typeahead.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for TypeAhead (buffered first-character search).
#
# Notes:
#	- Time is driven by FakeClock through ClockScheduler; nothing sleeps.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/05/2026	Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyezmenu.menu.model import MenuAction, MenuSeparator
from pyezmenu.menu.typeahead import TypeAhead, is_typeahead_char


def _items():
	return (
		MenuAction("new", "New"),
		MenuAction("open", "Open"),
		MenuAction("save", "Save"),
	)


def test_is_typeahead_char():
	assert is_typeahead_char("s")
	assert is_typeahead_char("S")
	assert is_typeahead_char("1")
	assert not is_typeahead_char("s", ctrl=True)
	assert not is_typeahead_char("s", alt=True)
	assert not is_typeahead_char("s", meta=True)
	assert not is_typeahead_char("Enter")
	assert not is_typeahead_char("")


def test_single_char_jumps_and_repeat_stays_on_only_match(scheduler, clock):
	ta = TypeAhead(scheduler, 500)

	assert ta.search("s", _items(), "new") == "save"
	clock.advance_ms(100)
	scheduler.run_due()
	assert ta.search("s", _items(), "save") == "save"
	assert ta.buffer == "s"


def test_buffer_resets_after_timeout(scheduler, clock):
	ta = TypeAhead(scheduler, 500)

	assert ta.search("s", _items(), "new") == "save"
	assert ta.armed

	clock.advance_ms(501)
	scheduler.run_due()
	assert ta.buffer == ""
	assert not ta.armed

	assert ta.search("n", _items(), "save") == "new"


def test_timer_rearms_on_each_keystroke(scheduler, clock):
	ta = TypeAhead(scheduler, 500)
	items = (MenuAction("sa", "Save"), MenuAction("se", "Select"))

	ta.search("s", items, None)
	clock.advance_ms(400)
	scheduler.run_due()
	ta.search("e", items, "sa")
	clock.advance_ms(400)
	scheduler.run_due()

	assert ta.buffer == "se"
	assert scheduler.pending() == 1


def test_repeated_char_cycles_through_matches(scheduler):
	ta = TypeAhead(scheduler, 500)
	items = (
		MenuAction("new", "New"),
		MenuAction("save", "Save"),
		MenuAction("saveas", "Save As"),
		MenuAction("select", "Select All"),
	)

	assert ta.search("s", items, "new") == "save"
	assert ta.search("s", items, "save") == "saveas"
	assert ta.search("s", items, "saveas") == "select"
	assert ta.search("s", items, "select") == "save"


def test_multi_char_search_starts_at_current(scheduler):
	ta = TypeAhead(scheduler, 500)
	items = _items() + (MenuAction("select", "Select"),)

	assert ta.search("s", items, "new") == "save"
	assert ta.search("e", items, "save") == "save"
	assert ta.search("l", items, "save") == "select"


def test_search_is_case_insensitive(scheduler):
	ta = TypeAhead(scheduler, 500)
	assert ta.search("O", _items(), "new") == "open"


def test_disabled_items_are_not_matched(scheduler):
	ta = TypeAhead(scheduler, 500)
	items = (
		MenuAction("new", "New"),
		MenuAction("open", "Open", disabled=True),
		MenuSeparator("sep"),
		MenuAction("save", "Save"),
	)
	assert ta.search("o", items, "new") is None


def test_no_match_returns_none_but_keeps_timer(scheduler):
	ta = TypeAhead(scheduler, 500)
	assert ta.search("z", _items(), "new") is None
	assert ta.buffer == "z"
	assert ta.armed


def test_empty_list_does_nothing(scheduler):
	ta = TypeAhead(scheduler, 500)
	assert ta.search("a", (), None) is None
	assert ta.buffer == ""
	assert not ta.armed


def test_reset_clears_buffer_and_cancels_timer(scheduler):
	ta = TypeAhead(scheduler, 500)
	ta.search("s", _items(), "new")
	ta.reset()

	assert ta.buffer == ""
	assert not ta.armed
	assert scheduler.pending() == 0
