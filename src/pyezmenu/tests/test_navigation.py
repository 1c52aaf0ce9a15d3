# ---------------------------------------------------------------------------
# File: test_navigation.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for list navigation (focusable sequence, wrap, defaults).
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/04/2026	Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyezmenu.menu.model import MenuAction, MenuSeparator, MenubarEntry
from pyezmenu.menu.navigation import (
	default_target,
	enabled_sequence,
	find_item,
	focusable_sequence,
	label_chain,
	lists_along,
	radio_group_of,
	resolve,
	step_index,
)

from builders import deep_bar, disabled_bar, view_bar


def test_focusable_sequence_skips_separators_and_expands_groups():
	ids = [item.id for item in focusable_sequence(view_bar()[0].items)]
	assert ids == ["autosave", "wordwrap", "light", "dark", "system"]


def test_focusable_sequence_keeps_disabled_items():
	ids = [item.id for item in focusable_sequence(disabled_bar()[0].items)]
	assert ids == ["new", "open", "save"]

	ids = [item.id for item in enabled_sequence(disabled_bar()[0].items)]
	assert ids == ["new", "save"]


def test_resolve_wraps_in_both_directions():
	items = view_bar()[0].items
	assert resolve(items, "system", "next") == "autosave"
	assert resolve(items, "autosave", "prev") == "system"


def test_resolve_never_lands_on_separator():
	items = view_bar()[0].items
	assert resolve(items, "wordwrap", "next") == "light"
	assert resolve(items, "light", "prev") == "wordwrap"


def test_resolve_visits_disabled_items():
	items = disabled_bar()[0].items
	assert resolve(items, "new", "next") == "open"


def test_resolve_first_and_last():
	items = view_bar()[0].items
	assert resolve(items, "dark", "first") == "autosave"
	assert resolve(items, "dark", "last") == "system"


def test_resolve_with_unknown_current():
	items = view_bar()[0].items
	assert resolve(items, None, "next") == "autosave"
	assert resolve(items, None, "prev") == "system"
	assert resolve(items, "missing", "next") == "autosave"


def test_resolve_empty_list_returns_none():
	assert resolve([], None, "next") is None
	assert resolve([MenuSeparator("s")], None, "first") is None


def test_default_target_skips_disabled():
	items = [MenuAction("a", "A", disabled=True), MenuAction("b", "B"), MenuAction("c", "C", disabled=True)]
	assert default_target(items, "first") == "b"
	assert default_target(items, "last") == "b"


def test_default_target_none_when_nothing_enabled():
	items = [MenuAction("a", "A", disabled=True), MenuSeparator("s")]
	assert default_target(items) is None


def test_step_index_wraps():
	assert step_index(2, 3, +1) == 0
	assert step_index(0, 3, -1) == 2
	assert step_index(0, 0, +1) == 0


def test_find_item_finds_radio_group_members():
	items = view_bar()[0].items
	assert find_item(items, "dark").label == "Dark"
	assert find_item(items, "sep1") is None
	assert find_item(items, None) is None


def test_radio_group_of():
	items = view_bar()[0].items
	assert radio_group_of(items, "dark").name == "theme"
	assert radio_group_of(items, "autosave") is None


def test_lists_along_follows_open_path():
	entry = deep_bar()[0]
	levels = lists_along(entry, ("level1", "level2"))
	assert [len(level) for level in levels] == [2, 2, 2]
	assert levels[2][0].id == "l2a"


def test_lists_along_stops_at_broken_chain():
	entry = deep_bar()[0]
	assert len(lists_along(entry, ("level2",))) == 1
	assert len(lists_along(entry, ("level1", "level2"))) == 3


def test_label_chain():
	entry = deep_bar()[0]
	assert label_chain(entry, ("level1", "level2"), "l2b") == ("Tools", "Level 1", "Level 2", "Deep B")
	assert label_chain(entry, (), "prefs") == ("Tools", "Preferences")


def test_label_chain_for_single_entry_bar():
	entry = MenubarEntry("file", "File", [MenuAction("new", "New")])
	assert label_chain(entry, (), "new") == ("File", "New")


def test_next_and_prev_cycle_back_to_start():
	items = view_bar()[0].items + disabled_bar()[0].items
	ids = [item.id for item in focusable_sequence(items)]

	for direction in ("next", "prev"):
		for start in ids:
			current = start
			for _ in range(len(ids)):
				current = resolve(items, current, direction)
				assert current != "sep1"
			assert current == start
