# ---------------------------------------------------------------------------
# File: default_keys.py
# ---------------------------------------------------------------------------
# Description:
#	Default key bindings for the menubar, one keymap per mode.
#
# Notes:
#	- This module only declares bindings (policy); the controller owns
#	  what each intent does.
#	- "closed" covers roving focus on the bar itself, "menu" an open
#	  top-level dropdown, "submenu" any nested submenu.
#	- Tab/Shift+Tab live in the global keymap: they close everything in
#	  every mode and never consume the event.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/06/2026	Initial coding / release
# 10/11/2026	Split ArrowLeft/Escape between dropdown and submenu modes
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyezmenu.app.keys import CHAR_KEYSEQ, KeyMap
from pyezmenu.menu.state import MenuMode


def build_global_keymap() -> KeyMap:
	km = KeyMap()
	km.bind("Tab", "focus.leave")
	km.bind("Shift+Tab", "focus.leave")
	return km


def build_closed_keymap() -> KeyMap:
	km = KeyMap()
	km.bind("ArrowRight", "bar.next")
	km.bind("ArrowLeft", "bar.prev")
	km.bind("Home", "bar.first")
	km.bind("End", "bar.last")
	km.bind("ArrowDown", "bar.open_first")
	km.bind("Enter", "bar.open_first")
	km.bind("Space", "bar.open_first")
	km.bind("ArrowUp", "bar.open_last")
	return km


def _bind_list_keys(km: KeyMap) -> None:
	km.bind("ArrowDown", "menu.next")
	km.bind("ArrowUp", "menu.prev")
	km.bind("Home", "menu.first")
	km.bind("End", "menu.last")
	km.bind("Enter", "menu.activate")
	km.bind("Space", "menu.activate")
	km.bind("ArrowRight", "menu.expand")
	km.bind(CHAR_KEYSEQ, "menu.typeahead")


def build_menu_keymap() -> KeyMap:
	km = KeyMap()
	_bind_list_keys(km)
	km.bind("ArrowLeft", "bar.switch_prev")
	km.bind("Escape", "menu.close")
	return km


def build_submenu_keymap() -> KeyMap:
	km = KeyMap()
	_bind_list_keys(km)
	km.bind("ArrowLeft", "submenu.exit")
	km.bind("Escape", "submenu.exit")
	return km


def build_mode_keymaps() -> dict[str, KeyMap]:
	return {
		MenuMode.CLOSED.value: build_closed_keymap(),
		MenuMode.MENU.value: build_menu_keymap(),
		MenuMode.SUBMENU.value: build_submenu_keymap(),
	}
