# ---------------------------------------------------------------------------
# File: state.py
# ---------------------------------------------------------------------------
# Description:
#	Focus/open path tracker for the menubar.
#
# Notes:
#	- MenuState is immutable; every transition returns a new state.
#	- Invariants kept by all transitions:
#		* closed  => open_path == () and focus_path == ()
#		* open    => len(focus_path) == len(open_path) + 1
#		* open_path is a valid submenu chain from the open entry
#	- A None at the end of focus_path means the open list has no focus
#	  target (nothing enabled to land on).
#	- bar_focus_index owns the menubar's roving tabindex.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/04/2026	Initial coding / release
# 10/08/2026	Track bar_focus_index alongside the open path
# 10/17/2026	Move the invariant checker out to the tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence

from pyezmenu.menu.model import MenuSubmenu, MenubarEntry, is_disabled
from pyezmenu.menu.navigation import Position, default_target


class MenuMode(str, Enum):
	CLOSED = "closed"
	MENU = "menu"
	SUBMENU = "submenu"


@dataclass(frozen=True, slots=True)
class MenuState:
	open_bar_index: Optional[int] = None
	open_path: tuple[str, ...] = ()
	focus_path: tuple[Optional[str], ...] = ()
	bar_focus_index: int = 0

	@property
	def is_open(self) -> bool:
		return self.open_bar_index is not None

	@property
	def depth(self) -> int:
		return len(self.open_path)

	@property
	def focused_id(self) -> Optional[str]:
		return self.focus_path[-1] if self.focus_path else None

	@property
	def mode(self) -> MenuMode:
		if not self.is_open:
			return MenuMode.CLOSED
		return MenuMode.SUBMENU if self.open_path else MenuMode.MENU


CLOSED = MenuState()


def open_bar(
	state: MenuState,
	entries: Sequence[MenubarEntry],
	index: int,
	position: Position = "first",
) -> MenuState:
	"""
	Open entry `index` and seed focus on its first/last enabled item.

	Re-opening the entry that is already open is a no-op; opening a
	different entry while one is open retargets directly.
	"""
	if not 0 <= index < len(entries):
		return state

	if state.open_bar_index == index:
		return state

	target = default_target(entries[index].items, position)
	return MenuState(
		open_bar_index=index,
		open_path=(),
		focus_path=(target,),
		bar_focus_index=index,
	)


def close_all(state: MenuState) -> MenuState:
	"""
	Close every menu. The bar's roving focus stays where it was.
	"""
	if not state.is_open:
		return state
	return MenuState(bar_focus_index=state.bar_focus_index)


def focus_bar(state: MenuState, entries: Sequence[MenubarEntry], index: int) -> MenuState:
	if not 0 <= index < len(entries):
		return state
	return replace(state, bar_focus_index=index)


def enter_submenu(state: MenuState, submenu: MenuSubmenu, position: Position = "first") -> MenuState:
	"""
	Open `submenu` one level deeper; it must be the focused, enabled item.
	"""
	if not state.is_open or state.focused_id != submenu.id or is_disabled(submenu):
		return state

	return replace(
		state,
		open_path=state.open_path + (submenu.id,),
		focus_path=state.focus_path + (default_target(submenu.items, position),),
	)


def exit_submenu(state: MenuState) -> MenuState:
	"""
	Close the innermost submenu; focus returns to its trigger.

	No-op at depth 0 (the caller decides how to leave the dropdown).
	"""
	if not state.open_path:
		return state
	return replace(state, open_path=state.open_path[:-1], focus_path=state.focus_path[:-1])


def set_focused_item(state: MenuState, item_id: Optional[str]) -> MenuState:
	"""
	Replace the focused item at the current depth.
	"""
	if not state.is_open:
		return state
	return replace(state, focus_path=state.focus_path[:-1] + (item_id,))


def truncate_to(state: MenuState, depth: int) -> MenuState:
	"""
	Close open submenus deeper than `depth` (0 = only the dropdown stays open).
	"""
	if not state.is_open or depth >= state.depth:
		return state
	depth = max(depth, 0)
	return replace(state, open_path=state.open_path[:depth], focus_path=state.focus_path[: depth + 1])

