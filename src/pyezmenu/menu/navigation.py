# ---------------------------------------------------------------------------
# File: navigation.py
# ---------------------------------------------------------------------------
# Description:
#	Navigation resolver: focusable sequences and directional moves.
#
# Notes:
#	- A list's focusable sequence drops separators, expands radio groups
#	  into their radios and keeps disabled items (focusable, not operable).
#	- next/prev wrap; first/last are the ends of the sequence.
#	- Only the default opening target skips disabled items.
#	- Pure functions over the item model; nothing here touches state.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/04/2026	Initial coding / release
# 10/08/2026	Add list resolution along an open path
# 10/17/2026	Focusable sequence built on is_focusable(); drop is_valid_chain
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Literal, Optional, Sequence

from pyezmenu.menu.model import (
	FocusableItem,
	MenuItem,
	MenuRadioGroup,
	MenuSubmenu,
	MenubarEntry,
	is_disabled,
	is_focusable,
)


Direction = Literal["next", "prev", "first", "last"]
Position = Literal["first", "last"]


def focusable_sequence(items: Sequence[MenuItem]) -> tuple[FocusableItem, ...]:
	out: list[FocusableItem] = []
	for item in items:
		if isinstance(item, MenuRadioGroup):
			out.extend(item.items)
		elif is_focusable(item):
			out.append(item)
	return tuple(out)


def enabled_sequence(items: Sequence[MenuItem]) -> tuple[FocusableItem, ...]:
	return tuple(item for item in focusable_sequence(items) if not is_disabled(item))


def default_target(items: Sequence[MenuItem], position: Position = "first") -> Optional[str]:
	"""
	Where focus lands when a list opens: first/last enabled item, or None.
	"""
	enabled = enabled_sequence(items)
	if not enabled:
		return None
	return enabled[0].id if position == "first" else enabled[-1].id


def resolve(items: Sequence[MenuItem], current_id: Optional[str], direction: Direction) -> Optional[str]:
	"""
	Compute the next focused id within one list.

	Returns None only when the list has nothing focusable.
	"""
	seq = focusable_sequence(items)
	n = len(seq)
	if n == 0:
		return None

	if direction == "first":
		return seq[0].id
	if direction == "last":
		return seq[-1].id

	ids = [item.id for item in seq]
	if current_id not in ids:
		return ids[0] if direction == "next" else ids[-1]

	i = ids.index(current_id)
	if direction == "next":
		return ids[(i + 1) % n]
	return ids[(i - 1 + n) % n]


def step_index(index: int, count: int, delta: int) -> int:
	"""
	Wrap an index around a sequence of count elements (bar-level moves).
	"""
	if count <= 0:
		return 0
	return (index + delta) % count


def find_item(items: Sequence[MenuItem], item_id: Optional[str]) -> Optional[FocusableItem]:
	"""
	Look up a focusable item in one list (radio-group members included).
	"""
	if item_id is None:
		return None
	for item in focusable_sequence(items):
		if item.id == item_id:
			return item
	return None


def radio_group_of(items: Sequence[MenuItem], radio_id: str) -> Optional[MenuRadioGroup]:
	for item in items:
		if isinstance(item, MenuRadioGroup) and any(r.id == radio_id for r in item.items):
			return item
	return None


def lists_along(entry: MenubarEntry, open_path: Sequence[str]) -> list[tuple[MenuItem, ...]]:
	"""
	Return the item list of every open level, outermost first.

	Stops at the first id that is not a submenu of the previous level, so a
	broken chain yields only its valid prefix.
	"""
	levels: list[tuple[MenuItem, ...]] = [entry.items]
	for submenu_id in open_path:
		sub = next(
			(it for it in levels[-1] if isinstance(it, MenuSubmenu) and it.id == submenu_id),
			None,
		)
		if sub is None:
			break
		levels.append(sub.items)
	return levels


def label_chain(entry: MenubarEntry, open_path: Sequence[str], item_id: str) -> tuple[str, ...]:
	"""
	Labels from the bar entry down to item_id (used for telemetry paths).
	"""
	labels = [entry.label]
	levels = lists_along(entry, open_path)
	for depth, submenu_id in enumerate(open_path[: len(levels) - 1]):
		sub = find_item(levels[depth], submenu_id)
		if sub is not None:
			labels.append(sub.label)
	item = find_item(levels[-1], item_id)
	if item is not None:
		labels.append(item.label)
	return tuple(labels)
