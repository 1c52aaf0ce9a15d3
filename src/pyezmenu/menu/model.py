# ---------------------------------------------------------------------------
# File: model.py
# ---------------------------------------------------------------------------
# Description:
#	Menu item definitions for pyezmenu.
#
# Notes:
#	- Closed set of variants: action, checkbox, radio, separator,
#	  radio group and submenu (recursive).
#	- MenubarEntry is one top-level bar button plus its dropdown items.
#	- Item lists passed as lists are normalized to tuples.
#	- Ids must be unique within a bar entry's subtree. This is not enforced;
#	  find_duplicate_ids() is available as an opt-in check.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/03/2026	Initial coding / release
# 10/05/2026	Add checkbox/radio-group change callbacks
# 10/08/2026	Add tree helpers (iter_items, find_duplicate_ids, seed states)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional, Sequence, TypeAlias, Union


CheckedChange = Callable[[bool], None]
ValueChange = Callable[[str], None]


def _as_tuple(items: Iterable["MenuItem"] | None) -> tuple["MenuItem", ...]:
	return tuple(items) if items is not None else ()


@dataclass(frozen=True, slots=True)
class MenuAction:
	"""
	Terminal item; activating it reports a selection and closes the menus.
	"""
	id: str
	label: str
	disabled: bool = False


@dataclass(frozen=True, slots=True)
class MenuCheckbox:
	"""
	MenuCheckbox

	id:					Item id
	label:				Display text (also used for type-ahead)
	disabled:			Focusable but inert when True
	checked:			Initial checked state
	on_checked_change:	Optional callback receiving the new checked value
	"""
	id: str
	label: str
	disabled: bool = False
	checked: bool = False
	on_checked_change: Optional[CheckedChange] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class MenuRadio:
	id: str
	label: str
	disabled: bool = False
	checked: bool = False


@dataclass(frozen=True, slots=True)
class MenuSeparator:
	id: str


@dataclass(frozen=True, slots=True)
class MenuRadioGroup:
	"""
	MenuRadioGroup

	id:					Group id
	name:				Selection key; one selected radio per name
	label:				Accessible label of the group
	items:				Member radios, in display order
	on_value_change:	Optional callback receiving the newly selected radio id
	"""
	id: str
	name: str
	label: str
	items: tuple[MenuRadio, ...] = ()
	on_value_change: Optional[ValueChange] = field(default=None, compare=False, repr=False)

	def __post_init__(self) -> None:
		object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True)
class MenuSubmenu:
	id: str
	label: str
	items: tuple["MenuItem", ...] = ()
	disabled: bool = False

	def __post_init__(self) -> None:
		object.__setattr__(self, "items", _as_tuple(self.items))


MenuItem: TypeAlias = Union[MenuAction, MenuCheckbox, MenuRadio, MenuSeparator, MenuRadioGroup, MenuSubmenu]

# Items that can hold focus (separators and groups never do).
FocusableItem: TypeAlias = Union[MenuAction, MenuCheckbox, MenuRadio, MenuSubmenu]


@dataclass(frozen=True, slots=True)
class MenubarEntry:
	"""
	MenubarEntry

	id:		Entry id
	label:	Bar button text (e.g., "File")
	items:	Dropdown contents
	"""
	id: str
	label: str
	items: tuple[MenuItem, ...] = ()

	def __post_init__(self) -> None:
		object.__setattr__(self, "items", _as_tuple(self.items))


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------

def is_disabled(item: MenuItem) -> bool:
	return bool(getattr(item, "disabled", False))


def is_focusable(item: MenuItem) -> bool:
	return isinstance(item, (MenuAction, MenuCheckbox, MenuRadio, MenuSubmenu))


def iter_items(items: Sequence[MenuItem]) -> Iterator[MenuItem]:
	"""
	Depth-first walk over items, radio-group members and submenu contents.
	"""
	for item in items:
		yield item
		if isinstance(item, MenuRadioGroup):
			yield from item.items
		elif isinstance(item, MenuSubmenu):
			yield from iter_items(item.items)


def find_duplicate_ids(entry: MenubarEntry) -> list[str]:
	"""
	Return ids that occur more than once within an entry's subtree.
	"""
	seen: set[str] = set()
	dupes: list[str] = []
	for item in iter_items(entry.items):
		if item.id in seen and item.id not in dupes:
			dupes.append(item.id)
		seen.add(item.id)
	return dupes


def seed_checkbox_states(entries: Sequence[MenubarEntry]) -> dict[str, bool]:
	return {
		item.id: item.checked
		for entry in entries
		for item in iter_items(entry.items)
		if isinstance(item, MenuCheckbox)
	}


def seed_radio_states(entries: Sequence[MenubarEntry]) -> dict[str, Optional[str]]:
	"""
	Map each radio-group name to its first initially-checked member (or None).
	"""
	out: dict[str, Optional[str]] = {}
	for entry in entries:
		for item in iter_items(entry.items):
			if not isinstance(item, MenuRadioGroup):
				continue
			checked = next((r.id for r in item.items if r.checked), None)
			if out.get(item.name) is None:
				out[item.name] = checked
	return out
