# ---------------------------------------------------------------------------
# File: toggles.py
# ---------------------------------------------------------------------------
# Description:
#	Checkbox and radio state for menu items.
#
# Notes:
#	- Seeded once from the item tree's initial `checked` flags.
#	- One selected radio per group name; selecting replaces the previous one.
#	- Disabled items are never changed.
#	- Never touches open/focus paths: toggling keeps menus open.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/05/2026	Initial coding / release
# 10/09/2026	Fire group change callback only when the selection changes
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional, Sequence

from pyezmenu.menu.model import (
	MenuCheckbox,
	MenuRadio,
	MenuRadioGroup,
	MenubarEntry,
	seed_checkbox_states,
	seed_radio_states,
)


class ToggleStore:
	"""
	ToggleStore

	checkbox id -> checked, radio-group name -> selected radio id.
	"""

	def __init__(self, entries: Sequence[MenubarEntry] = ()) -> None:
		self._checkboxes: dict[str, bool] = seed_checkbox_states(entries)
		self._radios: dict[str, Optional[str]] = seed_radio_states(entries)

	def is_checked(self, item: MenuCheckbox) -> bool:
		return self._checkboxes.get(item.id, item.checked)

	def selected(self, group_name: str) -> Optional[str]:
		return self._radios.get(group_name)

	def is_selected(self, group: MenuRadioGroup, radio: MenuRadio) -> bool:
		return self._radios.get(group.name) == radio.id

	def toggle_checkbox(self, item: MenuCheckbox) -> Optional[bool]:
		"""
		Flip a checkbox; return its new value, or None when disabled.
		"""
		if item.disabled:
			return None

		checked = not self.is_checked(item)
		self._checkboxes[item.id] = checked

		if item.on_checked_change is not None:
			item.on_checked_change(checked)
		return checked

	def select_radio(self, group: MenuRadioGroup, radio: MenuRadio) -> bool:
		"""
		Select `radio` in `group`; return True when the selection changed.
		"""
		if radio.disabled or all(r.id != radio.id for r in group.items):
			return False

		if self._radios.get(group.name) == radio.id:
			return False

		self._radios[group.name] = radio.id

		if group.on_value_change is not None:
			group.on_value_change(radio.id)
		return True

	def snapshot(self) -> tuple[dict[str, bool], dict[str, Optional[str]]]:
		return dict(self._checkboxes), dict(self._radios)
