# ---------------------------------------------------------------------------
# File: menu/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Menu engine: item model, path state, navigation, type-ahead, toggles.
#
# Notes:
#	- Pure Python; no Tk imports anywhere in this package.
# ---------------------------------------------------------------------------

from __future__ import annotations

from .model import (
	MenuAction,
	MenuCheckbox,
	MenuItem,
	MenuRadio,
	MenuRadioGroup,
	MenuSeparator,
	MenuSubmenu,
	MenubarEntry,
)
from .state import MenuMode, MenuState
from .toggles import ToggleStore
from .typeahead import TypeAhead

__all__ = [
	"MenuAction",
	"MenuCheckbox",
	"MenuItem",
	"MenuRadio",
	"MenuRadioGroup",
	"MenuSeparator",
	"MenuSubmenu",
	"MenubarEntry",
	"MenuMode",
	"MenuState",
	"ToggleStore",
	"TypeAhead",
]
