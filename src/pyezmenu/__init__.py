# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public package surface for pyezmenu.
#
# Notes:
#	- Lazy exports (PEP 562): importing pyezmenu never imports tkinter;
#	  only touching MenubarView does.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

try:
	from importlib.metadata import version

	__version__ = version("pyezmenu")
except Exception:
	__version__ = "0.0.0.dev"

__all__ = [
	# Item model
	"MenuAction", "MenuCheckbox", "MenuRadio", "MenuSeparator",
	"MenuRadioGroup", "MenuSubmenu", "MenubarEntry",

	# Engine
	"MenubarController", "MenubarConfig", "KeyEvent", "MenuState",

	# Projection + Tk host
	"project", "AccessibleNode", "MenubarView",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"MenuAction": ("pyezmenu.menu.model", "MenuAction"),
	"MenuCheckbox": ("pyezmenu.menu.model", "MenuCheckbox"),
	"MenuRadio": ("pyezmenu.menu.model", "MenuRadio"),
	"MenuSeparator": ("pyezmenu.menu.model", "MenuSeparator"),
	"MenuRadioGroup": ("pyezmenu.menu.model", "MenuRadioGroup"),
	"MenuSubmenu": ("pyezmenu.menu.model", "MenuSubmenu"),
	"MenubarEntry": ("pyezmenu.menu.model", "MenubarEntry"),
	"MenuState": ("pyezmenu.menu.state", "MenuState"),

	"MenubarController": ("pyezmenu.app.controller", "MenubarController"),
	"MenubarConfig": ("pyezmenu.core.config", "MenubarConfig"),
	"KeyEvent": ("pyezmenu.app.keys", "KeyEvent"),

	"project": ("pyezmenu.ui.accessibility", "project"),
	"AccessibleNode": ("pyezmenu.ui.accessibility", "AccessibleNode"),
	"MenubarView": ("pyezmenu.ui.menubar", "MenubarView"),
}


def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)


def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))


if TYPE_CHECKING:
	from pyezmenu.app.controller import MenubarController
	from pyezmenu.app.keys import KeyEvent
	from pyezmenu.core.config import MenubarConfig
	from pyezmenu.menu.model import (
		MenuAction, MenuCheckbox, MenuRadio, MenuSeparator,
		MenuRadioGroup, MenuSubmenu, MenubarEntry,
	)
	from pyezmenu.menu.state import MenuState
	from pyezmenu.ui.accessibility import AccessibleNode, project
	from pyezmenu.ui.menubar import MenubarView
