# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public UI package surface for pyezmenu.
#
# Notes:
#	- Lazy exports (PEP 562) keep tkinter out of projection-only imports.
#	- Do NOT import from pyezmenu.ui inside ui modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"AccessibleNode",
	"project",
	"Component",
	"MenubarView",
	"TkScheduler",
	"TkOutsideListener",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"AccessibleNode": ("pyezmenu.ui.accessibility", "AccessibleNode"),
	"project": ("pyezmenu.ui.accessibility", "project"),
	"Component": ("pyezmenu.ui.component", "Component"),
	"MenubarView": ("pyezmenu.ui.menubar", "MenubarView"),
	"TkScheduler": ("pyezmenu.ui.menubar", "TkScheduler"),
	"TkOutsideListener": ("pyezmenu.ui.menubar", "TkOutsideListener"),
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
	from pyezmenu.ui.accessibility import AccessibleNode, project
	from pyezmenu.ui.component import Component
	from pyezmenu.ui.menubar import MenubarView, TkOutsideListener, TkScheduler
