# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Interaction layer: key events, keymaps, routing and the controller.
# ---------------------------------------------------------------------------

from __future__ import annotations

from .controller import MenubarController, OutsideListener
from .keys import KeyEvent, KeyMap

__all__ = [
	"MenubarController",
	"OutsideListener",
	"KeyEvent",
	"KeyMap",
]
