# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#	Base Tk component for pyezmenu views.
#
# Notes:
#	- mount() builds self.root under a parent, packs it with the options
#	  given at construction and draws once.
#	- on_destroy() registers teardown steps (unsubscribe, controller reset);
#	  destroy() runs them newest first, then destroys the widget.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/10/2026	Initial coding / release
# 10/12/2026	Teardown hooks replace destroy() overrides
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional
from uuid import uuid4

import tkinter as tk
from tkinter import ttk


@dataclass(eq=False)
class Component:
	"""
	Component

	- id:		Stable identifier; generated when not provided
	- name:		Human-friendly label (defaults to class name)
	- pack:		Options passed to pack() by layout()
	"""
	id: Optional[str] = None
	name: Optional[str] = None
	pack: dict[str, Any] = field(default_factory=lambda: {"fill": "x"})

	parent: Optional[tk.Misc] = field(default=None, init=False, repr=False)
	root: Optional[tk.Widget] = field(default=None, init=False, repr=False)
	_teardown: list[Callable[[], Any]] = field(default_factory=list, init=False, repr=False)

	def __post_init__(self) -> None:
		self.id = self.id or f"{type(self).__name__.lower()}-{uuid4().hex[:8]}"
		self.name = self.name or type(self).__name__

	@property
	def mounted(self) -> bool:
		return self.root is not None

	def mount(self, parent: tk.Misc) -> None:
		if self.mounted:
			raise RuntimeError(f"{self.name} is already mounted")

		self.parent = parent
		self.root = self.build(parent)
		self.layout()
		self.redraw()

	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Frame(parent)

	def layout(self) -> None:
		if self.root is not None:
			self.root.pack(**self.pack)

	def redraw(self) -> None:
		pass

	def on_destroy(self, step: Callable[[], Any]) -> None:
		self._teardown.append(step)

	def destroy(self) -> None:
		while self._teardown:
			self._teardown.pop()()

		if self.root is not None:
			self.root.destroy()
		self.root = None
		self.parent = None
