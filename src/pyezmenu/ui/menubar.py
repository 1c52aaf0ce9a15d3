# ---------------------------------------------------------------------------
# File: menubar.py
# ---------------------------------------------------------------------------
# Description:
#	Tk host for MenubarController (view + timers + outside-click hook).
#
# Notes:
#	- The bar frame keeps keyboard focus for the widget's lifetime; menu
#	  item focus is logical (controller state) and drawn as a highlight,
#	  the Tk analogue of aria-activedescendant.
#	- Open menus are drawn as frames placed on the toplevel so they
#	  overlay the content below the bar.
#	- Everything drawn comes from the accessibility projection, so the
#	  view never reads menu state the projection does not expose.
#	- TkScheduler and TkOutsideListener are usable without the view.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/10/2026	Initial coding / release
# 10/11/2026	Outside-click listener bound on the toplevel, removed by funcid
# 10/13/2026	Render from the accessibility projection
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import ttk

from pyezmenu.app.controller import MenubarController
from pyezmenu.app.keys import KeyEvent
from pyezmenu.ui.accessibility import AccessibleNode, project
from pyezmenu.ui.component import Component


class TkScheduler:
	"""
	Scheduler backed by Tk's after/after_cancel.
	"""

	def __init__(self, widget: tk.Misc) -> None:
		self._widget = widget

	def call_later(self, delay_ms: int, callback: Callable[[], None]) -> str:
		return self._widget.after(delay_ms, callback)

	def cancel(self, handle: Any) -> None:
		self._widget.after_cancel(handle)

	def run_due(self) -> None:
		# Tk's event loop fires timers itself.
		return


class TkOutsideListener:
	"""
	Calls back on any button press inside `toplevel` that `is_inside` rejects.

	The binding is added with add="+" and removed by its own funcid, so
	other <ButtonPress> bindings on the toplevel survive detach().
	"""

	SEQUENCE = "<ButtonPress>"

	def __init__(self, toplevel: tk.Misc, is_inside: Callable[[Any], bool]) -> None:
		self._toplevel = toplevel
		self._is_inside = is_inside
		self._funcid: Optional[str] = None

	@property
	def attached(self) -> bool:
		return self._funcid is not None

	def attach(self, on_outside: Callable[[], Any]) -> None:
		if self._funcid is not None:
			return

		def _on_press(event: Any) -> None:
			if not self._is_inside(getattr(event, "widget", None)):
				on_outside()

		self._funcid = self._toplevel.bind(self.SEQUENCE, _on_press, add="+")

	def detach(self) -> None:
		funcid = self._funcid
		if funcid is None:
			return
		self._funcid = None

		script = self._toplevel.bind(self.SEQUENCE) or ""
		remaining = "\n".join(line for line in script.split("\n") if funcid not in line)
		self._toplevel.bind(self.SEQUENCE, remaining)
		self._toplevel.deletecommand(funcid)


def is_descendant(widget: Any, ancestors: list[Any]) -> bool:
	"""
	True when widget is one of ancestors or lives under one (by Tk path name).
	"""
	if widget is None:
		return False
	path = str(widget)
	for anc in ancestors:
		if anc is None:
			continue
		anc_path = str(anc)
		if path == anc_path or path.startswith(anc_path + "."):
			return True
	return False


def open_menu_nodes(tree: AccessibleNode) -> list[AccessibleNode]:
	"""
	Visible role=menu nodes, outermost first.
	"""
	return [n for n in tree.walk() if n.role == "menu" and n.attrs.get("aria-hidden") == "false"]


def menu_rows(menu: AccessibleNode) -> list[AccessibleNode]:
	"""
	Direct rows of one menu: focusable items and separators, groups flattened.
	Nested menus are excluded (they get their own frame).
	"""
	rows: list[AccessibleNode] = []

	def visit(node: AccessibleNode) -> None:
		for child in node.children:
			if child.role == "menu":
				continue
			if child.role in ("separator",) or (child.role or "").startswith("menuitem"):
				rows.append(child)
				continue
			visit(child)

	visit(menu)
	return rows


def row_text(node: AccessibleNode) -> str:
	prefix = ""
	if node.role == "menuitemcheckbox":
		prefix = "[x] " if node.attrs.get("aria-checked") == "true" else "[ ] "
	elif node.role == "menuitemradio":
		prefix = "(*) " if node.attrs.get("aria-checked") == "true" else "( ) "
	suffix = "  >" if node.attrs.get("aria-haspopup") == "menu" else ""
	return f"{prefix}{node.text}{suffix}"


@dataclass(eq=False)
class MenubarView(Component):
	"""
	MenubarView

	Tk rendering of a MenubarController.

	- controller:	The controller to drive and draw
	"""
	controller: Optional[MenubarController] = None

	_bar_labels: list[tk.Label] = field(default_factory=list, init=False)
	_menu_frames: list[tk.Frame] = field(default_factory=list, init=False)
	_item_labels: dict[str, tk.Label] = field(default_factory=dict, init=False)

	def __post_init__(self) -> None:
		super().__post_init__()
		if self.controller is None:
			raise ValueError("MenubarView requires a controller")

	def build(self, parent: tk.Misc) -> tk.Widget:
		ctl = self._ctl()
		frame = ttk.Frame(parent, takefocus=1)

		for index, entry in enumerate(ctl.entries):
			label = tk.Label(frame, text=entry.label, padx=8, pady=2)
			label.pack(side="left")
			label.bind("<Button-1>", lambda e, i=index: self._on_bar_click(i))
			label.bind("<Enter>", lambda e, i=index: ctl.hover_bar(i))
			self._bar_labels.append(label)

		frame.bind("<KeyPress>", self._on_key)
		frame.bind("<FocusOut>", self._on_focus_out)

		ctl.bind_host(
			scheduler=TkScheduler(frame),
			outside_listener=TkOutsideListener(frame.winfo_toplevel(), self._contains),
		)

		# Teardown runs newest first: unsubscribe, reset, then drop widgets.
		self.on_destroy(self._forget_widgets)
		self.on_destroy(ctl.reset)
		self.on_destroy(ctl.subscribe(lambda state: self.redraw()))
		return frame

	def redraw(self) -> None:
		if self.root is None:
			return

		tree = project(self._ctl())
		self._draw_bar(tree)
		self._draw_menus(tree)

	# -----------------------------------------------------------------------
	# Events
	# -----------------------------------------------------------------------

	def _on_key(self, event: tk.Event) -> Optional[str]:
		handled = self._ctl().handle_key(KeyEvent.from_tk(event))
		return "break" if handled else None

	def _on_focus_out(self, event: tk.Event) -> None:
		self._ctl().focus_out()

	def _on_bar_click(self, index: int) -> str:
		if self.root is not None:
			self.root.focus_set()
		self._ctl().click_bar(index)
		return "break"

	def _on_item_click(self, item_id: str) -> str:
		self._ctl().click_item(item_id)
		return "break"

	def _contains(self, widget: Any) -> bool:
		return is_descendant(widget, [self.root, *self._menu_frames])

	# -----------------------------------------------------------------------
	# Drawing
	# -----------------------------------------------------------------------

	def _draw_bar(self, tree: AccessibleNode) -> None:
		triggers = [n for n in tree.walk() if n.attrs.get("id", "").startswith(f"{self._ctl().id_prefix}-menubar-")]
		for label, node in zip(self._bar_labels, triggers):
			expanded = node.attrs.get("aria-expanded") == "true"
			label.configure(relief="sunken" if expanded else "flat")

	def _draw_menus(self, tree: AccessibleNode) -> None:
		self._clear_menus()

		top = self.root.winfo_toplevel() if self.root is not None else None
		if top is None:
			return

		anchor: Optional[tk.Widget] = None
		for depth, menu in enumerate(open_menu_nodes(tree)):
			frame = tk.Frame(top, borderwidth=1, relief="solid")
			for row in menu_rows(menu):
				self._draw_row(frame, row)

			x, y = self._menu_origin(top, depth, anchor, menu)
			frame.place(x=x, y=y)
			frame.lift()
			self._menu_frames.append(frame)
			anchor = frame

	def _draw_row(self, frame: tk.Frame, node: AccessibleNode) -> None:
		if node.role == "separator":
			ttk.Separator(frame, orient="horizontal").pack(fill="x", pady=2)
			return

		focused = node.attrs.get("tabindex") == "0"
		disabled = node.attrs.get("aria-disabled") == "true"

		label = tk.Label(
			frame,
			text=row_text(node),
			anchor="w",
			padx=8,
			relief="groove" if focused else "flat",
			state="disabled" if disabled else "normal",
		)
		label.pack(fill="x")
		if node.item_id is not None:
			label.bind("<Button-1>", lambda e, iid=node.item_id: self._on_item_click(iid))
			self._item_labels[node.item_id] = label

	def _menu_origin(
		self,
		top: tk.Misc,
		depth: int,
		anchor: Optional[tk.Widget],
		menu: AccessibleNode,
	) -> tuple[int, int]:
		top.update_idletasks()
		base_x, base_y = top.winfo_rootx(), top.winfo_rooty()

		if depth == 0 or anchor is None:
			index = self._ctl().state.open_bar_index or 0
			label = self._bar_labels[index]
			return label.winfo_rootx() - base_x, label.winfo_rooty() + label.winfo_height() - base_y

		trigger_item = self._trigger_item_id(menu)
		trigger = self._item_labels.get(trigger_item) if trigger_item else None
		y = (trigger.winfo_rooty() if trigger is not None else anchor.winfo_rooty()) - base_y
		return anchor.winfo_rootx() + anchor.winfo_width() - base_x, y

	def _trigger_item_id(self, menu: AccessibleNode) -> Optional[str]:
		prefix = f"{self._ctl().id_prefix}-menuitem-"
		labelled_by = menu.attrs.get("aria-labelledby", "")
		return labelled_by[len(prefix):] if labelled_by.startswith(prefix) else None

	def _forget_widgets(self) -> None:
		self._clear_menus()
		self._bar_labels.clear()

	def _clear_menus(self) -> None:
		for frame in self._menu_frames:
			frame.destroy()
		self._menu_frames.clear()
		self._item_labels.clear()

	def _ctl(self) -> MenubarController:
		if self.controller is None:
			raise RuntimeError("MenubarView has no controller")
		return self.controller
