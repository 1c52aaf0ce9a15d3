# ---------------------------------------------------------------------------
# File: accessibility.py
# ---------------------------------------------------------------------------
# Description:
#	Accessibility-tree projection of a menubar controller.
#
# Notes:
#	- project() is a pure read of controller state; it builds a fresh tree
#	  of AccessibleNode objects each call.
#	- Attribute values are strings, exactly as they would appear in markup:
#		aria-expanded / aria-checked / aria-hidden:	"true" | "false"
#		aria-disabled:	"true" on disabled items, absent otherwise
#		tabindex:		"0" | "-1"
#	- Id scheme (prefix = controller.id_prefix):
#		{prefix}-menubar-{entry}	bar entry trigger
#		{prefix}-menu-{entry}		its dropdown
#		{prefix}-menuitem-{item}	submenu trigger
#		{prefix}-submenu-{item}		its submenu
#	- Closed menus stay in the tree (aria-hidden="true") with no children.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/08/2026	Initial coding / release
# 10/12/2026	Add find/walk helpers for views and tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, Optional, Sequence

from pyezmenu.menu.model import (
	MenuAction,
	MenuCheckbox,
	MenuItem,
	MenuRadio,
	MenuRadioGroup,
	MenuSeparator,
	MenuSubmenu,
)

if TYPE_CHECKING:
	from pyezmenu.app.controller import MenubarController


@dataclass(frozen=True, slots=True)
class AccessibleNode:
	"""
	AccessibleNode

	tag:		Element kind ("ul", "li", "span", "hr")
	role:		Explicit ARIA role, or None when the element's own role applies
	attrs:		ARIA/id/tabindex attributes as strings
	text:		Visible text (labels only)
	children:	Child nodes, in document order
	item_id:	Id of the menu item or bar entry this node represents
	"""
	tag: str
	role: Optional[str] = None
	attrs: dict[str, str] = field(default_factory=dict)
	text: str = ""
	children: tuple["AccessibleNode", ...] = ()
	item_id: Optional[str] = None

	@property
	def id(self) -> Optional[str]:
		return self.attrs.get("id")

	def walk(self) -> Iterator["AccessibleNode"]:
		yield self
		for child in self.children:
			yield from child.walk()

	def find(self, element_id: str) -> Optional["AccessibleNode"]:
		return next((n for n in self.walk() if n.id == element_id), None)

	def find_item(self, item_id: str) -> Optional["AccessibleNode"]:
		"""
		Return the focusable node (menuitem*) for an item or bar entry id.
		"""
		return next(
			(n for n in self.walk() if n.item_id == item_id and n.role and n.role.startswith("menuitem")),
			None,
		)

	def by_role(self, role: str) -> list["AccessibleNode"]:
		return [n for n in self.walk() if n.role == role]

	def to_dict(self) -> dict[str, Any]:
		out: dict[str, Any] = {"tag": self.tag}
		if self.role:
			out["role"] = self.role
		if self.attrs:
			out["attrs"] = dict(self.attrs)
		if self.text:
			out["text"] = self.text
		if self.children:
			out["children"] = [c.to_dict() for c in self.children]
		return out


def _flag(value: bool) -> str:
	return "true" if value else "false"


def _tabindex(focused: bool) -> str:
	return "0" if focused else "-1"


class _Projector:
	"""
	One projection pass over a controller.
	"""

	def __init__(self, controller: "MenubarController") -> None:
		self._c = controller
		self._state = controller.state
		self._prefix = controller.id_prefix
		self._focused = controller.state.focused_id

	def menubar(self) -> AccessibleNode:
		cfg = self._c.config
		attrs: dict[str, str] = {}
		if cfg.label:
			attrs["aria-label"] = cfg.label
		else:
			attrs["aria-labelledby"] = str(cfg.labelledby)

		children = tuple(self._bar_entry(i) for i in range(len(self._c.entries)))
		return AccessibleNode(tag="ul", role="menubar", attrs=attrs, children=children)

	def _bar_entry(self, index: int) -> AccessibleNode:
		entry = self._c.entries[index]
		expanded = self._state.open_bar_index == index
		trigger_id = f"{self._prefix}-menubar-{entry.id}"

		trigger = AccessibleNode(
			tag="span",
			role="menuitem",
			attrs={
				"id": trigger_id,
				"aria-haspopup": "menu",
				"aria-expanded": _flag(expanded),
				"tabindex": _tabindex(index == self._state.bar_focus_index),
			},
			text=entry.label,
			item_id=entry.id,
		)
		menu = self._menu(
			f"{self._prefix}-menu-{entry.id}",
			trigger_id,
			entry.items if expanded else None,
		)
		return AccessibleNode(tag="li", role="none", children=(trigger, menu))

	def _menu(self, menu_id: str, labelled_by: str, items: Optional[Sequence[MenuItem]]) -> AccessibleNode:
		return AccessibleNode(
			tag="ul",
			role="menu",
			attrs={
				"id": menu_id,
				"aria-labelledby": labelled_by,
				"aria-hidden": _flag(items is None),
			},
			children=self._items(items) if items is not None else (),
		)

	def _items(self, items: Sequence[MenuItem]) -> tuple[AccessibleNode, ...]:
		return tuple(self._wrap(self._item(item)) for item in items)

	def _wrap(self, node: AccessibleNode | tuple[AccessibleNode, ...]) -> AccessibleNode:
		children = node if isinstance(node, tuple) else (node,)
		return AccessibleNode(tag="li", role="none", children=children)

	def _item(self, item: MenuItem) -> AccessibleNode | tuple[AccessibleNode, ...]:
		if isinstance(item, MenuSeparator):
			return AccessibleNode(tag="hr", role="separator", item_id=item.id)

		if isinstance(item, MenuRadioGroup):
			return AccessibleNode(
				tag="ul",
				role="group",
				attrs={"aria-label": item.label},
				children=tuple(self._wrap(self._radio(item, radio)) for radio in item.items),
				item_id=item.id,
			)

		if isinstance(item, MenuCheckbox):
			return self._leaf(item, "menuitemcheckbox", {"aria-checked": _flag(self._c.is_checked(item))})

		if isinstance(item, MenuSubmenu):
			expanded = item.id in self._state.open_path
			trigger_id = f"{self._prefix}-menuitem-{item.id}"
			trigger = self._leaf(
				item,
				"menuitem",
				{"aria-haspopup": "menu", "aria-expanded": _flag(expanded)},
				element_id=trigger_id,
			)
			submenu = self._menu(
				f"{self._prefix}-submenu-{item.id}",
				trigger_id,
				item.items if expanded else None,
			)
			return (trigger, submenu)

		if isinstance(item, MenuRadio):
			# Radio outside any group: rendered, never checked.
			return self._leaf(item, "menuitemradio", {"aria-checked": "false"})

		return self._leaf(item, "menuitem", {})

	def _radio(self, group: MenuRadioGroup, radio: MenuRadio) -> AccessibleNode:
		return self._leaf(radio, "menuitemradio", {"aria-checked": _flag(self._c.is_checked(radio, group))})

	def _leaf(
		self,
		item: MenuAction | MenuCheckbox | MenuRadio | MenuSubmenu,
		role: str,
		extra: dict[str, str],
		*,
		element_id: Optional[str] = None,
	) -> AccessibleNode:
		attrs: dict[str, str] = {}
		if element_id:
			attrs["id"] = element_id
		attrs.update(extra)
		if item.disabled:
			attrs["aria-disabled"] = "true"
		attrs["tabindex"] = _tabindex(item.id == self._focused)
		return AccessibleNode(tag="span", role=role, attrs=attrs, text=item.label, item_id=item.id)


def project(controller: "MenubarController") -> AccessibleNode:
	"""
	Build the accessibility tree for the controller's current state.
	"""
	return _Projector(controller).menubar()
