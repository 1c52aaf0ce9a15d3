# ---------------------------------------------------------------------------
# File: test_accessibility.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the accessibility-tree projection.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/08/2026	Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pyezmenu.app.controller import MenubarController
from pyezmenu.app.keys import KeyEvent
from pyezmenu.core.config import MenubarConfig
from pyezmenu.core.scheduler import ClockScheduler
from pyezmenu.menu.model import MenuAction, MenuCheckbox, MenuSubmenu, MenubarEntry
from pyezmenu.ui.accessibility import AccessibleNode, project

from builders import disabled_bar, recent_bar, view_bar


@pytest.fixture
def make(clock, config):
	def _make(entries, cfg: MenubarConfig | None = None) -> MenubarController:
		return MenubarController(entries, config=cfg or config, scheduler=ClockScheduler(clock))

	return _make


def test_closed_tree_shape(make):
	tree = project(make(recent_bar()))

	assert tree.tag == "ul"
	assert tree.role == "menubar"
	assert tree.attrs == {"aria-label": "Application"}

	assert [li.role for li in tree.children] == ["none", "none", "none"]

	trigger, menu = tree.children[0].children
	assert trigger.role == "menuitem"
	assert trigger.text == "File"
	assert trigger.attrs == {
		"id": "mb-menubar-file",
		"aria-haspopup": "menu",
		"aria-expanded": "false",
		"tabindex": "0",
	}
	assert menu.role == "menu"
	assert menu.attrs == {
		"id": "mb-menu-file",
		"aria-labelledby": "mb-menubar-file",
		"aria-hidden": "true",
	}
	assert menu.children == ()

	assert tree.find("mb-menubar-edit").attrs["tabindex"] == "-1"


def test_labelledby_replaces_label(make):
	cfg = MenubarConfig(labelledby="app-title", id_prefix="mb")
	tree = project(make(recent_bar(), cfg))
	assert tree.attrs == {"aria-labelledby": "app-title"}


def test_open_menu_items_and_roving_tabindex(make):
	ctl = make(recent_bar())
	ctl.handle_key(KeyEvent("ArrowDown"))
	tree = project(ctl)

	menu = tree.find("mb-menu-file")
	assert menu.attrs["aria-hidden"] == "false"
	assert all(li.role == "none" for li in menu.children)

	assert tree.find_item("new").attrs["tabindex"] == "0"
	assert tree.find_item("save").attrs["tabindex"] == "-1"

	recent = tree.find("mb-menuitem-recent")
	assert recent.role == "menuitem"
	assert recent.attrs["aria-haspopup"] == "menu"
	assert recent.attrs["aria-expanded"] == "false"

	submenu = tree.find("mb-submenu-recent")
	assert submenu.attrs == {
		"id": "mb-submenu-recent",
		"aria-labelledby": "mb-menuitem-recent",
		"aria-hidden": "true",
	}


def test_expanded_submenu_has_children(make):
	ctl = make(recent_bar())
	for key in ("ArrowDown", "ArrowDown", "ArrowRight"):
		ctl.handle_key(KeyEvent(key))
	tree = project(ctl)

	submenu = tree.find("mb-submenu-recent")
	assert submenu.attrs["aria-hidden"] == "false"
	assert [n.item_id for n in submenu.walk() if n.role == "menuitem"] == ["doc1", "doc2"]
	assert tree.find_item("doc1").attrs["tabindex"] == "0"
	assert tree.find_item("recent").attrs["tabindex"] == "-1"


def test_checkbox_radio_group_and_separator_roles(make):
	ctl = make(view_bar())
	ctl.handle_key(KeyEvent("ArrowDown"))
	tree = project(ctl)

	assert tree.find_item("autosave").role == "menuitemcheckbox"
	assert tree.find_item("autosave").attrs["aria-checked"] == "false"
	assert tree.find_item("wordwrap").attrs["aria-checked"] == "true"

	assert len(tree.by_role("separator")) == 1
	assert tree.by_role("separator")[0].tag == "hr"

	group = tree.by_role("group")[0]
	assert group.tag == "ul"
	assert group.attrs == {"aria-label": "Theme"}
	radios = [n for n in group.walk() if n.role == "menuitemradio"]
	assert [r.attrs["aria-checked"] for r in radios] == ["true", "false", "false"]


def test_aria_disabled_only_on_disabled_items(make):
	ctl = make(disabled_bar())
	ctl.handle_key(KeyEvent("ArrowDown"))
	tree = project(ctl)

	assert tree.find_item("open").attrs["aria-disabled"] == "true"
	assert "aria-disabled" not in tree.find_item("new").attrs


def test_disabled_checkbox_and_submenu_are_marked(make):
	entries = (
		MenubarEntry(
			"file",
			"File",
			[
				MenuAction("new", "New"),
				MenuCheckbox("c", "C", disabled=True),
				MenuSubmenu("s", "S", [MenuAction("x", "X")], disabled=True),
			],
		),
	)
	ctl = make(entries)
	ctl.handle_key(KeyEvent("ArrowDown"))
	tree = project(ctl)

	assert tree.find_item("c").attrs["aria-disabled"] == "true"
	assert tree.find_item("s").attrs["aria-disabled"] == "true"


def test_to_dict_omits_empty_fields():
	node = AccessibleNode(tag="li", role="none", children=(AccessibleNode(tag="hr", role="separator"),))
	assert node.to_dict() == {"tag": "li", "role": "none", "children": [{"tag": "hr", "role": "separator"}]}
