# ---------------------------------------------------------------------------
# File: test_config.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for MenubarConfig.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/03/2026	Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pyezmenu.core.config import DEFAULT_TYPEAHEAD_TIMEOUT_MS, MenubarConfig, mint_id_prefix


def test_defaults():
	cfg = MenubarConfig(label="Main")

	assert cfg.typeahead_timeout_ms == DEFAULT_TYPEAHEAD_TIMEOUT_MS == 500
	assert cfg.id_prefix.startswith("pyezmenu-")
	assert cfg.labelledby is None


def test_minted_prefixes_are_unique():
	assert mint_id_prefix() != mint_id_prefix()
	assert MenubarConfig(label="a").id_prefix != MenubarConfig(label="a").id_prefix


@pytest.mark.parametrize(
	"kwargs",
	[
		{},
		{"label": "A", "labelledby": "b"},
		{"label": ""},
	],
)
def test_exactly_one_name_source_required(kwargs):
	with pytest.raises(ValueError):
		MenubarConfig(**kwargs)


@pytest.mark.parametrize("timeout", [0, -5, 1.5, "500", True])
def test_bad_timeout_rejected(timeout):
	with pytest.raises(ValueError):
		MenubarConfig(label="A", typeahead_timeout_ms=timeout)


def test_empty_prefix_rejected():
	with pytest.raises(ValueError):
		MenubarConfig(label="A", id_prefix="")


def test_from_options_splits_known_keys():
	cfg = MenubarConfig.from_options(
		{
			"labelledby": "title",
			"typeahead_timeout_ms": 750,
			"id_prefix": "mb",
			"log_level": "DEBUG",
			"telemetry_enabled": True,
		}
	)

	assert cfg.labelledby == "title"
	assert cfg.typeahead_timeout_ms == 750
	assert cfg.id_prefix == "mb"
	assert cfg.options == {"log_level": "DEBUG", "telemetry_enabled": True}


def test_from_options_ignores_none_values():
	cfg = MenubarConfig.from_options({"label": "A", "id_prefix": None})
	assert cfg.id_prefix.startswith("pyezmenu-")


def test_get_reads_fields_then_options():
	cfg = MenubarConfig(label="A", options={"log_level": "WARNING"})

	assert cfg.get("label") == "A"
	assert cfg.get("typeahead_timeout_ms") == 500
	assert cfg.get("log_level") == "WARNING"
	assert cfg.get("missing", 3) == 3
