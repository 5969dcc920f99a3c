from __future__ import annotations

import dataclasses

import pytest

from omnipository.core.themes import Palette, ThemeCatalog, ThemeDefinition
from omnipository.errors import ConfigurationError
from omnipository.interface.files import DEFAULTS


def test_default_catalog_has_the_three_themes() -> None:
    catalog = ThemeCatalog.from_config(DEFAULTS.themes)

    assert len(catalog) == 3
    assert catalog.ids() == ["Organization", "Systems", "Terminology"]
    assert "Systems" in catalog


def test_lookup_returns_definition() -> None:
    catalog = ThemeCatalog.from_config(DEFAULTS.themes)

    theme = catalog.lookup("Systems")

    assert theme.id == "Systems"
    assert theme.title == "Systems"
    assert theme.palette.shadow_color == (225, 29, 72, 102)


def test_lookup_miss_raises() -> None:
    catalog = ThemeCatalog.from_config(DEFAULTS.themes)

    with pytest.raises(ConfigurationError, match="unknown theme id"):
        catalog.lookup("nonexistent")


def test_lookup_miss_is_a_lookup_error() -> None:
    catalog = ThemeCatalog([])

    with pytest.raises(LookupError):
        catalog.lookup("Systems")


def test_duplicate_ids_are_rejected() -> None:
    palette = Palette(background=(0, 0, 0), shadow_color=(0, 0, 0, 0), text_color=(1, 1, 1))
    theme = ThemeDefinition(id="Systems", title="Systems", palette=palette)

    with pytest.raises(ConfigurationError):
        ThemeCatalog([theme, theme])


def test_definitions_are_immutable() -> None:
    theme = ThemeCatalog.from_config(DEFAULTS.themes).lookup("Organization")

    with pytest.raises(dataclasses.FrozenInstanceError):
        theme.title = "Other"
