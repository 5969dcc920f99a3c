from dataclasses import dataclass

from ..errors import ConfigurationError


@dataclass(frozen=True)
class Palette:
    """
    Colors of a theme, as RGB or RGBA tuples that pygame can use directly.
    """
    background: tuple
    shadow_color: tuple
    text_color: tuple


@dataclass(frozen=True)
class ThemeDefinition:
    id: str
    title: str
    palette: Palette


class ThemeCatalog:
    """
    Read-only table of the themes the shell can display. Populated once,
    at startup, from the 'themes' entry of the configuration.
    """

    def __init__(self, themes):
        """
        Parameters :
        themes : iterable of ThemeDefinition
            The themes of the catalog. Ids must be unique.
        """
        self._themes = {}
        for theme in themes:
            if theme.id in self._themes:
                raise ConfigurationError(f"duplicate theme id: {theme.id!r}")
            self._themes[theme.id] = theme

    @classmethod
    def from_config(cls, theme_configs):
        """
        Builds the catalog from a list of dicts with keys 'id', 'title' and 'palette',
        as found in DEFAULTS.themes.
        """
        return cls(
            ThemeDefinition(id=cfg["id"], title=cfg["title"], palette=Palette(**cfg["palette"]))
            for cfg in theme_configs
        )

    def lookup(self, theme_id) -> ThemeDefinition:
        """
        Returns the ThemeDefinition for theme_id. An unknown id is a configuration
        defect, so it raises instead of handing a blank theme to the renderer.
        """
        try:
            return self._themes[theme_id]
        except KeyError:
            raise ConfigurationError(f"unknown theme id: {theme_id!r}") from None

    def ids(self):
        return list(self._themes.keys())

    def __contains__(self, theme_id):
        return theme_id in self._themes

    def __len__(self):
        return len(self._themes)

    def __iter__(self):
        return iter(self._themes.values())
