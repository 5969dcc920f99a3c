from enum import Enum

from easydict import EasyDict

from ..errors import InvalidTransitionError


class ViewState(Enum):
    OVERVIEW = "overview"
    DETAIL = "detail"


class ViewStateMachine:
    """
    Holds the current view mode and the selected theme.

    OVERVIEW --select(theme_id)--> DETAIL --back()--> OVERVIEW

    Each transition also retargets the zoom spring. Events that are not allowed
    from the current state raise InvalidTransitionError.
    """

    def __init__(self, spring, overview_scale=0.6, detail_scale=1.2, clear_on_back=True):
        """
        Parameters :
        spring : ZoomSpringController
            Spring that is retargeted on each transition.
        overview_scale : float
            Spring target in OVERVIEW.
        detail_scale : float
            Spring target in DETAIL.
        clear_on_back : bool
            If True, back() forgets the selected theme. If False, the last
            selection is kept around while in OVERVIEW.
        """
        self.spring = spring
        self.overview_scale = overview_scale
        self.detail_scale = detail_scale
        self.clear_on_back = clear_on_back

        self._state = ViewState.OVERVIEW
        self._active_theme_id = None

        self.spring.set_target(self.overview_scale)

    @property
    def state(self):
        return self._state

    @property
    def active_theme_id(self):
        return self._active_theme_id

    @property
    def physics_active(self):
        """
        True while the spheres should float, i.e. in OVERVIEW.
        """
        return self._state is ViewState.OVERVIEW

    def select(self, theme_id):
        if self._state is not ViewState.OVERVIEW:
            raise InvalidTransitionError("select", self._state)

        self._active_theme_id = theme_id
        self._state = ViewState.DETAIL
        self.spring.set_target(self.detail_scale)

    def back(self):
        if self._state is not ViewState.DETAIL:
            raise InvalidTransitionError("back", self._state)

        if self.clear_on_back:
            self._active_theme_id = None
        self._state = ViewState.OVERVIEW
        self.spring.set_target(self.overview_scale)


def render(state_machine, positions, scale, catalog, sphere_themes):
    """
    Pure projection of the current state to what the renderer needs to draw.

    Args:
        state_machine : ViewStateMachine
        positions : sequence of (x,y), one per sphere
        scale : float, current zoom value
        catalog : ThemeCatalog
        sphere_themes : sequence of theme ids, one per sphere

    Returns: an EasyDict with keys :
        mode : the ViewState
        scale : the zoom value
        active_theme : ThemeDefinition of the selection, or None
        spheres : (OVERVIEW only, else empty) list of EasyDict with keys
            index, x, y, theme

    Raises ConfigurationError if a sphere or the selection refers to an unknown theme.
    """
    active_id = state_machine.active_theme_id
    active_theme = catalog.lookup(active_id) if active_id is not None else None

    spheres = []
    if state_machine.state is ViewState.OVERVIEW:
        for index, ((x, y), theme_id) in enumerate(zip(positions, sphere_themes)):
            spheres.append(EasyDict({
                "index": index,
                "x": float(x),
                "y": float(y),
                "theme": catalog.lookup(theme_id),
            }))

    return EasyDict({
        "mode": state_machine.state,
        "scale": float(scale),
        "active_theme": active_theme,
        "spheres": spheres,
    })
