"""
    The Omnipository shell wires the catalog, the bodies, the spring and the view
    state machine together. A frame driver calls tick(dt) once per refresh, input
    handling calls select/back, and a renderer reads render().
"""
import math

from easydict import EasyDict

from .bodies import Body, PositionIntegrator
from .spring import ZoomSpringController
from .themes import ThemeCatalog
from .view_state import ViewStateMachine, ViewState, render
from ..interface.files import DEFAULTS


def merge_config(config=None):
    """
    Returns a copy of DEFAULTS, updated with the keys of config. Nested dicts
    are merged key by key, anything else is replaced.
    """
    merged = _plain(DEFAULTS)
    if config is not None:
        _merge_into(merged, _plain(config))
    return EasyDict(merged)


def _plain(value):
    if isinstance(value, dict):
        return {key: _plain(val) for key, val in value.items()}
    if isinstance(value, list):
        return [_plain(val) for val in value]
    return value


def _merge_into(base, update):
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge_into(base[key], value)
        else:
            base[key] = value


class Omnipository:
    """
    Headless core of the shell. Owns every piece of mutable state; the
    renderer only reads it.
    """

    def __init__(self, config=None):
        """
        Parameters :
        config : dict, optional
            Overrides for DEFAULTS (see interface/files/default_configs.py).
        """
        self.config = merge_config(config)
        cfg = self.config

        self.catalog = ThemeCatalog.from_config(cfg.themes)

        self.bodies = [Body(id=s["id"], x=float(s["position"][0]), y=float(s["position"][1]))
                       for s in cfg.spheres]
        # Not checked against the catalog here, a dangling id surfaces on render()
        self.sphere_themes = [s["theme"] for s in cfg.spheres]
        self.sphere_radius = float(cfg.sphere_radius)

        self.spring = ZoomSpringController(initial=cfg.spring.overview_scale,
                                           stiffness=cfg.spring.stiffness,
                                           damping=cfg.spring.damping)
        self.view = ViewStateMachine(self.spring,
                                     overview_scale=cfg.spring.overview_scale,
                                     detail_scale=cfg.spring.detail_scale,
                                     clear_on_back=cfg.clear_on_back)
        self.integrator = PositionIntegrator(self.bodies,
                                             threshold=cfg.physics.threshold,
                                             strength=cfg.physics.strength,
                                             is_active=lambda: self.view.physics_active)

    def tick(self, dt):
        """
        One frame: repulsion sweep (no-op outside OVERVIEW), then the spring.
        """
        self.integrator.tick()
        self.spring.tick(dt)

    def select(self, theme_id):
        """
        Opens the detail view of theme_id. Unknown ids raise ConfigurationError
        and leave the state untouched.
        """
        self.catalog.lookup(theme_id)
        self.view.select(theme_id)

    def select_sphere(self, index):
        """
        Opens the detail view of the theme bound to sphere number index.
        """
        self.select(self.sphere_themes[index])

    def back(self):
        self.view.back()

    @property
    def state(self):
        return self.view.state

    @property
    def active_theme_id(self):
        return self.view.active_theme_id

    @property
    def scale(self):
        return self.spring.value

    @property
    def positions(self):
        return self.integrator.positions

    def render(self):
        """
        Returns the view model for the current frame, see view_state.render.
        """
        return render(self.view, self.positions, self.scale, self.catalog, self.sphere_themes)

    def sphere_at(self, point, origin=(0., 0.)):
        """
        Returns the index of the sphere under point, or None. Both point and
        origin are in screen coordinates, origin being where the world (0,0) is drawn.
        Spheres are drawn in index order, so the last one wins on overlaps.

        Only meaningful in OVERVIEW, returns None otherwise.
        """
        if self.view.state is not ViewState.OVERVIEW:
            return None

        px = (point[0] - origin[0]) / self.scale
        py = (point[1] - origin[1]) / self.scale
        for index in reversed(range(len(self.bodies))):
            body = self.bodies[index]
            if math.hypot(px - body.x, py - body.y) <= self.sphere_radius:
                return index
        return None
