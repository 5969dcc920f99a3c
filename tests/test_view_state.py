from __future__ import annotations

import pytest

from omnipository.core.spring import ZoomSpringController
from omnipository.core.themes import ThemeCatalog
from omnipository.core.view_state import ViewState, ViewStateMachine, render
from omnipository.errors import ConfigurationError, InvalidTransitionError
from omnipository.interface.files import DEFAULTS

POSITIONS = [(-150., -100.), (180., 20.), (-20., 150.)]
SPHERE_THEMES = ["Organization", "Systems", "Terminology"]


def make_machine(clear_on_back=True) -> ViewStateMachine:
    return ViewStateMachine(ZoomSpringController(initial=0.6), clear_on_back=clear_on_back)


def test_initial_state() -> None:
    machine = make_machine()

    assert machine.state is ViewState.OVERVIEW
    assert machine.active_theme_id is None
    assert machine.physics_active
    assert machine.spring.target == 0.6


def test_select_opens_detail() -> None:
    machine = make_machine()

    machine.select("Systems")

    assert machine.state is ViewState.DETAIL
    assert machine.active_theme_id == "Systems"
    assert not machine.physics_active
    assert machine.spring.target == 1.2


@pytest.mark.parametrize("clear_on_back, expected", [
    (True, None),
    (False, "Systems"),
])
def test_back_returns_to_overview(clear_on_back, expected) -> None:
    machine = make_machine(clear_on_back=clear_on_back)
    machine.select("Systems")

    machine.back()

    assert machine.state is ViewState.OVERVIEW
    assert machine.spring.target == 0.6
    assert machine.physics_active
    assert machine.active_theme_id == expected


def test_kept_selection_is_replaced_on_next_select() -> None:
    machine = make_machine(clear_on_back=False)
    machine.select("Systems")
    machine.back()

    machine.select("Terminology")

    assert machine.active_theme_id == "Terminology"


def test_select_while_in_detail_raises() -> None:
    machine = make_machine()
    machine.select("Systems")

    with pytest.raises(InvalidTransitionError) as excinfo:
        machine.select("Organization")

    assert excinfo.value.event == "select"
    assert excinfo.value.state is ViewState.DETAIL
    assert machine.active_theme_id == "Systems"


def test_back_while_in_overview_raises() -> None:
    machine = make_machine()

    with pytest.raises(InvalidTransitionError, match="back"):
        machine.back()

    assert machine.state is ViewState.OVERVIEW
    assert machine.spring.target == 0.6


def test_transition_does_not_reset_spring_velocity() -> None:
    machine = make_machine()
    machine.select("Systems")
    for _ in range(5):
        machine.spring.tick(1. / 60.)
    velocity = machine.spring.velocity

    machine.back()

    assert machine.spring.velocity == velocity


def test_render_overview_lists_spheres() -> None:
    machine = make_machine()
    catalog = ThemeCatalog.from_config(DEFAULTS.themes)

    view = render(machine, POSITIONS, 0.6, catalog, SPHERE_THEMES)

    assert view.mode is ViewState.OVERVIEW
    assert view.scale == 0.6
    assert view.active_theme is None
    assert [s.theme.id for s in view.spheres] == SPHERE_THEMES
    assert (view.spheres[1].x, view.spheres[1].y) == (180., 20.)


def test_render_detail_shows_selected_theme() -> None:
    machine = make_machine()
    catalog = ThemeCatalog.from_config(DEFAULTS.themes)
    machine.select("Terminology")

    view = render(machine, POSITIONS, 0.9, catalog, SPHERE_THEMES)

    assert view.mode is ViewState.DETAIL
    assert view.spheres == []
    assert view.active_theme.title == "Terminology"


def test_render_with_dangling_theme_raises() -> None:
    machine = make_machine()
    catalog = ThemeCatalog.from_config(DEFAULTS.themes)

    with pytest.raises(ConfigurationError):
        render(machine, POSITIONS, 0.6, catalog, ["Organization", "Systems", "Missing"])
