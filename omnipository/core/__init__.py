from .bodies import Body, PositionIntegrator
from .spring import ZoomSpringController
from .themes import Palette, ThemeDefinition, ThemeCatalog
from .view_state import ViewState, ViewStateMachine, render
from .shell import Omnipository, merge_config
