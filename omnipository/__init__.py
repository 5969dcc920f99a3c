from .errors import OmnipositoryError, ConfigurationError, InvalidTransitionError
from .core import (Body, PositionIntegrator, ZoomSpringController, Palette, ThemeDefinition,
                   ThemeCatalog, ViewState, ViewStateMachine, render, Omnipository)
