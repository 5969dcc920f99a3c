"""
    Exceptions raised by the omnipository core. Nothing in the core catches them,
    they are meant to reach whoever drives the shell.
"""


class OmnipositoryError(Exception):
    """Base class for every error raised by omnipository."""


class ConfigurationError(OmnipositoryError, LookupError):
    """
    Raised when the static configuration is inconsistent, e.g. a sphere
    references a theme id that the catalog does not know about.
    """


class InvalidTransitionError(OmnipositoryError, RuntimeError):
    """
    Raised when a view event arrives while the state machine is not in
    the state that permits it.

    Attributes:
        event (str): name of the attempted event ('select' or 'back')
        state (ViewState): state the machine was in when the event arrived
    """

    def __init__(self, event, state):
        self.event = event
        self.state = state
        super().__init__(f"Cannot '{event}' while in state {state.name}.")
