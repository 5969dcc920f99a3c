from .default_configs import DEFAULTS
from .ui_stylings import Colors, FontSizes, INTERFACE_HELP
