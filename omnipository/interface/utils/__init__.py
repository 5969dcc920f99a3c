from .smart_font import SmartFont
from .help_enum import HelpEnum
