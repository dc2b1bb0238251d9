from .engine import CommandEngine
from .errors import AsmBotError

__version__ = "0.1.0"
