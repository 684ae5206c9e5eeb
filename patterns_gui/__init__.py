"""
Patterns GUI Package
Architecture : App -> KeyMap -> InputHandler (engine)
"""

from .app import PatternsApp
from .keymap import KeyMap
