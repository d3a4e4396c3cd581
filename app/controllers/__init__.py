"""
Controller package exports.

Provides a stable import surface for the navigation adapter and the window
controller that composes it.
"""

from .input_adapter import Affordances, InputAdapter  # noqa: F401
from .main_window_controller import MainWindowController  # noqa: F401

__all__ = [
    "Affordances",
    "InputAdapter",
    "MainWindowController",
]
