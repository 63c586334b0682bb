# -*- coding: utf-8 -*-
"""
UI package
Terminal rendering and prompting around the gwynt engine.
"""

from .input_safety import safe_input
from .rich_ui import RichTerminalUI

__all__ = ['RichTerminalUI', 'safe_input']
