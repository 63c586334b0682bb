# -*- coding: utf-8 -*-
"""
Safe input
Wraps input() so EOFError and KeyboardInterrupt never surface as tracebacks.
"""

from typing import Optional


def safe_input(prompt: str = "", default: Optional[str] = "") -> Optional[str]:
    """input() wrapper that survives closed pipes and Ctrl+C.

    Args:
        prompt: prompt text
        default: value returned on EOFError (None lets callers stop looping)

    Returns:
        the line typed by the user, or ``default`` on EOF

    Raises:
        SystemExit: on Ctrl+C, for a clean exit
    """
    try:
        return input(prompt)
    except EOFError:
        # closed pipe or headless run
        return default
    except KeyboardInterrupt:
        print()
        raise SystemExit(0)
