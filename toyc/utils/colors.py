#!/usr/bin/env python3
import os


class Colors:
    """ANSI color codes for terminal output"""
    MINIMAL = os.environ.get('TOYC_MINIMAL_UI', '').strip().lower() in ('1', 'true', 'yes', 'on')

    RED = '\033[91m'      # Errors
    BLUE = '\033[94m'     # Info messages
    YELLOW = '\033[93m'   # Warnings
    CYAN = '\033[96m'     # Notes
    RESET = '\033[0m'


def set_minimal(enabled: bool = True):
    """Switch every printer in toyc.utils.term to compact, uncolored output"""
    Colors.MINIMAL = enabled
