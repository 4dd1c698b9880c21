"""Terminal helpers"""
import os
import shutil
import sys

from .config import *


def get_terminal_width():
    """Terminal width in columns, 80 when unknown."""
    return shutil.get_terminal_size((80, 25)).columns


def enable_ansi():
    """Turn on VT escape processing in the Windows console."""
    os.system("")


def clear_screen(out=None):
    out = out or sys.stdout
    out.write("\033[2J\033[H")


def paint(text, color):
    return f"{color}{text}{C_RESET}"
