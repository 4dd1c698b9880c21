"""Keyboard input and command dispatch"""
import sys
from typing import NamedTuple, Optional

from .config import *
from .models import PowerSource

QUIT = "quit"
REFRESH = "refresh"
PANEL = "panel"
TOGGLE_VISIBILITY = "toggle_visibility"
APPLY = "apply"
INVALID = "invalid"


class Action(NamedTuple):
    kind: str
    index: Optional[int] = None


APPLY_TARGETS = {
    "1": (PowerSource.AC, PowerSource.DC),
    "2": (PowerSource.AC,),
    "3": (PowerSource.DC,),
}

COMMANDS = {
    "Q": Action(QUIT),
    "R": Action(REFRESH),
    "P": Action(PANEL),
    "V": Action(TOGGLE_VISIBILITY),
}


def dispatch(choice, catalog):
    """Map one line of menu input to the action the loop should take."""
    choice = (choice or "").strip().upper()
    if choice in COMMANDS:
        return COMMANDS[choice]
    if choice.isdecimal() and int(choice) in catalog:
        return Action(APPLY, int(choice))
    return Action(INVALID)


def apply_targets(choice):
    """Power sources for an apply sub-choice, None for cancel or junk."""
    return APPLY_TARGETS.get((choice or "").strip().upper())


def read_command(prompt="Choice: "):
    return input(prompt)


def wait_for_key(prompt="Press any key to continue..."):
    """Block until a single key is pressed."""
    import msvcrt

    sys.stdout.write(f"{C_DIM}{prompt}{C_RESET}")
    sys.stdout.flush()
    ch = msvcrt.getwch()
    # Extended keys arrive as two characters
    if ch in ('\x00', '\xe0'):
        msvcrt.getwch()
    sys.stdout.write("\n")
