"""OS probes: power source, elevation and the Power Options panel"""
import ctypes
import logging
import subprocess

import psutil

from .config import POWER_PANEL_COMMAND
from .models import PowerSource

logger = logging.getLogger(__name__)


def get_battery():
    """psutil battery reading, or None when there is none or it fails."""
    try:
        return psutil.sensors_battery()
    except Exception as e:
        logger.debug("battery status unavailable: %s", e)
        return None


def power_source_of(battery):
    """DC only when a battery explicitly reports being unplugged."""
    if battery is not None and battery.power_plugged is False:
        return PowerSource.DC
    return PowerSource.AC


def detect_power_source(battery_reader=get_battery):
    return power_source_of(battery_reader())


def is_admin():
    try:
        return bool(ctypes.windll.shell32.IsUserAnAdmin())
    except (AttributeError, OSError):
        return False


def open_power_panel(launcher=subprocess.Popen):
    """Start the Power Options control panel without waiting on it."""
    try:
        launcher(POWER_PANEL_COMMAND)
        return True
    except OSError as e:
        logger.debug("could not open power panel: %s", e)
        return False
