"""Interactive session: startup checks and the menu loop"""
import logging
import sys
import time

from .config import *
from .models import PowerSource, PowerSourceState
from .powercfg import PowerCfg, QueryError
from .state import DEFAULT_STATUS, SessionState
from .input import (
    APPLY, INVALID, PANEL, QUIT, REFRESH, TOGGLE_VISIBILITY,
    apply_targets, dispatch, read_command, wait_for_key,
)
from . import conflicts, hardware, parser, ui, utils

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = (
    "Processor boost mode is not available on this machine.\n"
    "Possible reasons:\n"
    "  - the CPU does not support turbo/boost control\n"
    "  - boost control is locked in the BIOS/UEFI\n"
    "  - a group policy or OEM tool restricts power settings"
)
ADMIN_MESSAGE = "Administrator rights are required. Right-click and choose 'Run as administrator'."
PLATFORM_MESSAGE = "This tool manages Windows power plans and only runs on Windows."


class UnsupportedError(Exception):
    """No boost modes could be read from powercfg."""


def load_catalog(gateway):
    """Query and parse the mode catalog; failures give an empty one."""
    try:
        raw = gateway.query_attribute(gateway.get_active_scheme_id())
    except QueryError as e:
        logger.debug("catalog query failed: %s", e)
        return {}
    return parser.parse_modes(raw)


def read_power_state(gateway, battery_reader=hardware.get_battery):
    """Current plan and AC/DC values; anything unreadable stays None."""
    power = PowerSourceState()
    raw = []
    try:
        power.scheme_id, power.plan_name = gateway.get_active_scheme()
        raw = gateway.query_attribute(power.scheme_id)
    except QueryError as e:
        logger.debug("current values unavailable: %s", e)
    power.ac_index = parser.parse_current_index(raw, PowerSource.AC)
    power.dc_index = parser.parse_current_index(raw, PowerSource.DC)

    battery = battery_reader()
    power.source = hardware.power_source_of(battery)
    if battery is not None:
        power.battery_percent = battery.percent
    return power


def startup(gateway, service_lookup=conflicts.get_service_status):
    """Build the session state, raising UnsupportedError with no modes."""
    gateway.set_visibility(False)
    catalog = load_catalog(gateway)
    if not catalog:
        raise UnsupportedError(UNSUPPORTED_MESSAGE)
    return SessionState(catalog, conflicts.detect(service_lookup))


class Session:
    """Read-render-act loop over one SessionState."""

    def __init__(self, state, gateway, read=read_command, pause=wait_for_key,
                 battery_reader=hardware.get_battery, launcher=hardware.open_power_panel,
                 out=None):
        self.state = state
        self.gateway = gateway
        self.read = read
        self.pause = pause
        self.battery_reader = battery_reader
        self.launcher = launcher
        self.out = out or sys.stdout

    def say(self, text=""):
        self.out.write(text + "\n")
        self.out.flush()

    def run(self):
        """Loop until the user quits; returns the exit code."""
        while self.state.running:
            self.step()
        return 0

    def step(self):
        """One pass: show values, render, read a command and act on it."""
        # Values can only be read while the setting is visible
        self.gateway.set_visibility(False)
        power = read_power_state(self.gateway, self.battery_reader)
        ui.render(self.state, power, self.out)
        if self.state.hidden:
            self.gateway.set_visibility(True)

        action = dispatch(self.read("Choice: "), self.state.catalog)
        self.state.status_message = DEFAULT_STATUS

        if action.kind == QUIT:
            self.state.running = False
        elif action.kind == REFRESH:
            self.refresh()
        elif action.kind == PANEL:
            if not self.launcher():
                self.state.status_message = "Could not open Power Options."
        elif action.kind == TOGGLE_VISIBILITY:
            self.toggle_visibility()
        elif action.kind == APPLY:
            self.apply_mode(action.index)
        elif action.kind == INVALID:
            self.say(utils.paint("Invalid choice.", C_RED))
            self.pause()
        return action

    def refresh(self):
        catalog = load_catalog(self.gateway)
        if self.state.replace_catalog(catalog):
            self.state.status_message = f"Refreshed, {len(catalog)} modes available."
        else:
            self.state.status_message = "Refreshed; mode list could not be re-read, keeping the old one."

    def toggle_visibility(self):
        hidden = self.state.toggle_hidden()
        self.gateway.set_visibility(hidden)
        if hidden:
            text = "Boost mode is now hidden from Power Options."
        else:
            text = "Boost mode is now shown in Power Options."
        self.state.status_message = text
        self.say(utils.paint(text, C_GREEN))
        time.sleep(VISIBILITY_PAUSE)

    def apply_mode(self, index):
        mode = self.state.catalog[index]
        self.say()
        self.say(f"Selected: {C_BOLD}{index} - {mode.name or 'Unknown'}{C_RESET}")
        self.say("Apply to:  1) Plugged in and battery   2) Plugged in (AC) only   "
                 "3) Battery (DC) only   C) Cancel")
        targets = apply_targets(self.read("Target: "))
        if targets is None:
            self.state.status_message = "Cancelled, nothing changed."
            return

        failed = []
        for source in targets:
            if self.gateway.set_value(source, index):
                self.say(utils.paint(f"{source.value}: set to {mode.name or index}", C_GREEN))
            else:
                failed.append(source.value)
                self.say(utils.paint(f"{source.value}: Failed to apply settings", C_RED))

        if failed:
            self.state.status_message = f"Failed to apply settings for {'/'.join(failed)}."
        else:
            self.state.status_message = f"Applied {mode.name or index}."
        self.pause()


def main(gateway=None, platform=sys.platform, admin_check=hardware.is_admin,
         service_lookup=conflicts.get_service_status, **session_kwargs):
    """Program entry; returns the process exit code."""
    level = logging.DEBUG if DEBUG else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if platform != "win32":
        print(PLATFORM_MESSAGE)
        return 1
    if not admin_check():
        print(ADMIN_MESSAGE)
        return 1

    utils.enable_ansi()
    gateway = gateway or PowerCfg()
    try:
        state = startup(gateway, service_lookup)
    except UnsupportedError as e:
        print(f"{C_RED}{e}{C_RESET}")
        return 1

    code = 0
    try:
        code = Session(state, gateway, **session_kwargs).run()
    except (KeyboardInterrupt, EOFError):
        pass
    finally:
        sys.stdout.write(C_RESET)
        print("\nExiting Boost Mode Manager.")
    return code
