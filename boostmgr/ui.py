"""UI rendering module"""
import sys

from .config import *
from .models import PowerSource
from .utils import clear_screen, get_terminal_width, paint


def format_mode(catalog, index):
    """'<index> - <name>' for a current value, 'Unknown' if there isn't one."""
    if index is None:
        return paint("Unknown", C_DIM)
    mode = catalog.get(index)
    name = mode.name if mode and mode.name else "Unknown"
    return f"{index} - {name}"


def status_lines(state, power):
    lines = []
    plan = power.plan_name or "Unknown"
    lines.append(f"{C_BOLD}Power plan:{C_RESET}  {plan}")
    if power.scheme_id:
        lines.append(f"{C_DIM}             {power.scheme_id}{C_RESET}")

    source = "Plugged in (AC)" if power.source is PowerSource.AC else "On battery (DC)"
    if power.battery_percent is not None:
        source += f"  {power.battery_percent:.0f}%"
    lines.append(f"{C_BOLD}Power source:{C_RESET} {source}")

    lines.append(f"{C_BOLD}AC mode:{C_RESET}     {format_mode(state.catalog, power.ac_index)}")
    lines.append(f"{C_BOLD}DC mode:{C_RESET}     {format_mode(state.catalog, power.dc_index)}")

    visibility = paint("Hidden", C_YELLOW) if state.hidden else paint("Visible", C_GREEN)
    lines.append(f"{C_BOLD}In Power Options:{C_RESET} {visibility}")

    for warning in state.warnings:
        lines.append(paint(f"WARNING: {warning}", C_YELLOW))
    return lines


def menu_lines(state, power):
    lines = []
    active = power.active_index
    for index in sorted(state.catalog):
        mode = state.catalog[index]
        marker = paint(" [Active]", C_GREEN) if index == active else ""
        lines.append(f"  {C_CYAN}{index}{C_RESET}) {mode.name or 'Unknown'}{marker}")
        lines.append(f"     {C_DIM}{mode.description}{C_RESET}")
    lines.append("")
    hide_label = "Show in" if state.hidden else "Hide from"
    lines.append(f"  {C_CYAN}R{C_RESET}) Refresh   {C_CYAN}P{C_RESET}) Open Power Options   "
                 f"{C_CYAN}V{C_RESET}) {hide_label} Power Options   {C_CYAN}Q{C_RESET}) Quit")
    return lines


def render(state, power, out=None):
    """Draw the whole screen for one pass of the menu loop."""
    out = out or sys.stdout
    cols = get_terminal_width()
    title = " Processor Boost Mode Manager "
    lines = [f"{C_BG_HEADER}{C_BOLD}{title}{' ' * max(0, cols - len(title))}{C_RESET}", ""]
    lines.extend(status_lines(state, power))
    lines.append(f"{C_DIM}{'─' * cols}{C_RESET}")
    lines.extend(menu_lines(state, power))
    lines.append(f"{C_DIM}{'─' * cols}{C_RESET}")
    lines.append(f"{C_BOLD}Status:{C_RESET} {state.status_message}")

    clear_screen(out)
    out.write("\n".join(lines) + "\n")
    out.flush()
