import io

from boostmgr import ui
from boostmgr.models import BoostMode, PowerSource, PowerSourceState
from boostmgr.state import SessionState

CATALOG = {0: BoostMode(0, "Disabled", "off"), 1: BoostMode(1, "", "Mode 1")}


def test_format_mode():
    assert ui.format_mode(CATALOG, 0) == "0 - Disabled"
    assert ui.format_mode(CATALOG, 1) == "1 - Unknown"
    assert ui.format_mode(CATALOG, 9) == "9 - Unknown"
    assert "Unknown" in ui.format_mode(CATALOG, None)


def test_battery_mode_uses_dc_value():
    state = SessionState(CATALOG)
    power = PowerSourceState(ac_index=0, dc_index=1, source=PowerSource.DC, battery_percent=42.0)
    out = io.StringIO()

    ui.render(state, power, out)

    screen = out.getvalue()
    assert "On battery (DC)  42%" in screen
    menu = "\n".join(ui.menu_lines(state, power))
    assert "Disabled\033[92m [Active]" not in menu
    assert "[Active]" in menu


def test_hidden_state_changes_labels():
    state = SessionState(CATALOG, ["Dell Power Manager is running and may override boost settings"])
    state.hidden = True
    power = PowerSourceState()

    status = "\n".join(ui.status_lines(state, power))
    menu = "\n".join(ui.menu_lines(state, power))

    assert "Hidden" in status
    assert "WARNING: Dell Power Manager" in status
    assert "Show in Power Options" in menu


def test_render_starts_by_clearing_screen():
    out = io.StringIO()

    ui.render(SessionState(CATALOG), PowerSourceState(), out)

    assert out.getvalue().startswith("\033[2J\033[H")
