"""Wrapper around the powercfg command line tool"""
import logging
import subprocess

from .config import *
from .models import PowerSource
from . import parser

logger = logging.getLogger(__name__)


class QueryError(Exception):
    """powercfg could not be run or gave output we can't use."""


def run_command(args):
    """Run a command hidden, capturing text output."""
    return subprocess.run(
        args,
        capture_output=True, text=True, encoding=OUTPUT_ENCODING, errors="replace",
        timeout=COMMAND_TIMEOUT,
        creationflags=CREATE_NO_WINDOW
    )


class PowerCfg:
    """Every call into powercfg goes through here.

    Queries raise QueryError, set operations return a bool and visibility
    changes never report anything. ``runner`` takes an argument list and
    returns a ``subprocess.CompletedProcess``.
    """

    def __init__(self, runner=None, executable=POWERCFG):
        self._runner = runner or run_command
        self.executable = executable

    def _run(self, *args):
        cmd = [self.executable, *args]
        try:
            result = self._runner(cmd)
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("%s failed to run: %s", " ".join(cmd), e)
            raise QueryError(f"could not run {self.executable}: {e}") from e
        if result.returncode != 0:
            logger.debug("%s exited with %s: %s", " ".join(cmd), result.returncode, (result.stderr or "").strip())
            raise QueryError(f"{self.executable} exited with code {result.returncode}")
        return result.stdout or ""

    def get_active_scheme(self):
        """Return (scheme GUID, plan name); the name may be None."""
        output = self._run("/getactivescheme")
        scheme_id = parser.parse_scheme_id(output)
        if scheme_id is None:
            raise QueryError("no scheme GUID in getactivescheme output")
        return scheme_id, parser.parse_scheme_name(output)

    def get_active_scheme_id(self):
        return self.get_active_scheme()[0]

    def query_attribute(self, scheme, subgroup=SUB_PROCESSOR, setting=PERFBOOSTMODE):
        """Raw output lines of /query for one setting."""
        return self._run("/query", scheme, subgroup, setting).splitlines()

    def set_value(self, source, value):
        """Write the AC or DC index on the active scheme and re-apply it."""
        flag = "/setacvalueindex" if source is PowerSource.AC else "/setdcvalueindex"
        try:
            self._run(flag, SCHEME_CURRENT, SUB_PROCESSOR, PERFBOOSTMODE, str(int(value)))
            # Some builds only pick up the change once the scheme is selected again
            self._run("/setactive", SCHEME_CURRENT)
        except QueryError:
            return False
        return True

    def set_visibility(self, hidden):
        """Hide or show boost mode in the Power Options UI. Best effort."""
        flag = "+ATTRIB_HIDE" if hidden else "-ATTRIB_HIDE"
        try:
            self._run("/attributes", SUB_PROCESSOR, PERFBOOSTMODE, flag)
        except QueryError as e:
            logger.debug("visibility change ignored: %s", e)
