"""Parsers for powercfg text output.

``powercfg /query <scheme> <subgroup> <setting>`` prints a listing such as::

    Power Setting GUID: be337238-0d82-4146-a960-4f3749d470c7  (Processor performance boost mode)
      GUID Alias: PERFBOOSTMODE
      Possible Setting Index: 000
      Possible Setting Friendly Name: Disabled
      Possible Setting Index: 001
      Possible Setting Friendly Name: Enabled
    Current AC Power Setting Index: 0x00000002
    Current DC Power Setting Index: 0x00000001

Recognized line patterns (leading whitespace ignored):

- ``Possible Setting Index: <decimal>``
- ``Possible Setting Friendly Name: <text>``
- ``Current AC Power Setting Index: 0x<hex>``
- ``Current DC Power Setting Index: 0x<hex>``

Everything else is ignored. An index line is paired with the next
friendly-name line, however many unrelated lines sit between them.

``powercfg /getactivescheme`` prints::

    Power Scheme GUID: 381b4222-f694-41f0-9685-ff5bb260df2e  (Balanced)
"""
import re

from .config import MODE_DESCRIPTIONS
from .models import BoostMode, PowerSource

INDEX_RE = re.compile(r"Possible Setting Index:\s*(\d+)")
NAME_RE = re.compile(r"Possible Setting Friendly Name:\s*(.*)")
CURRENT_RE = {
    PowerSource.AC: re.compile(r"Current AC Power Setting Index:\s*0x([0-9a-fA-F]+)"),
    PowerSource.DC: re.compile(r"Current DC Power Setting Index:\s*0x([0-9a-fA-F]+)"),
}
GUID_RE = re.compile(r":\s*([0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12})")
SCHEME_NAME_RE = re.compile(r"\(([^)]*)\)\s*$")


def _lines(raw):
    if isinstance(raw, str):
        return raw.splitlines()
    return list(raw)


def describe(index, name):
    """Description for a friendly name, falling back to 'Mode N'."""
    return MODE_DESCRIPTIONS.get(name, f"Mode {index}")


def parse_modes(raw):
    """Build the index -> BoostMode catalog from query output."""
    catalog = {}
    pending = None
    for line in _lines(raw):
        match = INDEX_RE.search(line)
        if match:
            pending = int(match.group(1))
            continue
        match = NAME_RE.search(line)
        if match and pending is not None:
            name = match.group(1).strip()
            catalog[pending] = BoostMode(pending, name, describe(pending, name))
            pending = None
    return catalog


def parse_current_index(raw, source):
    """Current value for AC or DC, or None when the line is missing."""
    pattern = CURRENT_RE[source]
    for line in _lines(raw):
        match = pattern.search(line)
        if match:
            return int(match.group(1), 16)
    return None


def parse_scheme_id(raw):
    """First GUID after a colon, or None."""
    for line in _lines(raw):
        match = GUID_RE.search(line)
        if match:
            return match.group(1).lower()
    return None


def parse_scheme_name(raw):
    """Friendly plan name in trailing parentheses, or None."""
    for line in _lines(raw):
        if GUID_RE.search(line):
            match = SCHEME_NAME_RE.search(line.strip())
            if match:
                return match.group(1).strip() or None
    return None
