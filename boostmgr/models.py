"""Data model shared by the parser, gateway and session."""
import enum
from dataclasses import dataclass
from typing import Optional


class PowerSource(enum.Enum):
    AC = "AC"
    DC = "DC"


@dataclass(frozen=True)
class BoostMode:
    index: int
    name: str
    description: str


@dataclass
class PowerSourceState:
    """Snapshot read before every render; never cached between passes."""
    plan_name: Optional[str] = None
    scheme_id: Optional[str] = None
    ac_index: Optional[int] = None
    dc_index: Optional[int] = None
    source: PowerSource = PowerSource.AC
    battery_percent: Optional[float] = None

    @property
    def active_index(self):
        """Index in effect for the live power source."""
        if self.source is PowerSource.DC:
            return self.dc_index
        return self.ac_index
