import subprocess

import pytest

from boostmgr.powercfg import PowerCfg

SCHEME_OUTPUT = "Power Scheme GUID: 381b4222-f694-41f0-9685-ff5bb260df2e  (Balanced)\n"

QUERY_OUTPUT = """\
Power Scheme GUID: 381b4222-f694-41f0-9685-ff5bb260df2e  (Balanced)
  GUID Alias: SCHEME_BALANCED
  Subgroup GUID: 54533251-82be-4824-96c1-47b60b740d00  (Processor power management)
    GUID Alias: SUB_PROCESSOR
    Power Setting GUID: be337238-0d82-4146-a960-4f3749d470c7  (Processor performance boost mode)
      GUID Alias: PERFBOOSTMODE
      Possible Setting Index: 000
      Possible Setting Friendly Name: Disabled
      Possible Setting Index: 001
      Possible Setting Friendly Name: Enabled
      Possible Setting Index: 002
      Possible Setting Friendly Name: Aggressive
      Possible Setting Index: 003
      Possible Setting Friendly Name: Efficient Enabled
      Possible Setting Index: 004
      Possible Setting Friendly Name: Efficient Aggressive
    Current AC Power Setting Index: 0x00000002
    Current DC Power Setting Index: 0x00000001
"""

EMPTY_QUERY_OUTPUT = """\
Power Scheme GUID: 381b4222-f694-41f0-9685-ff5bb260df2e  (Balanced)
  GUID Alias: SCHEME_BALANCED
"""


class FakeRunner:
    """Stands in for subprocess.run; records every command line."""

    def __init__(self, outputs=None, fail=()):
        self.outputs = {"/getactivescheme": SCHEME_OUTPUT, "/query": QUERY_OUTPUT}
        self.outputs.update(outputs or {})
        self.fail = set(fail)
        self.calls = []

    def __call__(self, args):
        self.calls.append(list(args))
        verb = args[1]
        if verb in self.fail:
            return subprocess.CompletedProcess(args, 1, stdout="", stderr="error")
        return subprocess.CompletedProcess(args, 0, stdout=self.outputs.get(verb, ""), stderr="")

    def verbs(self):
        return [call[1] for call in self.calls]


class FakeBattery:
    def __init__(self, percent=80.0, power_plugged=True):
        self.percent = percent
        self.power_plugged = power_plugged


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def gateway(runner):
    return PowerCfg(runner=runner)
