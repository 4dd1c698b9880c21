import os
import subprocess
import sys

# ANSI Colors & Styling
C_RESET = "\033[0m"
C_RED = "\033[91m"
C_GREEN = "\033[92m"
C_YELLOW = "\033[93m"
C_CYAN = "\033[96m"
C_BOLD = "\033[1m"
C_DIM = "\033[2m"
C_BG_HEADER = "\033[48;5;238m"

# powercfg
POWERCFG = "powercfg"
SCHEME_CURRENT = "SCHEME_CURRENT"
SUB_PROCESSOR = "54533251-82be-4824-96c1-47b60b740d00"
PERFBOOSTMODE = "be337238-0d82-4146-a960-4f3749d470c7"
COMMAND_TIMEOUT = 10

# Only defined on Windows
CREATE_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0)

# powercfg writes in the console OEM code page
OUTPUT_ENCODING = "oem" if sys.platform == "win32" else None

POWER_PANEL_COMMAND = ["control.exe", "powercfg.cpl"]

# Seconds to leave the visibility toggle message on screen
VISIBILITY_PAUSE = 1.0

MODE_DESCRIPTIONS = {
    "Disabled": "No turbo boost - lowest temperatures and power draw",
    "Enabled": "Boost when the OS asks for it",
    "Aggressive": "Boost whenever possible - highest performance",
    "Efficient Enabled": "Boost only when it is energy efficient",
    "Efficient Aggressive": "Boost often, but prefer efficiency",
    "Aggressive At Guaranteed": "Always run at or above guaranteed frequency",
    "Efficient Aggressive At Guaranteed": "Efficient boost above guaranteed frequency",
}

# (product, service names), checked in this order
OEM_SERVICE_GROUPS = [
    ("Lenovo Vantage", ["LenovoVantageService", "ImControllerService", "LITSSVC"]),
    ("Dell Power Manager", ["DellClientManagementService", "Dell.CommandPowerManager.Service", "DDVDataCollector"]),
    ("HP Omen/System Software", ["HPSysInfoCap", "HPAppHelperCap", "HpTouchpointAnalyticsService"]),
    ("ASUS Armoury Crate", ["ArmouryCrateService", "ASUSOptimization", "AsusCertService"]),
    ("MSI Center", ["MSI_Center_Service", "MSI Central Service"]),
]

DEBUG = bool(os.environ.get("BOOSTMGR_DEBUG"))
