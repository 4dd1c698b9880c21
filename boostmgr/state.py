"""Session state container"""


DEFAULT_STATUS = "Pick a mode number, or a command below."


class SessionState:
    def __init__(self, catalog=None, warnings=None):
        self.running = True
        self.status_message = DEFAULT_STATUS

        # index -> BoostMode, replaced wholesale on refresh
        self.catalog = dict(catalog or {})

        # What this session last asked powercfg for, not what the OS reports
        self.hidden = False

        # OEM agents found at startup
        self.warnings = list(warnings or [])

    def replace_catalog(self, catalog):
        """Swap in a freshly parsed catalog; empty results keep the old one."""
        if catalog:
            self.catalog = dict(catalog)
            return True
        return False

    def toggle_hidden(self):
        self.hidden = not self.hidden
        return self.hidden
