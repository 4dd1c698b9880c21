"""Detection of OEM software that also manages boost mode"""
import logging

import psutil

from .config import OEM_SERVICE_GROUPS

logger = logging.getLogger(__name__)


def get_service_status(name):
    """Windows service status string, or None if it isn't installed."""
    try:
        return psutil.win_service_get(name).status()
    except psutil.NoSuchProcess:
        return None
    except (psutil.AccessDenied, OSError) as e:
        logger.debug("service %s lookup failed: %s", name, e)
        return None


def detect(status_lookup=get_service_status, groups=OEM_SERVICE_GROUPS):
    """One warning per vendor with at least one running service."""
    warnings = []
    for product, services in groups:
        if any(status_lookup(service) == "running" for service in services):
            warnings.append(f"{product} is running and may override boost settings")
    return warnings
