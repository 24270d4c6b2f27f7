# core/server_api.py
from __future__ import annotations

import logging
from typing import Tuple

import requests

from .attributes import SysInfo

logger = logging.getLogger(__name__)


def _url(base: str, path: str) -> str:
    return base.rstrip("/") + path


def report_identity(server_base: str, info: SysInfo, timeout: float = 25) -> Tuple[bool, str]:
    """
    Tell the provisioning server which unit this is.
    Only the platform and fingerprint are sent, never the raw chip ID or serial.
    Hardware and digest errors propagate; network trouble comes back as (False, msg).
    """
    payload = {"platform": info.platform_name(), "fingerprint": info.fingerprint_hex()}
    try:
        r = requests.post(_url(server_base, "/api/devices/identify"), json=payload, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("identity report to %s failed: %s", server_base, e)
        return False, str(e)

    try:
        data = r.json()
    except ValueError:
        return False, f"HTTP {r.status_code}"
    if not isinstance(data, dict):
        data = {}
    if r.status_code == 200 and data.get("status") == "ok":
        return True, data.get("message", "ok")
    return False, data.get("message", f"HTTP {r.status_code}")
