# core/hardware.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Protocol, Tuple

from .config import Settings
from .errors import HardwareReadFailure

logger = logging.getLogger(__name__)

CHIPID_SIZE = 16
SERIAL_SIZE = 16


class IdentitySource(Protocol):
    def read_chip_id(self) -> bytes: ...

    def read_serial(self) -> bytes: ...

    def read_model_string(self) -> str: ...


def _read_block(path: Path, offset: int, size: int, what: str) -> bytes:
    try:
        with open(path, "rb") as f:
            f.seek(offset)
            data = f.read(size)
    except OSError as e:
        raise HardwareReadFailure(f"cannot read {what} from {path}: {e.strerror or e}") from e
    if len(data) != size:
        raise HardwareReadFailure(
            f"short read of {what} from {path}: {len(data)} of {size} bytes at 0x{offset:x}"
        )
    return data


def device_tree_property(dt_root: Path, prop: str) -> bytes:
    path = Path(dt_root) / prop
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise HardwareReadFailure(f"cannot read {path}: {e.strerror or e}") from e


class SysfsIdentitySource:
    """
    Reads identity data on a running sunxi board:
      - chip ID and serial from the SID efuse nvmem device
      - model from the device tree root node
    Nothing is cached; every call goes back to the hardware.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def read_chip_id(self) -> bytes:
        s = self.settings
        return _read_block(s.nvmem_path, s.chipid_offset, CHIPID_SIZE, "chip id")

    def read_serial(self) -> bytes:
        s = self.settings
        return _read_block(s.nvmem_path, s.serial_offset, SERIAL_SIZE, "serial")

    def read_model_string(self) -> str:
        raw = device_tree_property(self.settings.dt_root, "model").rstrip(b"\x00")
        if not raw:
            raise HardwareReadFailure("device tree model is empty")
        if b"\x00" in raw:
            raise HardwareReadFailure("device tree model contains NUL bytes")
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise HardwareReadFailure(f"device tree model is not UTF-8: {e}") from e


def _node_enabled(node: Path) -> bool:
    """Nodes without a status property, or with "okay"/"ok", are enabled."""
    status = node / "status"
    if not status.exists():
        return True
    return status.read_bytes().rstrip(b"\x00") in (b"okay", b"ok")


def read_compatibles(dt_root: Path, errors: Optional[List[Tuple[Path, OSError]]] = None) -> List[str]:
    """
    Collect every `compatible` string of the enabled device tree nodes,
    root node first, then child nodes in sorted order. A disabled node hides
    its whole subtree.

    Unreadable properties are skipped; pass `errors` to get them back.
    """
    root = Path(dt_root)
    if not root.is_dir():
        raise HardwareReadFailure(f"device tree not found at {root}")
    found: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        node = Path(dirpath)
        try:
            enabled = _node_enabled(node)
        except OSError as e:
            enabled = False
            logger.warning("cannot read status of %s: %s", node, e)
            if errors is not None:
                errors.append((node, e))
        if not enabled:
            logger.debug("skipping disabled node %s", node)
            dirnames[:] = []
            continue
        if "compatible" not in filenames:
            continue
        path = node / "compatible"
        try:
            raw = path.read_bytes()
        except OSError as e:
            logger.warning("skipping unreadable node %s: %s", node, e)
            if errors is not None:
                errors.append((node, e))
            continue
        found.extend(s.decode("utf-8", "replace") for s in raw.split(b"\x00") if s)
    return found
