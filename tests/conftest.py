from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest

from sunxi_info.core.attributes import SysInfo
from sunxi_info.core.errors import HardwareReadFailure
from sunxi_info.core.profiles import PlatformProfile

CHIP_ID = bytes(range(16))
SERIAL = bytes(range(0x10, 0x20))
MODEL = "test,board"

# sha256("test,board" + "sun50i-h6" + "000102030405060708090a0b0c0d0e0f")
REFERENCE_FINGERPRINT = "cbd8224e7988fcf3248efedc936c22317d7cc0d9b90c8b35b61ff70fa38cd0bc"


class FakeIdentitySource:
    def __init__(self, chip_id: Optional[bytes] = CHIP_ID, serial: Optional[bytes] = SERIAL,
                 model: Optional[str] = MODEL):
        self.chip_id = chip_id
        self.serial = serial
        self.model = model
        self.calls = []

    def _get(self, what, value):
        self.calls.append(what)
        if value is None:
            raise HardwareReadFailure(f"{what} not readable")
        return value

    def read_chip_id(self) -> bytes:
        return self._get("chip_id", self.chip_id)

    def read_serial(self) -> bytes:
        return self._get("serial", self.serial)

    def read_model_string(self) -> str:
        return self._get("model", self.model)


@pytest.fixture
def source():
    return FakeIdentitySource()


@pytest.fixture
def sysinfo(source):
    return SysInfo(PlatformProfile(name="sun50i-h6"), source)


@pytest.fixture
def device_tree(tmp_path) -> Path:
    """A tiny /proc/device-tree look-alike with a sys-info node."""
    root = tmp_path / "device-tree"
    root.mkdir()
    (root / "model").write_bytes(b"test,board\x00")
    (root / "compatible").write_bytes(b"test,board\x00allwinner,sun50i-h6\x00")
    node = root / "soc" / "sys-info"
    node.mkdir(parents=True)
    (node / "compatible").write_bytes(b"allwinner,sun50i-h6-sys-info\x00")
    (root / "soc" / "compatible").write_bytes(b"simple-bus\x00")
    return root


@pytest.fixture
def nvmem(tmp_path) -> Path:
    path = tmp_path / "nvmem"
    path.write_bytes(CHIP_ID + SERIAL + bytes(32))
    return path
