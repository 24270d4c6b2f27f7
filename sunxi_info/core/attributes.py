# core/attributes.py
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Optional

from . import fingerprint
from .errors import AttributeNotFound, AttributeReadOnly
from .hardware import CHIPID_SIZE, SERIAL_SIZE, IdentitySource
from .hexcodec import hex_encode
from .profiles import PlatformProfile, match_platform_profile, resolve_platform_profile

logger = logging.getLogger(__name__)

# Name of every exposed attribute, in the order they are listed.
ATTRIBUTES = ("sys_info", "sunxi_chipid", "sunxi_serial", "nc_serial")


def format_value(value: str) -> str:
    return f"{value}\n"


def format_info(platform: str, chipid_hex: str, serial_hex: str) -> str:
    return (
        f"sunxi_platform    : {platform}\n"
        f"sunxi_chipid      : {chipid_hex}\n"
        f"sunxi_serial      : {serial_hex}\n"
    )


class SysInfo:
    """
    Read-only identity attributes of one board.

    The platform profile is bound once, in `activate`, and never changes.
    Hardware is re-read on every call.
    """

    __slots__ = ("_profile", "_source")

    def __init__(self, profile: PlatformProfile, source: IdentitySource):
        self._profile = profile
        self._source = source

    @classmethod
    def activate(
        cls,
        source: IdentitySource,
        compatibles: Iterable[str] = (),
        key: Optional[str] = None,
    ) -> "SysInfo":
        """
        Resolve the platform profile, then hand out the attribute surface.
        ProfileNotFound propagates so nothing becomes readable.
        """
        if key is not None:
            profile = resolve_platform_profile(key)
        else:
            profile = match_platform_profile(compatibles)
        logger.info("sunxi info active for platform %s", profile.name)
        return cls(profile, source)

    @property
    def profile(self) -> PlatformProfile:
        return self._profile

    # --- values ---
    def platform_name(self) -> str:
        return self._profile.name

    def chipid_hex(self) -> str:
        return hex_encode(self._source.read_chip_id(), CHIPID_SIZE)

    def serial_hex(self) -> str:
        return hex_encode(self._source.read_serial(), SERIAL_SIZE)

    def fingerprint_hex(self) -> str:
        model = self._source.read_model_string()
        chip_id = self._source.read_chip_id()
        return fingerprint.derive(model, self._profile.name, chip_id)

    # --- attribute text ---
    def sys_info(self) -> str:
        return format_info(self.platform_name(), self.chipid_hex(), self.serial_hex())

    def sunxi_chipid(self) -> str:
        return format_value(self.chipid_hex())

    def sunxi_serial(self) -> str:
        return format_value(self.serial_hex())

    def nc_serial(self) -> str:
        return format_value(self.fingerprint_hex())

    def _readers(self) -> Dict[str, Callable[[], str]]:
        return {
            "sys_info": self.sys_info,
            "sunxi_chipid": self.sunxi_chipid,
            "sunxi_serial": self.sunxi_serial,
            "nc_serial": self.nc_serial,
        }

    def read_attribute(self, name: str) -> str:
        reader = self._readers().get(name)
        if reader is None:
            raise AttributeNotFound(f"no attribute {name!r}")
        return reader()

    def write_attribute(self, name: str, value: str) -> None:
        if name not in ATTRIBUTES:
            raise AttributeNotFound(f"no attribute {name!r}")
        raise AttributeReadOnly(f"{name} is read-only")

    def snapshot(self) -> Dict[str, str]:
        return {
            "platform": self.platform_name(),
            "chipid": self.chipid_hex(),
            "serial": self.serial_hex(),
            "fingerprint": self.fingerprint_hex(),
        }
