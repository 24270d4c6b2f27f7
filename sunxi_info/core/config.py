# core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_DT_ROOT = Path("/proc/device-tree")
DEFAULT_NVMEM = Path("/sys/bus/nvmem/devices/sunxi-sid0/nvmem")

# Offsets into the SID nvmem cell. Chip ID is the first efuse key word block.
DEFAULT_CHIPID_OFFSET = 0x00
DEFAULT_SERIAL_OFFSET = 0x10

DEFAULT_LOG_LEVEL = "WARNING"


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


@dataclass(frozen=True)
class Settings:
    dt_root: Path = DEFAULT_DT_ROOT
    nvmem_path: Path = DEFAULT_NVMEM
    chipid_offset: int = DEFAULT_CHIPID_OFFSET
    serial_offset: int = DEFAULT_SERIAL_OFFSET
    compatible: Optional[str] = None
    server_base_url: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from SUNXI_INFO_* variables (os.environ by default).
        """
        if env is None:
            env = os.environ
        return cls(
            dt_root=Path(env.get("SUNXI_INFO_DT_ROOT") or DEFAULT_DT_ROOT),
            nvmem_path=Path(env.get("SUNXI_INFO_NVMEM") or DEFAULT_NVMEM),
            chipid_offset=_int_env(env, "SUNXI_INFO_CHIPID_OFFSET", DEFAULT_CHIPID_OFFSET),
            serial_offset=_int_env(env, "SUNXI_INFO_SERIAL_OFFSET", DEFAULT_SERIAL_OFFSET),
            compatible=env.get("SUNXI_INFO_COMPATIBLE") or None,
            server_base_url=env.get("SUNXI_INFO_SERVER") or None,
            log_level=(env.get("SUNXI_INFO_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )
