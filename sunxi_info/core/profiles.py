# core/profiles.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from .errors import ProfileNotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlatformProfile:
    name: str


# compatible string of the sys-info device node -> profile
PROFILES: Mapping[str, PlatformProfile] = MappingProxyType({
    "allwinner,sun8i-t113s-sys-info": PlatformProfile(name="sun8i-t113s"),
    "allwinner,sun50i-h6-sys-info": PlatformProfile(name="sun50i-h6"),
    "allwinner,sun50i-h616-sys-info": PlatformProfile(name="sun50i-h616"),
})


def resolve_platform_profile(key: str) -> PlatformProfile:
    try:
        return PROFILES[key]
    except KeyError:
        raise ProfileNotFound(f"no platform profile for {key!r}") from None


def match_platform_profile(compatibles: Iterable[str]) -> PlatformProfile:
    """
    Return the profile of the first compatible string the registry knows,
    keeping the order the device tree lists them in.
    """
    seen = []
    for key in compatibles:
        profile = PROFILES.get(key)
        if profile is not None:
            logger.debug("matched %s -> %s", key, profile.name)
            return profile
        seen.append(key)
    raise ProfileNotFound(
        "failed to determine the platform profile to use "
        f"({len(seen)} compatible strings checked)"
    )
