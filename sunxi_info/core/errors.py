# core/errors.py
from __future__ import annotations


class SysInfoError(Exception):
    """Base class for everything raised by sunxi_info."""


class EncodingError(SysInfoError, ValueError):
    pass


class ProfileNotFound(SysInfoError, LookupError):
    """No platform profile matches the board; the read surface must not start."""


class HardwareReadFailure(SysInfoError, OSError):
    pass


class FingerprintUnavailable(SysInfoError):
    """
    Raised when no fingerprint could be produced.
    Callers that don't care about the cause catch this one.
    """


class DigestEngineUnavailable(FingerprintUnavailable):
    pass


class AllocationFailure(FingerprintUnavailable):
    pass


class DigestComputationFailed(FingerprintUnavailable):
    pass


class AttributeNotFound(SysInfoError, KeyError):
    def __str__(self):
        return Exception.__str__(self)


class AttributeReadOnly(SysInfoError, PermissionError):
    pass
