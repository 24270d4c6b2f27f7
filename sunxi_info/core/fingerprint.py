# core/fingerprint.py
from __future__ import annotations

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from .errors import AllocationFailure, DigestComputationFailed, DigestEngineUnavailable
from .hardware import CHIPID_SIZE
from .hexcodec import hex_encode

DIGEST_SIZE = 32  # SHA-256


def canonical_message(model: str, platform_name: str, chip_id: bytes) -> bytes:
    """
    model || platform_name || hex(chip_id), no separators.

    The order and the missing separators are what already issued
    fingerprints were computed from; changing either changes every device.
    """
    try:
        return (model + platform_name + hex_encode(chip_id, CHIPID_SIZE)).encode("utf-8")
    except MemoryError as e:
        raise AllocationFailure("cannot build fingerprint input") from e


def _sha256(message: bytes) -> bytes:
    try:
        h = hashes.Hash(hashes.SHA256())
    except UnsupportedAlgorithm as e:
        raise DigestEngineUnavailable(f"sha256 not available: {e}") from e
    except MemoryError as e:
        raise AllocationFailure("cannot allocate sha256 context") from e

    try:
        h.update(message)
        digest = h.finalize()
    except MemoryError as e:
        raise AllocationFailure("out of memory while hashing") from e
    except Exception as e:
        raise DigestComputationFailed(f"sha256 failed: {e}") from e

    if len(digest) != DIGEST_SIZE:
        raise DigestComputationFailed(f"sha256 returned {len(digest)} bytes")
    return digest


def derive(model: str, platform_name: str, chip_id: bytes) -> str:
    """
    Fingerprint = sha256(model + platform_name + hex(chip_id)) as 64
    lowercase hex characters. Pure: same inputs, same fingerprint.
    """
    digest = _sha256(canonical_message(model, platform_name, chip_id))
    return hex_encode(digest, DIGEST_SIZE)
