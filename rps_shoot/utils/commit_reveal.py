"""Cryptographic commit-reveal mechanism for fair move selection."""

import hashlib
import hmac
import secrets
from typing import Union

from rps_shoot.constants import HMAC_DIGEST, MIN_KEY_BYTES
from rps_shoot.errors import RandomnessUnavailable

KeyLike = Union[bytes, bytearray, str]


def generate_key(num_bytes: int = MIN_KEY_BYTES) -> bytes:
    """
    Generate a fresh secret key from the OS secure random source.

    Args:
        num_bytes: Key length in bytes, at least 32

    Returns:
        Random key bytes

    Raises:
        ValueError: num_bytes is below the 256-bit floor
        RandomnessUnavailable: The entropy source failed
    """
    if num_bytes < MIN_KEY_BYTES:
        raise ValueError(f"Secret keys must be at least {MIN_KEY_BYTES} bytes")
    try:
        return secrets.token_bytes(num_bytes)
    except (OSError, NotImplementedError) as e:
        raise RandomnessUnavailable(f"Secure random source failed: {e}") from e


def compute_commitment(key: bytes, move: str) -> str:
    """
    Create the commitment for a move under a secret key.

    Args:
        key: Secret key bytes
        move: The move label to commit to

    Returns:
        HMAC-SHA256 of the move as a 64-character hex string
    """
    return hmac.new(key, move.encode("utf-8"), getattr(hashlib, HMAC_DIGEST)).hexdigest()


def _key_bytes(key: KeyLike) -> bytes:
    if isinstance(key, str):
        return bytes.fromhex(key.strip())
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    raise ValueError(f"Unsupported key type: {type(key).__name__}")


def verify_commitment(key: KeyLike, move: str, commitment: str) -> bool:
    """
    Check that a revealed key and move reproduce a commitment.

    The comparison runs in constant time. A key that is not valid hex is
    treated as a mismatch.

    Args:
        key: Revealed key, as bytes or a hex string
        move: The claimed move
        commitment: Hex commitment shown before the move was chosen

    Returns:
        True if HMAC(key, move) equals the commitment
    """
    try:
        raw = _key_bytes(key)
    except ValueError:
        return False
    candidate = commitment.strip().lower()
    if not candidate.isascii():
        return False
    expected = compute_commitment(raw, move)
    return hmac.compare_digest(expected, candidate)
