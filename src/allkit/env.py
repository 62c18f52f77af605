"""Typed environment-variable access.

env() reads a variable and hands the raw value to a transformer. Transformers
are plain functions ``(key, value) -> result`` and compose:

    port = env("PORT", required(integer))
    host = env("HOST", optional(string, "127.0.0.1"))
    debug = env("DEBUG", optional(boolean, False))
    signing = env("SIGNING_SECRET", required(SHA256_HMAC_KEY))

Missing-but-optional variables are logged at DEBUG on the "allkit.env"
logger. Errors are raised as EnvironmentVariableError, never logged.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import math
import os
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, TypeVar

from allkit.exceptions import EnvironmentVariableError

logger = logging.getLogger("allkit.env")

T = TypeVar("T")

RawTransformer = Callable[[str, Optional[str]], T]
ValueTransformer = Callable[[str, str], T]

_TRUE = frozenset({"1", "true", "t", "yes", "y", "on", "enable", "enabled"})
_FALSE = frozenset({"0", "false", "f", "no", "n", "off", "disable", "disabled"})


def env(
    key: str,
    transformer: RawTransformer[T],
    *,
    environ: Mapping[str, str] | None = None,
) -> T:
    """Read variable ``key`` and return ``transformer(key, raw)``.

    ``raw`` is None when the variable is not set. ``environ`` defaults to
    os.environ and exists mainly so callers can read from a captured mapping.
    """
    source = os.environ if environ is None else environ
    return transformer(key, source.get(key))


def optional(transformer: ValueTransformer[T], default: T | None = None) -> RawTransformer[T | None]:
    """Wrap transformer so a missing (or empty) variable yields default."""

    def _optional(key: str, value: str | None) -> T | None:
        if value is None:
            logger.debug("Environment variable %s not set; using default", key)
            return default
        transformed = transformer(key, value)
        if transformed is None:
            logger.warning("Environment variable %s is set but empty; using default", key)
            return default
        return transformed

    return _optional


def required(transformer: ValueTransformer[T]) -> RawTransformer[T]:
    """Wrap transformer so a missing (or empty) variable raises."""

    def _required(key: str, value: str | None) -> T:
        if value is None:
            raise EnvironmentVariableError(key, f'Environment variable "{key}" is required.')
        transformed = transformer(key, value)
        if transformed is None:
            raise EnvironmentVariableError(key, f'Environment variable "{key}" is required.')
        return transformed

    return _required


# ─── Value transformers ──────────────────────────────────────────────────────


def string(key: str, value: str) -> str | None:
    """Trimmed string; an empty result counts as unset."""
    value = value.strip()
    return value or None


def number(key: str, value: str) -> float:
    try:
        parsed = float(value.strip())
    except ValueError:
        raise EnvironmentVariableError(
            key, f'Environment variable "{key}" is not a valid number.'
        ) from None
    if math.isnan(parsed):
        raise EnvironmentVariableError(key, f'Environment variable "{key}" is not a valid number.')
    return parsed


def integer(key: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise EnvironmentVariableError(
            key, f'Environment variable "{key}" is not a valid integer.'
        ) from None


def boolean(key: str, value: str) -> bool:
    """Case-insensitive yes/no parsing (1/0, true/false, on/off, ...)."""
    lower = value.strip().lower()
    if lower in _TRUE:
        return True
    if lower in _FALSE:
        return False
    raise EnvironmentVariableError(key, f'Environment variable "{key}" is not a valid boolean.')


# ─── Secret keys ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class HmacKey:
    """A raw secret bound to a digest, usable to sign and verify messages."""

    secret: bytes = field(repr=False)
    digest: str

    def sign(self, message: bytes) -> bytes:
        return hmac.new(self.secret, message, self.digest).digest()

    def verify(self, message: bytes, signature: bytes) -> bool:
        return hmac.compare_digest(self.sign(message), signature)


def secret_key(*, length: int | None = None) -> ValueTransformer[bytes]:
    """Transformer returning the UTF-8 bytes of the value.

    When length is given, the encoded secret must be exactly that many bytes.
    """

    def _secret_key(key: str, value: str) -> bytes:
        raw = value.encode("utf-8")
        if length is not None and len(raw) != length:
            raise EnvironmentVariableError(
                key,
                f'Environment variable "{key}" must be {length} bytes, got {len(raw)}.',
            )
        return raw

    return _secret_key


def hmac_key(digest: str) -> ValueTransformer[HmacKey]:
    """Transformer returning an HmacKey for the given hashlib digest name."""
    if digest not in hashlib.algorithms_available:
        raise ValueError(f"Unknown digest: {digest}")
    to_bytes = secret_key()

    def _hmac_key(key: str, value: str) -> HmacKey:
        return HmacKey(to_bytes(key, value), digest)

    return _hmac_key


SHA256_HMAC_KEY = hmac_key("sha256")
SHA512_HMAC_KEY = hmac_key("sha512")

AES_GCM_128_KEY = secret_key(length=16)
AES_GCM_192_KEY = secret_key(length=24)
AES_GCM_256_KEY = secret_key(length=32)
