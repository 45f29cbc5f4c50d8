import hashlib
from typing import Protocol

from fhash.core.errors import ConfigError


DEFAULT_ALGORITHM = "sha512"


# ============================================================
# Capability interface
# ============================================================

class HashPrimitive(Protocol):
    """
    Streaming digest: feed bytes with write(), then finalize() once.
    """

    digest_size: int

    def write(self, data: bytes) -> None:
        ...

    def finalize(self) -> bytes:
        ...


# ============================================================
# hashlib adapter
# ============================================================

class HashlibPrimitive:
    def __init__(self, algorithm: str = DEFAULT_ALGORITHM):
        try:
            self._h = hashlib.new(algorithm)
        except (ValueError, TypeError) as exc:
            raise ConfigError(f"unsupported hash algorithm: {algorithm}") from exc

        # shake_* report digest_size 0 and need a length at finalize time
        if self._h.digest_size == 0:
            raise ConfigError(
                f"hash algorithm has no fixed digest length: {algorithm}"
            )

        self.algorithm = algorithm
        self.digest_size = self._h.digest_size
        self._finalized = False

    def write(self, data: bytes) -> None:
        if self._finalized:
            raise RuntimeError("write() after finalize()")
        self._h.update(data)

    def finalize(self) -> bytes:
        if self._finalized:
            raise RuntimeError("finalize() called twice")
        self._finalized = True
        return self._h.digest()


def new_hasher(algorithm: str = DEFAULT_ALGORITHM) -> HashPrimitive:
    return HashlibPrimitive(algorithm)


def empty_digest(algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """
    Digest of zero bytes. This is also the digest of an empty directory.
    """
    return new_hasher(algorithm).finalize()
