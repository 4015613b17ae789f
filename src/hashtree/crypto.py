from __future__ import annotations
import base64
import hashlib


DEFAULT_ALGORITHM = "sha256"

# Fixed-width, collision-resistant hashlib names
ALLOWED_ALGORITHMS = frozenset(
    {
        "sha224",
        "sha256",
        "sha384",
        "sha512",
        "sha512_224",
        "sha512_256",
        "sha3_224",
        "sha3_256",
        "sha3_384",
        "sha3_512",
        "blake2b",
        "blake2s",
    }
)


class UnsupportedAlgorithmError(ValueError):
    """Hash algorithm outside the allowed collision-resistant, fixed-width set."""


def B64(b: bytes) -> str:
    """Base64-encode bytes to ASCII string."""
    return base64.b64encode(b).decode("ascii")


def B64D(s: str) -> bytes:
    """Decode base64 ASCII string to bytes with strict validation."""
    try:
        return base64.b64decode(s.encode("ascii"), validate=True)
    except Exception as e:
        raise ValueError("invalid base64") from e


def resolve_algorithm(name: str) -> str:
    """Normalize a hash algorithm name and check it against ``ALLOWED_ALGORITHMS``.

    ``SHA-256`` and ``sha256`` both resolve to ``sha256``. Broken or
    variable-width hashes (md5, sha1, ripemd160, shake_*) are refused.
    """
    algo = name.strip().lower().replace("-", "_")
    if algo not in ALLOWED_ALGORITHMS:
        raise UnsupportedAlgorithmError(f"hash algorithm not allowed: {name}")
    if algo not in hashlib.algorithms_available:
        raise UnsupportedAlgorithmError(f"hash algorithm not available in this build: {name}")
    return algo


def digest_size(algorithm: str = DEFAULT_ALGORITHM) -> int:
    return hashlib.new(algorithm).digest_size


def hash_bytes(data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    if algorithm == DEFAULT_ALGORITHM:
        return hashlib.sha256(data).digest()
    return hashlib.new(algorithm, data).digest()


def leaf_hash(block: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Digest of one input block: H(block)."""
    return hash_bytes(block, algorithm)


def pair_hash(left: bytes, right: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Digest of two children: H(left || right), no separator."""
    return hash_bytes(left + right, algorithm)
