"""Binary Merkle tree stored as one flat digest sequence.

Layout of ``MerkleTree.hashes`` for ``n`` leaves::

    [ leaf_0 .. leaf_{n-1} | level 1 | level 2 | ... | root ]

Each level is ``ceil(previous / 2)`` wide. Level boundaries and the root's
position are computed from the leaf count alone (see ``level_sizes``), so no
parent/child links are stored.

Odd levels: the last node is promoted to the next level unchanged, with no
hashing. With leaves a, b, c the root is ``H(H(a || b) || c)``. Repeating a
trailing block therefore changes the root: [a, b, c] and [a, b, c, c] differ.

Empty input is rejected with ``EmptyInputError``; a one-block tree has height
0 and its root is that block's leaf hash.
"""
from __future__ import annotations
import hmac
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .crypto import DEFAULT_ALGORITHM, leaf_hash, pair_hash, resolve_algorithm
from .models import Proof
from .settings import settings

log = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when a tree is requested over zero blocks."""


class ProofNotImplementedError(NotImplementedError):
    """Inclusion proofs are declared in the data model but not supported."""


def level_sizes(leaf_count: int) -> List[int]:
    """Width of every level, leaves first: 5 -> [5, 3, 2, 1]."""
    if leaf_count < 1:
        raise EmptyInputError("a tree needs at least one leaf")
    sizes = [leaf_count]
    n = leaf_count
    while n > 1:
        n = (n + 1) // 2  # an odd level carries its last node up
        sizes.append(n)
    return sizes


def level_offsets(leaf_count: int) -> List[int]:
    """Index in the flat sequence where each level starts."""
    offsets = []
    pos = 0
    for size in level_sizes(leaf_count):
        offsets.append(pos)
        pos += size
    return offsets


def root_index(leaf_count: int) -> int:
    return sum(level_sizes(leaf_count)) - 1


def _as_bytes(value, what: str = "block") -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{what} must be bytes-like, got {type(value).__name__}")


@dataclass(frozen=True)
class MerkleTree:
    hashes: Tuple[bytes, ...] = field(repr=False)  # leaves, then each level up to the root
    leaf_count: int
    algorithm: str = DEFAULT_ALGORITHM

    def __post_init__(self) -> None:
        object.__setattr__(self, "hashes", tuple(self.hashes))
        expected = sum(level_sizes(self.leaf_count))
        if len(self.hashes) != expected:
            raise ValueError(
                f"{self.leaf_count} leaves need {expected} digests, got {len(self.hashes)}"
            )

    @classmethod
    def construct(
        cls, blocks: Iterable[bytes], algorithm: Optional[str] = None
    ) -> "MerkleTree":
        algo = resolve_algorithm(algorithm) if algorithm else settings.hash_algorithm
        data = [_as_bytes(b) for b in blocks]
        if not data:
            raise EmptyInputError("cannot build a tree from zero blocks")

        hashes = [leaf_hash(b, algo) for b in data]
        start, width = 0, len(hashes)
        while width > 1:
            end = start + width
            for i in range(start, end - 1, 2):
                hashes.append(pair_hash(hashes[i], hashes[i + 1], algo))
            if width % 2:
                log.debug("odd level: %d nodes at offset %d, promoting last", width, start)
                hashes.append(hashes[end - 1])
            start, width = end, (width + 1) // 2

        tree = cls(tuple(hashes), len(data), algo)
        log.debug(
            "built tree leaves=%d height=%d algo=%s root=%s",
            tree.leaf_count,
            tree.height,
            algo,
            tree.root_hash().hex(),
        )
        return tree

    @property
    def height(self) -> int:
        return len(level_sizes(self.leaf_count)) - 1

    @property
    def leaves(self) -> Tuple[bytes, ...]:
        return self.hashes[: self.leaf_count]

    def level(self, k: int) -> Tuple[bytes, ...]:
        """Digests of level ``k`` (0 = leaves, ``height`` = root), left to right."""
        sizes = level_sizes(self.leaf_count)
        if not 0 <= k < len(sizes):
            raise IndexError(f"level {k} out of range for height {len(sizes) - 1}")
        start = level_offsets(self.leaf_count)[k]
        return self.hashes[start : start + sizes[k]]

    def root_hash(self) -> bytes:
        return self.hashes[root_index(self.leaf_count)]

    def __len__(self) -> int:
        return len(self.hashes)

    def inclusion_proof(self, index: int) -> Proof:
        raise ProofNotImplementedError("inclusion proofs are not supported")

    @classmethod
    def verify(
        cls,
        blocks: Iterable[bytes],
        expected_root: bytes,
        algorithm: Optional[str] = None,
    ) -> bool:
        """Rebuild the tree from ``blocks`` and compare its root to ``expected_root``.

        Empty input has no root and verifies as False. Non-bytes blocks and
        unknown algorithms still raise.
        """
        expected = _as_bytes(expected_root, "expected_root")
        try:
            tree = cls.construct(blocks, algorithm)
        except EmptyInputError:
            log.debug("verify called with no blocks")
            return False
        root = tree.root_hash()
        ok = hmac.compare_digest(root, expected)
        if not ok:
            log.debug("root mismatch: expected %s, computed %s", expected.hex(), root.hex())
        return ok


construct = MerkleTree.construct
verify = MerkleTree.verify


def root_hash(tree: MerkleTree) -> bytes:
    return tree.root_hash()
