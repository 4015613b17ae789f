import logging
from typing import Iterable, Optional

from hashtree.crypto import B64D
from hashtree.merkle import MerkleTree, ProofNotImplementedError
from hashtree.models import Proof

log = logging.getLogger(__name__)


def verify_root(
    blocks: Iterable[bytes], root_b64: str, algorithm: Optional[str] = None
) -> bool:
    """Return True if ``blocks`` rebuild the tree whose root is ``root_b64``.

    The root is base64 as published alongside a commitment. Malformed base64
    counts as a mismatch rather than an error.
    """
    try:
        expected = B64D(root_b64)
    except ValueError:
        log.debug("root is not valid base64")
        return False
    return MerkleTree.verify(blocks, expected, algorithm)


def verify_inclusion(block: bytes, proof: Proof, root: bytes) -> bool:
    """Placeholder: Merkle inclusion proof verification (not yet implemented)."""
    raise ProofNotImplementedError("inclusion proof verification is not supported")
