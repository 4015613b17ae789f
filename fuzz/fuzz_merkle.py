"""Fuzz harness for Merkle tree construction & root verification."""
from __future__ import annotations
import atheris
import sys

with atheris.instrument_imports():
    from hashtree.merkle import EmptyInputError, MerkleTree, level_sizes


def TestOneInput(data: bytes):  # noqa: N802
    if not data:
        return
    # Split data deterministically into blocks (bounded count)
    # Use fixed-size chunks to avoid quadratic blowups.
    size = max(1, min(32, data[0]))
    blocks = [data[i : i + size] for i in range(1, min(len(data), 1 + size * 64), size)]
    try:
        tree = MerkleTree.construct(blocks)
    except EmptyInputError:
        if blocks:
            raise RuntimeError("non-empty input rejected")
        return
    if len(tree.hashes) != sum(level_sizes(len(blocks))):
        raise RuntimeError("flat layout has wrong length")
    if tree.root_hash() != tree.hashes[-1]:
        raise RuntimeError("root index does not address last digest")
    if not MerkleTree.verify(blocks, tree.root_hash()):
        raise RuntimeError("tree does not verify against its own root")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
