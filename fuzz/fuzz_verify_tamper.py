"""Higher-level verification fuzzing with tampered block sequences."""
from __future__ import annotations
import atheris
import sys
import random

with atheris.instrument_imports():
    from hashtree.merkle import MerkleTree


def TestOneInput(data: bytes):  # noqa: N802
    if len(data) < 8:
        return
    # Derive variable chunk size & mutation seed
    seed = int.from_bytes(data[:4], 'little')
    rng = random.Random(seed)
    chunk_len = 1 + (data[4] % 32)
    body = data[5:]
    blocks = [body[i:i+chunk_len] for i in range(0, min(len(body), chunk_len * 16), chunk_len)]
    if len(blocks) < 2:
        return
    root = MerkleTree.construct(blocks).root_hash()
    # repeating the trailing block must not reproduce the root
    if MerkleTree.verify(blocks + [blocks[-1]], root):
        raise RuntimeError("appended copy of last block unexpectedly verified")
    tampered = list(blocks)
    idx = seed % len(blocks)
    if rng.random() < 0.5:
        blk = tampered[idx]
        pos = rng.randrange(len(blk))
        tampered[idx] = blk[:pos] + bytes([blk[pos] ^ 0x01]) + blk[pos + 1:]
    else:
        other = (idx + 1 + rng.randrange(len(blocks) - 1)) % len(blocks)
        tampered[idx], tampered[other] = tampered[other], tampered[idx]
    if tampered == blocks:
        # swapped two equal blocks
        return
    if MerkleTree.verify(tampered, root):
        raise RuntimeError("tampered blocks unexpectedly verified")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
