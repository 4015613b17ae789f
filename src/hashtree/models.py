from __future__ import annotations
from enum import Enum
from typing import List
from pydantic import BaseModel, Field
from pydantic import ConfigDict


class HashDirection(str, Enum):
    """Which side a proof digest takes when concatenated with the running hash."""

    LEFT = "left"
    RIGHT = "right"


class ProofStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    side: HashDirection
    digest: bytes


class Proof(BaseModel):
    """Inclusion path from a leaf to the root, bottom-up.

    Declared so callers can type against it. Nothing in this package builds
    or checks one yet: ``MerkleTree.inclusion_proof`` and
    ``hashtree_sdk.verify.verify_inclusion`` raise ``ProofNotImplementedError``.
    """

    model_config = ConfigDict(frozen=True)

    leaf_index: int = Field(ge=0)
    steps: List[ProofStep] = Field(default_factory=list)
