"""Random source helpers shared by the synthetic generators."""

import uuid
from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the generator injected into factories. None means unseeded."""
    return np.random.default_rng(seed)


def random_token(rng: np.random.Generator) -> str:
    """Random version-4 UUID string drawn from ``rng`` (reproducible when seeded)."""
    return str(uuid.UUID(bytes=rng.bytes(16), version=4))
