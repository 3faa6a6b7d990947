"""Random source for exercise selection.

Selection code never touches the module-level `random` functions. Callers
thread a `random.Random` through so tests can seed it.
"""

import random
import uuid

from hypertrophy_hub.config.settings import settings


def make_rng(seed: int | None = None) -> random.Random:
    """Build a random source.

    Args:
        seed: Explicit seed. Falls back to PLAN_RANDOM_SEED, then to OS entropy.

    Returns:
        Independent random.Random instance
    """
    if seed is None:
        seed = settings.random_seed
    return random.Random(seed)  # noqa: S311 - variety, not security


def new_plan_id(rng: random.Random) -> str:
    """Random-derived unique plan id, reproducible under a seeded source."""
    return f"generated_{uuid.UUID(int=rng.getrandbits(128)).hex}"
