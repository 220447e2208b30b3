"""
RNG management for pydfa.

Provides deterministic, reproducible random number generation for random
automata and sampled input strings.
- make_rng: Create a seeded Generator
- spawn_rngs: Create independent child Generators from a parent
- get_entropy: Extract entropy from a Generator for reproducibility records

There is no module-level default generator: every function that samples
takes an explicit rng argument.
"""

import numpy as np
from typing import Union


def make_rng(
    seed: Union[int, np.random.SeedSequence, None] = None,
) -> np.random.Generator:
    """
    Create a seeded numpy Generator backed by PCG64.

    Args:
        seed: Seed for the Generator.
            - int: Converted to SeedSequence(seed)
            - SeedSequence: Used directly to initialize Generator
            - None: Creates SeedSequence() with random OS entropy

    Returns:
        np.random.Generator backed by PCG64 bit generator.

    Examples:
        >>> rng = make_rng(42)
        >>> spec = random_dfa_spec(4, "ab", rng)  # same automaton every run
    """
    if seed is None:
        seed_seq = np.random.SeedSequence()
    elif isinstance(seed, (int, np.integer)) and not isinstance(seed, bool):
        seed_seq = np.random.SeedSequence(int(seed))
    elif isinstance(seed, np.random.SeedSequence):
        seed_seq = seed
    else:
        raise TypeError(
            f"seed must be int, SeedSequence, or None, got {type(seed)}"
        )

    return np.random.Generator(np.random.PCG64(seed_seq))


def spawn_rngs(
    parent: Union[np.random.SeedSequence, np.random.Generator],
    n: int,
) -> list[np.random.Generator]:
    """
    Spawn n independent child Generators from a parent.

    Args:
        parent: Parent SeedSequence or Generator.
        n: Number of child Generators to spawn.

    Returns:
        List of n independent np.random.Generator objects backed by PCG64.
    """
    if isinstance(parent, np.random.Generator):
        seed_seq = parent.bit_generator.seed_seq
    elif isinstance(parent, np.random.SeedSequence):
        seed_seq = parent
    else:
        raise TypeError(
            f"parent must be SeedSequence or Generator, got {type(parent)}"
        )

    if n < 0:
        raise ValueError("n must be >= 0")

    return [np.random.Generator(np.random.PCG64(seq)) for seq in seed_seq.spawn(n)]


def get_entropy(rng: np.random.Generator) -> Union[int, tuple]:
    """Entropy used to seed `rng`, for recording how a random automaton was made."""
    return rng.bit_generator.seed_seq.entropy
