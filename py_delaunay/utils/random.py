"""
Process-wide default random-ordering generator.

Point sets shuffled without an explicit generator draw from this one, so a
single set_random_seed() call makes every default shuffle reproducible.
"""

from typing import Optional

from ..core.alea_prng import AleaPRNG
from ..config import settings

# Global PRNG instance
_prng: Optional[AleaPRNG] = None


def set_random_seed(seed: str) -> None:
    """
    Reseed the default generator.

    Args:
        seed: Seed string to use
    """
    global _prng
    _prng = AleaPRNG(seed)


def get_prng() -> AleaPRNG:
    """
    Get the default generator, creating it on first use.

    Seeds from settings.shuffle_seed when configured, otherwise "default".

    Returns:
        AleaPRNG instance
    """
    global _prng
    if _prng is None:
        _prng = AleaPRNG(settings.shuffle_seed or "default")
    return _prng
