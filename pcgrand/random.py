"""Module level random number generation over one shared generator.

Remarks:
    The shared generator is a `Pcg32x32`. Until `seed` is called it is seeded from
    `PcgContext.generator`, which reads any .pcgrand configuration file, so runs are
    reproducible without code changes. Use your own generator objects when more
    than one owner needs random numbers.
"""

from typing import Any, MutableSequence, Optional, Sequence

from pcgrand.pcg import Pcg32x32
from pcgrand.context import PcgContext

_random: Optional[Pcg32x32] = None

def _generator() -> Pcg32x32:
    global _random

    if _random is None:
        _random = Pcg32x32.seed(PcgContext.generator.seed, PcgContext.generator.stream)

    return _random

def seed(seed: int, stream: int = 0) -> None:
    """Set the seed for module functions.

    Args:
        seed: The seed for generating random numbers.
        stream: The stream selector for generating random numbers.

    Remarks:
        Note, this seed does not affect random numbers generated by the standard library.
    """

    global _random

    _random = Pcg32x32.seed(seed, stream)

def generator() -> Pcg32x32:
    """The shared generator behind the module functions."""
    return _generator()

def next_u32() -> int:
    """Generate the next 32 bits of output."""
    return _generator().next_u32()

def next_bool() -> bool:
    """Produce a bool."""
    return _generator().next_bool()

def next_u8() -> int:
    """Produce a u8."""
    return _generator().next_u8()

def next_u16() -> int:
    """Produce a u16."""
    return _generator().next_u16()

def next_u64() -> int:
    """Produce a u64."""
    return _generator().next_u64()

def next_bounded(bound: int) -> int:
    """Generate a uniform integer in [0, `bound`).

    Args:
        bound: The exclusive upper bound. Must be in [1, 2**32-1].
    """
    return _generator().next_bounded(bound)

def next_f32_unit() -> float:
    """Generate an f32 in [0, 1]."""
    return _generator().next_f32_unit()

def next_f32_signed_unit() -> float:
    """Generate an f32 in [-1, 1]."""
    return _generator().next_f32_signed_unit()

def next_f64_unit() -> float:
    """Generate an f64 in [0, 1]."""
    return _generator().next_f64_unit()

def next_f64_signed_unit() -> float:
    """Generate an f64 in [-1, 1]."""
    return _generator().next_f64_signed_unit()

def pick(seq: Sequence[Any]) -> Any:
    """Get a random value out of the given sequence."""
    return _generator().pick(seq)

def shuffle(items: MutableSequence[Any]) -> MutableSequence[Any]:
    """Shuffle the given items in place.

    Returns:
        The given items (now shuffled).
    """
    return _generator().shuffle(items)

def jump(delta: int) -> None:
    """Jump the shared generator `delta` steps forward."""
    _generator().jump(delta)
