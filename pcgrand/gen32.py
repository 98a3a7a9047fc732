"""A generator-agnostic layer of operations over 32 bit random words."""

from abc import ABC, abstractmethod
from operator import index
from typing import Any, MutableSequence, Sequence, TypeVar

from pcgrand.exceptions import BoundError
from pcgrand.floats import ieee754_random_f32, ieee754_random_f64
from pcgrand.utilities import U32_MAX, saturating_len_as_u32

_T = TypeVar("_T")
_S = TypeVar("_S", bound=MutableSequence)

def _check_bound(bound: int) -> int:
    try:
        bound = index(bound)
    except TypeError:
        raise BoundError(f"The bound must be an integer but was {bound!r}.") from None

    if not 0 < bound <= U32_MAX:
        raise BoundError(f"The bound must be in [1, {U32_MAX}] but was {bound}.")

    return bound

class Gen32(ABC):
    """A generator with 32 bits of output per step.

    Remarks:
        Concrete generators only implement `next_u32`. Everything else is derived
        from that one primitive without knowing anything about the generator.
    """

    @abstractmethod
    def next_u32(self) -> int:
        """Generate the next 32 bits of output."""
        ...

    def next_bool(self) -> bool:
        """Produce a bool (the top bit of a raw word)."""
        return self.next_u32() >> 31 == 1

    def next_u8(self) -> int:
        """Produce a u8 from the high bits of a raw word."""
        return self.next_u32() >> 24

    def next_u16(self) -> int:
        """Produce a u16 from the high bits of a raw word."""
        return self.next_u32() >> 16

    def next_u64(self) -> int:
        """Produce a u64. The first draw gives the low half and the second the high half."""
        low  = self.next_u32()
        high = self.next_u32()
        return high << 32 | low

    def next_f32_unit(self) -> float:
        """Generate an f32 in the unsigned unit range, [0, 1].

        If you'd like [0, 1) then just use this and reroll in the (very
        unlikely) case that you do get 1.0.
        """
        return ieee754_random_f32(self, False)

    def next_f32_signed_unit(self) -> float:
        """Generate an f32 in the signed unit range, [-1, 1]."""
        return ieee754_random_f32(self, True)

    def next_f64_unit(self) -> float:
        """Generate an f64 in the unsigned unit range, [0, 1].

        If you'd like [0, 1) then just use this and reroll in the (very
        unlikely) case that you do get 1.0.
        """
        return ieee754_random_f64(self, False)

    def next_f64_signed_unit(self) -> float:
        """Generate an f64 in the signed unit range, [-1, 1]."""
        return ieee754_random_f64(self, True)

    def next_bounded(self, bound: int) -> int:
        """Generate a uniform integer in [0, `bound`) without modulo bias.

        Args:
            bound: The exclusive upper bound. Must be in [1, 2**32-1].

        Remarks:
            This is Lemire's multiply-and-reject method. The high half of
            `bound*x` is the candidate and the low half is how far into its
            bucket `x` fell. Only when the low half lands in the short leftover
            region is the draw rejected, so most calls take a single word.

            If you draw many values with the same bound `BoundedRandU32` saves
            recomputing the rejection threshold.

        References:
            Lemire, Daniel. "Fast random integer generation in an interval."
            ACM Transactions on Modeling and Computer Simulation 29.1 (2019): 1-12.

        Raises:
            BoundError: When `bound` is zero or does not fit in 32 bits.
        """
        bound = _check_bound(bound)

        mul = bound * self.next_u32()
        low = mul & U32_MAX

        if low < bound:
            threshold = ((1 << 32) - bound) % bound
            while low < threshold:
                mul = bound * self.next_u32()
                low = mul & U32_MAX

        return mul >> 32

    def pick_index(self, buf: Sequence[Any]) -> int:
        """Pick a random index into the given sequence.

        Remarks:
            Indices past `2**32-1` will never be picked.

        Raises:
            BoundError: When the sequence is empty.
        """
        return self.next_bounded(saturating_len_as_u32(len(buf)))

    def pick(self, buf: Sequence[_T]) -> _T:
        """Get a random value out of the given sequence.

        Remarks:
            Indices past `2**32-1` will never be picked.

        Raises:
            BoundError: When the sequence is empty.
        """
        return buf[self.pick_index(buf)]

    def pick_ref(self, buf: Sequence[_T]) -> _T:
        """Get a random value out of the given sequence (the same as `pick`).

        Remarks:
            Python hands out references so there is nothing to distinguish a
            shared pick from a copied one.
        """
        return self.pick(buf)

    def pick_mut(self, buf: MutableSequence[Any]) -> int:
        """Pick a random index that the caller can assign through (the same as `pick_index`)."""
        return self.pick_index(buf)

    def shuffle(self, buf: _S) -> _S:
        """Shuffle a mutable sequence in place in O(len) time.

        Remarks:
            The textbook Fisher-Yates shuffle walks backward from the end. This
            walks forward from the start and swaps position `i` with a random
            position in `[i, len)`, which is equally unbiased. Only the first
            `2**32-1` positions are shuffled for larger sequences.

        Returns:
            The given sequence (now shuffled) for convenience.

        Raises:
            BoundError: When the sequence is empty.
        """

        if len(buf) == 0:
            raise BoundError("Unable to shuffle an empty sequence.")

        possibility_count = saturating_len_as_u32(len(buf))

        for this_index in range(len(buf)-1):
            if possibility_count == 0: break
            offset = self.next_bounded(possibility_count)
            that_index = this_index + offset
            buf[this_index], buf[that_index] = buf[that_index], buf[this_index]
            possibility_count -= 1

        return buf

class BoundedRandU32:
    """A precomputed bound for repeatedly drawing from [0, `bound`).

    Remarks:
        This gives exactly the values `Gen32.next_bounded` would for the same
        generator state. It only avoids recomputing the rejection threshold.
    """

    def __init__(self, bound: int) -> None:
        """Instantiate a BoundedRandU32.

        Args:
            bound: The exclusive upper bound. Must be in [1, 2**32-1].
        """
        bound = _check_bound(bound)
        self._bound     = bound
        self._threshold = ((1 << 32) - bound) % bound

    @property
    def bound(self) -> int:
        """The exclusive upper bound of the sampled values."""
        return self._bound

    def sample(self, gen: Gen32) -> int:
        """Draw a value in [0, `bound`) using the given generator."""
        mul = self._bound * gen.next_u32()
        while (mul & U32_MAX) < self._threshold:
            mul = self._bound * gen.next_u32()
        return mul >> 32

    def samples(self, gen: Gen32, n: int) -> Sequence[int]:
        """Draw `n` values in [0, `bound`) using the given generator."""
        return [ self.sample(gen) for _ in range(n) ]

    def __repr__(self) -> str:
        return f"BoundedRandU32({self._bound})"
