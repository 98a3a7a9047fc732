"""Permuted congruential generators.

Remarks:
    A PCG pairs a linear congruential generator (LCG), whose low bits are weak,
    with an output permutation that mixes the strong high bits into every bit of
    the output. All generators here keep their entire state in two words,
    `(state, inc)`, and share seeding and jump-ahead. Only the output
    permutation and the word width differ between them.

References:
    O'Neill, Melissa E. "PCG: A family of simple fast space-efficient statistically
    good algorithms for random number generation." Harvey Mudd College technical
    report HMC-CS-2014-0905 (2014).
"""

from typing import Iterable, List, Tuple

from pcgrand.gen32 import Gen32
from pcgrand.jump import jump_lcg
from pcgrand.utilities import wrap

# These are wider than any generator. Each generator truncates them to its width.
DEFAULT_PCG_SEED = 201526561274146932589719779721328219291
DEFAULT_PCG_INC  = 34172814569070222299

class PcgGenerator(Gen32):
    """The state, seeding and jump-ahead shared by every PCG.

    Subclasses set `BITS` and `MULTIPLIER` and implement `next_u32`.
    """

    BITS      : int = 32
    MULTIPLIER: int = 0

    def __init__(self, state: int, inc: int) -> None:
        """Instantiate a generator directly from its raw words.

        Args:
            state: The raw LCG state.
            inc: The raw LCG increment. This is not forced odd. Use `seed`
                to create new generators.
        """
        self._state = wrap(state, self.BITS)
        self._inc   = wrap(inc, self.BITS)

    @classmethod
    def step(cls, state: int, inc: int) -> int:
        """Advance an LCG state once."""
        return wrap(state * cls.MULTIPLIER + inc, cls.BITS)

    @classmethod
    def seed(cls, seed: int, stream: int = 0) -> 'PcgGenerator':
        """Seed a new generator.

        Args:
            seed: The initial state value.
            stream: Selects one of the 2**(BITS-1) distinct sequences.

        Remarks:
            The seed is added between two LCG steps so that "boring" inputs such
            as `seed(0,0)` still give a well mixed starting state.
        """
        inc   = wrap((stream << 1) | 1, cls.BITS)
        state = cls.step(0, inc)
        state = wrap(state + seed, cls.BITS)
        state = cls.step(state, inc)
        return cls(state, inc)

    @classmethod
    def default(cls) -> 'PcgGenerator':
        """A generator seeded with the package's default seed and stream."""
        return cls.seed(wrap(DEFAULT_PCG_SEED, cls.BITS), wrap(DEFAULT_PCG_INC, cls.BITS))

    @classmethod
    def from_pair(cls, pair: Iterable[int]) -> 'PcgGenerator':
        """Restore a generator exactly from its `(state, inc)` words."""
        state, inc = pair
        return cls(state, inc)

    def to_pair(self) -> Tuple[int,int]:
        """The generator's exact `(state, inc)` words."""
        return (self._state, self._inc)

    @property
    def state(self) -> int:
        """The current LCG state."""
        return self._state

    @property
    def inc(self) -> int:
        """The LCG increment (the stream selector)."""
        return self._inc

    def jump(self, delta: int) -> None:
        """Jump the generator's LCG `delta` steps forward.

        Args:
            delta: The number of steps. The sequence loops every 2**BITS steps
                so this is taken modulo 2**BITS and negative values go backward.
        """
        self._state = jump_lcg(delta, self._state, self.MULTIPLIER, self._inc, self.BITS)

    def rewind(self, steps: int) -> None:
        """Jump the generator's LCG `steps` steps backward."""
        self.jump((1 << self.BITS) - wrap(steps, self.BITS))

    def streams(self, count: int, stride: int) -> List['PcgGenerator']:
        """Split this generator into `count` generators `stride` steps apart.

        Remarks:
            The i-th generator is a copy of this one jumped by `i*stride`. As
            long as each worker draws fewer than `stride` values no two workers
            will see overlapping parts of the sequence.
        """
        out = []
        for i in range(count):
            gen = self.copy()
            gen.jump(i*stride)
            out.append(gen)
        return out

    def copy(self) -> 'PcgGenerator':
        return type(self)(self._state, self._inc)

    def __copy__(self) -> 'PcgGenerator':
        return self.copy()

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.to_pair() == self.to_pair()

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state=0x{self._state:x}, inc=0x{self._inc:x})"

    def __reduce__(self):
        return (type(self), self.to_pair())

class Pcg32x32(PcgGenerator):
    """A PCG with 32 bits of state and 32 bits of output per step.

    Remarks:
        Create new generators with `seed`. To exactly save and restore a
        generator use `to_pair` and `from_pair`. The methods here are minimal;
        most useful operations come from `Gen32`.

        The output permutation is an RXS-M-XS that mixes the state in place and
        then advances the LCG from the mixed value. Sequences depend on that
        ordering so it must not be changed. See `DecoupledPcg32x32` for the
        ordering where the LCG advances independently of the output.
    """

    BITS       = 32
    MULTIPLIER = 0xf13283ad # other multipliers: 0xf2fc5985

    def next_u32(self) -> int:
        """Generate the next 32 bits of output."""
        state = self._state
        state ^= wrap((state >> (4 + (state >> 28))) * 277803737)
        out = state ^ (state >> 22)
        self._state = self.step(state, self._inc)
        return out

class DecoupledPcg32x32(Pcg32x32):
    """A 32 bit PCG whose LCG advances independently of its output.

    Remarks:
        This is the canonical PCG construction. The output is an RXS-M-XS of
        the current state and the LCG steps the untouched state. Because of
        that, jumping back `k` steps replays the last `k` outputs. Outputs
        differ from `Pcg32x32` after the first draw.
    """

    def next_u32(self) -> int:
        """Generate the next 32 bits of output."""
        old   = self._state
        mixed = old ^ wrap((old >> (4 + (old >> 28))) * 277803737)
        self._state = self.step(old, self._inc)
        return mixed ^ (mixed >> 22)

class Pcg32(PcgGenerator):
    """A PCG with 64 bits of state and 32 bits of output per step (PCG-XSH-RR).

    Remarks:
        This is the generator most people mean by "pcg32". Its output matches
        the reference implementation, e.g. `Pcg32.seed(42, 54)` begins with
        `0xa15c02b7, 0x7b47f409, 0xba1d3330`.
    """

    BITS       = 64
    MULTIPLIER = 6364136223846793005

    def next_u32(self) -> int:
        """Generate the next 32 bits of output."""
        old = self._state
        self._state = self.step(old, self._inc)
        xorshifted = wrap(((old >> 18) ^ old) >> 27)
        rot = old >> 59
        return wrap((xorshifted >> rot) | (xorshifted << ((-rot) & 31)))
