"""Uniform floats built directly from random bits.

Remarks:
    Scaling a random integer by 2**-32 leaves most representable floats near
    zero unreachable. Instead the exponent is drawn geometrically (each leading
    zero bit of the raw stream halves the magnitude) and the significand is
    filled with fresh random bits plus a sticky bit, then rounded once to the
    target precision. Rounding makes both 0.0 and 1.0 possible (if rare)
    outcomes so the result lies in the closed interval [0, 1].

References:
    Campbell, Taylor R. "Uniform random floats." (2014)
    https://mumble.net/~campbell/2014/04/28/uniform-random-float
"""

import math
import struct

from pcgrand.utilities import U32_MAX, U64_MAX

# Smallest binary exponents that still land on a subnormal.
_F32_MIN_EXPONENT = -149
_F64_MIN_EXPONENT = -1074

def _to_f32(value: float) -> float:
    return struct.unpack('<f', struct.pack('<f', value))[0]

def _apply_sign(gen, value: float, signed: bool) -> float:
    if signed and gen.next_bool():
        return -value
    return value

def ieee754_random_f32(gen, signed: bool = False) -> float:
    """Generate a single precision float in [0,1] (or [-1,1] when signed).

    Args:
        gen: Anything with `next_u32` (and `next_bool` when signed).
        signed: Whether one extra draw should choose the sign.

    Returns:
        A python float holding an exact IEEE single precision value.
    """

    exponent    = -32
    significand = gen.next_u32()

    while significand == 0:
        exponent -= 32
        if exponent < _F32_MIN_EXPONENT:
            return _apply_sign(gen, 0.0, signed)
        significand = gen.next_u32()

    shift = 32 - significand.bit_length()
    if shift:
        exponent   -= shift
        significand = ((significand << shift) | (gen.next_u32() >> (32-shift))) & U32_MAX

    significand |= 1

    return _apply_sign(gen, _to_f32(math.ldexp(float(significand), exponent)), signed)

def ieee754_random_f64(gen, signed: bool = False) -> float:
    """Generate a double precision float in [0,1] (or [-1,1] when signed).

    Args:
        gen: Anything with `next_u64` (and `next_bool` when signed).
        signed: Whether one extra draw should choose the sign.

    Returns:
        A python float.
    """

    exponent    = -64
    significand = gen.next_u64()

    while significand == 0:
        exponent -= 64
        if exponent < _F64_MIN_EXPONENT:
            return _apply_sign(gen, 0.0, signed)
        significand = gen.next_u64()

    shift = 64 - significand.bit_length()
    if shift:
        exponent   -= shift
        significand = ((significand << shift) | (gen.next_u64() >> (64-shift))) & U64_MAX

    significand |= 1

    #int to float conversion rounds to nearest so this is the only rounding step
    return _apply_sign(gen, math.ldexp(float(significand), exponent), signed)
