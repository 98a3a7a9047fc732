"""Jump-ahead for linear congruential generators.

Remarks:
    The routine below is Brown's algorithm for arbitrary-stride LCG skipping. It
    composes the affine map `x -> mult*x + inc` with itself by repeated squaring,
    so a jump of `delta` steps costs O(log delta) multiply-adds instead of `delta`.

References:
    Brown, Forrest B. "Random number generation with arbitrary strides."
    Transactions of the American Nuclear Society 71 (1994): 202-203.
"""

from functools import partial

def jump_lcg(delta:int, state:int, mult:int, inc:int, bits:int = 32) -> int:
    """Advance an LCG state by `delta` steps.

    Args:
        delta: How many steps to advance. This is taken modulo 2**bits so a
            negative delta jumps backward around the cycle.
        state: The current LCG state.
        mult: The LCG multiplier.
        inc: The LCG increment.
        bits: The word width of the LCG.

    Returns:
        The state the LCG would hold after stepping `delta` times.
    """

    mask  = (1 << bits) - 1
    delta = delta & mask

    cur_mult, cur_plus = mult & mask, inc & mask
    acc_mult, acc_plus = 1, 0

    while delta > 0:
        if delta & 1:
            acc_mult = (acc_mult * cur_mult) & mask
            acc_plus = (acc_plus * cur_mult + cur_plus) & mask
        cur_plus = ((cur_mult + 1) * cur_plus) & mask
        cur_mult = (cur_mult * cur_mult) & mask
        delta >>= 1

    return (acc_mult * (state & mask) + acc_plus) & mask

jump_lcg32 = partial(jump_lcg, bits=32)
jump_lcg64 = partial(jump_lcg, bits=64)
