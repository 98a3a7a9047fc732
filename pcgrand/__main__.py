"""Command line harness for sampling and timing pcgrand generators."""

import argparse
import json
import time

from typing import Callable, Dict, Sequence

from pcgrand.context import PcgContext
from pcgrand.exceptions import PcgException
from pcgrand.gen32 import Gen32
from pcgrand.pcg import Pcg32x32, DecoupledPcg32x32, Pcg32, PcgGenerator
from pcgrand.utilities import pcg_exit

GENERATORS: Dict[str,type] = {
    "pcg32x32" : Pcg32x32,
    "decoupled": DecoupledPcg32x32,
    "pcg32"    : Pcg32,
}

KINDS: Dict[str,Callable[[Gen32],object]] = {
    "u32" : lambda g: g.next_u32(),
    "bool": lambda g: g.next_bool(),
    "u8"  : lambda g: g.next_u8(),
    "u16" : lambda g: g.next_u16(),
    "u64" : lambda g: g.next_u64(),
    "f32" : lambda g: g.next_f32_unit(),
    "f64" : lambda g: g.next_f64_unit(),
}

def _parse_word(value: str) -> int:
    """Accept decimal or 0x prefixed integers."""
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected an integer. Received: {value}") from None

def _positive(value: str) -> int:
    number = _parse_word(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer. Received: {value}")
    return number

def _make_generator(args: argparse.Namespace) -> PcgGenerator:
    seed   = PcgContext.generator.seed   if args.seed   is None else args.seed
    stream = PcgContext.generator.stream if args.stream is None else args.stream
    return GENERATORS[args.generator].seed(seed, stream)

def _sample(args: argparse.Namespace) -> int:
    gen = _make_generator(args)

    if args.bound is not None:
        values = [ gen.next_bounded(args.bound) for _ in range(args.count) ]
    else:
        values = [ KINDS[args.kind](gen) for _ in range(args.count) ]

    print(json.dumps({"generator": args.generator, "pair": list(gen.to_pair()), "values": values}))
    return 0

def _shuffle(args: argparse.Namespace) -> int:
    gen = _make_generator(args)
    print(" ".join(gen.shuffle(list(args.items))))
    return 0

def _bench(args: argparse.Namespace) -> int:
    gen    = _make_generator(args)
    logger = PcgContext.logger
    totals = []

    with logger.time(f"Timing {args.rounds} rounds of {args.count:,} generations with {args.generator}"):
        for i in range(1, args.rounds+1):
            start = time.perf_counter()
            with logger.time(f"round {i}"):
                for _ in range(args.count):
                    gen.next_u32()
            totals.append(time.perf_counter()-start)

    logger.log(f"{args.count:,} generations per {min(totals)*1e6:.0f} microseconds (best of {args.rounds})")
    return 0

def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pcgrand", description=__doc__)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--seed", type=_parse_word, default=None, help="seed value (defaults to the configured seed)")
    common.add_argument("--stream", type=_parse_word, default=None, help="stream selector (defaults to the configured stream)")
    common.add_argument("--generator", choices=sorted(GENERATORS), default="pcg32x32")

    commands = parser.add_subparsers(dest="command", required=True)

    sample = commands.add_parser("sample", parents=[common], help="print values drawn from a generator")
    sample.add_argument("--count", type=_positive, default=5)
    sample.add_argument("--kind", choices=sorted(KINDS), default="u32")
    sample.add_argument("--bound", type=_positive, default=None, help="draw bounded integers in [0, bound) instead")
    sample.set_defaults(handler=_sample)

    shuffle = commands.add_parser("shuffle", parents=[common], help="print the given items shuffled")
    shuffle.add_argument("items", nargs="+")
    shuffle.set_defaults(handler=_shuffle)

    bench = commands.add_parser("bench", parents=[common], help="time raw generation")
    bench.add_argument("--count", type=_positive, default=1_000)
    bench.add_argument("--rounds", type=_positive, default=5)
    bench.set_defaults(handler=_bench)

    return parser

def main(argv: Sequence[str] = None) -> int:
    args = make_parser().parse_args(argv)
    try:
        return args.handler(args)
    except PcgException as e:
        pcg_exit(f"ERROR: {e}")

if __name__ == "__main__":
    raise SystemExit(main())
