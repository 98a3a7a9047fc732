from pcgrand.gen32 import Gen32, BoundedRandU32
from pcgrand.pcg import PcgGenerator, Pcg32x32, DecoupledPcg32x32, Pcg32
from pcgrand.jump import jump_lcg, jump_lcg32, jump_lcg64
from pcgrand.floats import ieee754_random_f32, ieee754_random_f64
from pcgrand.context import PcgContext, GeneratorConfig, Logger, NullLogger, BasicLogger
from pcgrand.exceptions import PcgException, BoundError
from pcgrand.utilities import saturating_len_as_u32

__version__ = "1.0.0"
