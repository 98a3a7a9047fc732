"""Global execution context for decoupled sharing of settings and information."""

from pcgrand.context.loggers import Logger, NullLogger, BasicLogger
from pcgrand.context.core    import PcgContext, GeneratorConfig, construct_logger
