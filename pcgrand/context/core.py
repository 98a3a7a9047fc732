import sys
import json
import traceback

from pathlib import Path
from typing import Any, Dict, Sequence, Union

from pcgrand.exceptions import PcgException
from pcgrand.pcg import DEFAULT_PCG_SEED, DEFAULT_PCG_INC
from pcgrand.pipes import NullSink, ConsoleSink
from pcgrand.utilities import pcg_exit, wrap
from pcgrand.context.loggers import Logger, NullLogger, BasicLogger

# Creating a global configuration context to allow easy mocking and customization.
# The settings are class properties on a metaclass so that they can be loaded lazily.
# Lazy loading moves configuration errors to first use instead of import time.

_LOGGERS = { "NullLogger": NullLogger, "BasicLogger": BasicLogger }
_SINKS   = { "Console": ConsoleSink, "Null": NullSink }

class GeneratorConfig:
    """Default seeding for generators created without an explicit seed."""

    def __init__(self, seed:int, stream:int) -> None:
        """Instantiate a GeneratorConfig.

        Args:
            seed: The seed given to `Pcg32x32.seed`.
            stream: The stream given to `Pcg32x32.seed`.
        """
        if not isinstance(seed, int) or not isinstance(stream, int):
            raise PcgException("The generator seed and stream must be integers.")

        self.seed  : int = wrap(seed)
        self.stream: int = wrap(stream)

    def __repr__(self) -> str:
        return f"GeneratorConfig(seed={self.seed}, stream={self.stream})"

def construct_logger(recipe: Union[str,Dict[str,Any]]) -> Logger:
    """Build a logger from a configuration recipe.

    Args:
        recipe: Either a logger name (e.g., "BasicLogger") or a single key dict
            mapping a logger name to a sink name (e.g., {"BasicLogger": "Console"}).
    """

    if isinstance(recipe, str):
        recipe = { recipe: "Console" }

    if not isinstance(recipe, dict):
        raise PcgException(f"Unrecognized logger recipe {recipe!r}.")

    if len(recipe) != 1:
        raise PcgException(f"A logger recipe must name exactly one logger but had {sorted(recipe)}.")

    name, sink = next(iter(recipe.items()))
    sink = sink or "Console"

    if name not in _LOGGERS:
        raise PcgException(f"Unknown logger {name!r}. Expected one of {sorted(_LOGGERS)}.")
    if sink not in _SINKS:
        raise PcgException(f"Unknown logger sink {sink!r}. Expected one of {sorted(_SINKS)}.")

    return _LOGGERS[name](_SINKS[sink]())

class PcgContext_meta(type):
    """Global execution context accessible to all pcgrand classes.

    The context can either be set directly or set in a .pcgrand configuration file.
    """

    _logger       = None
    _generator    = None
    _search_paths = [Path.home() , Path.cwd(), Path(sys.path[0]) ]

    def _load_file_configs(cls) -> Dict[str,Any]:
        config = {}

        for search_path in cls.search_paths:

            potential_config = search_path / ".pcgrand"

            if potential_config.is_file() and potential_config.read_text().strip() != "":
                try:
                    file_config = json.loads(potential_config.read_text())

                    if not isinstance(file_config, dict):
                        raise PcgException(f"Expecting a JSON object (i.e., {{}}).")

                    config.update(file_config)

                except Exception as e:
                    raise PcgException(f"{str(e).strip('.')} in {potential_config}.") from e

        return config

    _config_backing = None

    @property
    def _config(cls) -> Dict[str,Any]:

        if cls._config_backing is None:
            try:
                _raw_config: Dict[str,Any] = {
                    "logger"   : { "BasicLogger": "Console" },
                    "generator": { "seed": wrap(DEFAULT_PCG_SEED), "stream": wrap(DEFAULT_PCG_INC) }
                }

                for key,value in cls._load_file_configs().items():
                    if key in _raw_config and isinstance(_raw_config[key],dict) and key != "logger":
                        if not isinstance(value, dict):
                            raise PcgException(f"Expecting a JSON object for '{key}'.")
                        _raw_config[key].update(value)
                    else:
                        _raw_config[key] = value

                cls._config_backing = {
                    'logger'   : construct_logger(_raw_config['logger']),
                    'generator': GeneratorConfig(**_raw_config['generator'])
                }
            except PcgException as e:
                messages = [
                    '',
                    "ERROR: An error occured while initializing PcgContext. Execution is unable to continue. Please see below for details:",
                    f"    > {e}",
                    ''
                ]
                pcg_exit('\n'.join(messages))

            except Exception as e:
                messages = [
                    '',
                    "ERROR: An error occured while initializing PcgContext. Execution is unable to continue. Please see below for details:",
                    ''.join(traceback.format_tb(e.__traceback__)),
                    ''.join(traceback.TracebackException.from_exception(e).format_exception_only())
                ]
                pcg_exit('\n'.join(messages))

        return cls._config_backing

    @property
    def logger(cls) -> Logger:
        """Global logging strategy."""
        cls._logger = cls._logger if cls._logger else cls._config['logger']
        return cls._logger

    @logger.setter
    def logger(cls, value: Logger) -> None:
        cls._logger = value

    @property
    def generator(cls) -> GeneratorConfig:
        """Global default seeding for generators."""
        cls._generator = cls._generator if cls._generator else cls._config['generator']
        return cls._generator

    @generator.setter
    def generator(cls, value: GeneratorConfig) -> None:
        cls._generator = value

    @property
    def search_paths(cls) -> Sequence[Path]:
        """The sequence of search paths for .pcgrand configuration files."""
        return cls._search_paths

    @search_paths.setter
    def search_paths(cls, value:Sequence[Union[str,Path]]) -> None:
        cls._search_paths = [ Path(path) if isinstance(path,str) else path for path in value  ]

    def reset(cls) -> None:
        """Forget every loaded and assigned setting so they reload on next use."""
        cls._logger         = None
        cls._generator      = None
        cls._config_backing = None

class PcgContext(metaclass=PcgContext_meta):
    """To support class properties before python 3.9 we must implement our properties directly
       on a meta class. Using class properties rather than class variables is done to allow
       lazy loading.
    """
    pass
