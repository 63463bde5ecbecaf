from importlib.metadata import PackageNotFoundError, version

from .config import HelpConfig
from .constants import HELP_OPTION, NO_VALUE
from .exceptions import (
    CmdParseError,
    HelpConfigError,
    RegistrationError,
    UnknownOptionError,
)
from .help import HelpRenderer
from .option import Option
from .output import BufferedOutput, ConsoleOutput, OutputWriter
from .presets import BenchmarkSettings, ViewerSettings, register_viewer_options
from .registry import OptionRegistry, parse_int_prefix

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("cmdparse")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    "__version__",
    # Core classes
    "Option",
    "OptionRegistry",
    "HelpConfig",
    "HelpRenderer",
    # Output
    "OutputWriter",
    "ConsoleOutput",
    "BufferedOutput",
    # Presets
    "BenchmarkSettings",
    "ViewerSettings",
    "register_viewer_options",
    # Utils
    "parse_int_prefix",
    "HELP_OPTION",
    "NO_VALUE",
    # Exceptions
    "CmdParseError",
    "RegistrationError",
    "UnknownOptionError",
    "HelpConfigError",
]
