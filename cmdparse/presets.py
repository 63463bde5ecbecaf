"""
Standard option set of a graphics sample viewer.

Registers the window, validation, GPU and benchmark switches shared by every
sample, and resolves them into typed settings after parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .constants import HELP_OPTION
from .log import Logger, create_lg
from .registry import OptionRegistry

SHADER_TYPES = ("glsl", "hlsl")

# name, commands, has_value, help
VIEWER_OPTIONS: tuple[tuple[str, tuple[str, ...], bool, str], ...] = (
    (HELP_OPTION, ("--help",), False, "Show help"),
    ("validation", ("-v", "--validation"), False, "Enable validation layers"),
    (
        "validationlogfile",
        ("-vl", "--validationlogfile"),
        False,
        "Log validation messages to a textfile",
    ),
    ("vsync", ("-vs", "--vsync"), False, "Enable V-Sync"),
    ("fullscreen", ("-f", "--fullscreen"), False, "Start in fullscreen mode"),
    ("width", ("-w", "--width"), True, "Set window width"),
    ("height", ("-h", "--height"), True, "Set window height"),
    ("shaders", ("-s", "--shaders"), True, "Select shader type to use (glsl or hlsl)"),
    ("gpuselection", ("-g", "--gpu"), True, "Select GPU to run on"),
    ("gpulist", ("-gl", "--listgpus"), False, "Display a list of available GPUs"),
    ("benchmark", ("-b", "--benchmark"), False, "Run example in benchmark mode"),
    (
        "benchmarkwarmup",
        ("-bw", "--benchwarmup"),
        True,
        "Set warmup time for benchmark mode in seconds",
    ),
    (
        "benchmarkruntime",
        ("-br", "--benchruntime"),
        True,
        "Set duration time for benchmark mode in seconds",
    ),
    (
        "benchmarkresultfile",
        ("-bf", "--benchfilename"),
        True,
        "Set file name for benchmark results",
    ),
    (
        "benchmarkresultframes",
        ("-bt", "--benchframetimes"),
        False,
        "Save frame times to benchmark results file",
    ),
    (
        "benchmarkframes",
        ("-bfs", "--benchmarkframes"),
        True,
        "Only render the given number of frames",
    ),
)


def register_viewer_options(registry: OptionRegistry) -> OptionRegistry:
    """Register the standard viewer options on registry and return it."""
    for name, commands, has_value, help_text in VIEWER_OPTIONS:
        registry.register(name, commands, has_value, help_text)
    return registry


@dataclass(frozen=True)
class BenchmarkSettings:
    """Benchmark mode settings (durations in seconds)."""

    active: bool = False
    warmup: int = 1
    duration: int = 10
    filename: str = "benchmarkresults.csv"
    output_frame_times: bool = False
    output_frames: int = -1  # -1 renders until duration elapses


@dataclass(frozen=True)
class ViewerSettings:
    """Typed viewer settings resolved from a parsed registry."""

    width: int = 1280
    height: int = 720
    validation: bool = False
    validation_log_file: bool = False
    vsync: bool = False
    fullscreen: bool = False
    shader_type: str = "glsl"
    gpu_index: int | None = None
    list_gpus: bool = False
    benchmark: BenchmarkSettings = field(default_factory=BenchmarkSettings)

    @classmethod
    def from_registry(
        cls,
        registry: OptionRegistry,
        defaults: ViewerSettings | None = None,
        lg: Logger | None = None,
    ) -> ViewerSettings:
        """
        Resolve settings from a registry holding the viewer options.

        Options that were not given keep the value from defaults. An
        unsupported shader type is logged and ignored.

        Args:
            registry: Parsed registry (see register_viewer_options)
            defaults: Starting values (defaults to ViewerSettings())
            lg: Logger for rejected values

        Raises:
            UnknownOptionError: If a viewer option with a value is not registered
        """
        defaults = defaults or cls()
        lg = lg or create_lg("/cmdparse/presets", "warning")

        shader_type = defaults.shader_type
        if registry.is_set("shaders"):
            value = registry.get_value_as_string("shaders", shader_type)
            if value in SHADER_TYPES:
                shader_type = value
            else:
                lg.error(
                    "shader type must be one of 'glsl' or 'hlsl'",
                    extra={"value": value},
                )

        gpu_index = defaults.gpu_index
        if registry.is_set("gpuselection"):
            gpu_index = registry.get_value_as_int("gpuselection", 0)

        return cls(
            width=registry.get_value_as_int("width", defaults.width),
            height=registry.get_value_as_int("height", defaults.height),
            validation=defaults.validation or registry.is_set("validation"),
            validation_log_file=(
                defaults.validation_log_file or registry.is_set("validationlogfile")
            ),
            vsync=defaults.vsync or registry.is_set("vsync"),
            fullscreen=defaults.fullscreen or registry.is_set("fullscreen"),
            shader_type=shader_type,
            gpu_index=gpu_index,
            list_gpus=defaults.list_gpus or registry.is_set("gpulist"),
            benchmark=cls._resolve_benchmark(registry, defaults.benchmark),
        )

    @staticmethod
    def _resolve_benchmark(
        registry: OptionRegistry, defaults: BenchmarkSettings
    ) -> BenchmarkSettings:
        return replace(
            defaults,
            active=defaults.active or registry.is_set("benchmark"),
            warmup=registry.get_value_as_int("benchmarkwarmup", defaults.warmup),
            duration=registry.get_value_as_int("benchmarkruntime", defaults.duration),
            filename=registry.get_value_as_string(
                "benchmarkresultfile", defaults.filename
            ),
            output_frame_times=(
                defaults.output_frame_times or registry.is_set("benchmarkresultframes")
            ),
            output_frames=registry.get_value_as_int(
                "benchmarkframes", defaults.output_frames
            ),
        )
