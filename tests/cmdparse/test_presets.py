"""
Tests for cmdparse/presets.py.

Tests the standard viewer option set:
- Registered names and command tokens
- Resolution of typed settings from a parsed registry
- Rejection of unsupported shader types
"""

import pytest

from cmdparse import (
    BenchmarkSettings,
    OptionRegistry,
    ViewerSettings,
    register_viewer_options,
)
from cmdparse.presets import VIEWER_OPTIONS


@pytest.fixture
def viewer(lg):
    return register_viewer_options(OptionRegistry(lg=lg))


def _resolve(viewer, lg, *tokens, defaults=None):
    viewer.parse(["viewer", *tokens])
    return ViewerSettings.from_registry(viewer, defaults, lg=lg)


@pytest.mark.unit
class TestRegisterViewerOptions:
    """Tests for register_viewer_options()."""

    def test_registers_every_option(self, viewer):
        """Test all viewer options are registered in order."""
        assert viewer.names() == [name for name, *_ in VIEWER_OPTIONS]
        assert len(viewer) == 16

    def test_help_has_long_form_only(self, viewer):
        """Test -h belongs to height, not help."""
        assert viewer.get("help").commands == ("--help",)
        assert viewer.get("height").commands == ("-h", "--height")

    def test_value_options(self, viewer):
        """Test which options consume a value."""
        with_value = [option.name for option in viewer if option.has_value]

        assert with_value == [
            "width",
            "height",
            "shaders",
            "gpuselection",
            "benchmarkwarmup",
            "benchmarkruntime",
            "benchmarkresultfile",
            "benchmarkframes",
        ]


@pytest.mark.unit
class TestViewerSettings:
    """Tests for ViewerSettings.from_registry()."""

    def test_defaults_without_arguments(self, viewer, lg):
        """Test an empty command line yields the defaults."""
        assert _resolve(viewer, lg) == ViewerSettings()

    def test_full_command_line(self, viewer, lg):
        """Test every option is resolved."""
        settings = _resolve(
            viewer,
            lg,
            "-w", "1920",
            "-h", "1080",
            "-v",
            "-vl",
            "--vsync",
            "-f",
            "-s", "hlsl",
            "-g", "2",
            "-gl",
            "-b",
            "-bw", "3",
            "-br", "20",
            "-bf", "out.csv",
            "-bt",
            "-bfs", "100",
        )  # fmt: skip

        assert settings == ViewerSettings(
            width=1920,
            height=1080,
            validation=True,
            validation_log_file=True,
            vsync=True,
            fullscreen=True,
            shader_type="hlsl",
            gpu_index=2,
            list_gpus=True,
            benchmark=BenchmarkSettings(
                active=True,
                warmup=3,
                duration=20,
                filename="out.csv",
                output_frame_times=True,
                output_frames=100,
            ),
        )

    def test_unsupported_shader_type_is_ignored(self, viewer, lg, log_stream):
        """Test only glsl and hlsl are accepted."""
        settings = _resolve(viewer, lg, "--shaders", "spirv")

        assert settings.shader_type == "glsl"
        assert "shader type must be one of" in log_stream.getvalue()
        assert "[value:spirv]" in log_stream.getvalue()

    def test_invalid_sizes_keep_defaults(self, viewer, lg):
        """Test non-positive sizes fall back to the defaults."""
        settings = _resolve(viewer, lg, "-w", "0", "-h", "-720")

        assert settings.width == 1280
        assert settings.height == 720

    def test_gpu_zero_selects_first_device(self, viewer, lg):
        """Test -g 0 resolves to index 0 through the default."""
        assert _resolve(viewer, lg, "-g", "0").gpu_index == 0

    def test_custom_defaults(self, viewer, lg):
        """Test options not given keep the supplied defaults."""
        defaults = ViewerSettings(width=800, vsync=True)

        settings = _resolve(viewer, lg, "-h", "600", defaults=defaults)

        assert settings.width == 800
        assert settings.height == 600
        assert settings.vsync is True

    def test_height_without_value_requests_help(self, viewer, lg):
        """Test a bare -h is a missing height, which raises the help flag."""
        viewer.parse(["viewer", "-h"])

        assert viewer.is_set("help") is True
        assert viewer.missing_values == ["height"]
