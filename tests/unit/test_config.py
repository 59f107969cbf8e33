from __future__ import annotations

import os
from pathlib import Path

import pytest

from warnparse.config import (
    OutputConfig,
    ParsingConfig,
    WarnparseConfig,
    get_user_config_path,
    load_config,
)
from warnparse.exceptions import ConfigError


def test_load_defaults_when_no_config(clean_env: None, temp_dir: Path) -> None:
    """Test that defaults are used when no config file exists."""
    os.chdir(temp_dir)

    config = load_config()
    assert isinstance(config, WarnparseConfig)
    assert config.parsing.encoding == "utf-8"
    assert config.parsing.default_parser is None
    assert config.parsing.strip_prefix is None
    assert config.parsing.strip_ansi is True
    assert config.output.format == "text"
    assert config.verbosity == "warning"


def test_load_project_config(
    clean_env: None, temp_dir: Path, sample_config_yaml: str
) -> None:
    """Test loading configuration from warnparse.yaml."""
    os.chdir(temp_dir)
    (temp_dir / "warnparse.yaml").write_text(sample_config_yaml)

    config = load_config()
    assert config.parsing.encoding == "latin-1"
    assert config.parsing.default_parser == "gcc"
    assert config.parsing.strip_prefix == r"\[\w+\]\s*"
    assert config.parsing.strip_ansi is False
    assert config.output.format == "json"
    assert config.verbosity == "info"


def test_load_explicit_config_path(
    clean_env: None, temp_dir: Path, sample_config_yaml: str
) -> None:
    """Test that an explicit path is used instead of ./warnparse.yaml."""
    os.chdir(temp_dir)
    config_path = temp_dir / "custom.yaml"
    config_path.write_text(sample_config_yaml)

    config = load_config(config_path)
    assert config.parsing.default_parser == "gcc"


def test_user_config_is_merged_below_project(clean_env: None, temp_dir: Path) -> None:
    """Test that project values override user values key by key."""
    os.chdir(temp_dir)
    user_path = get_user_config_path()
    user_path.parent.mkdir(parents=True)
    user_path.write_text("parsing:\n  encoding: cp1252\n  default_parser: javac\n")
    (temp_dir / "warnparse.yaml").write_text("parsing:\n  default_parser: gcc\n")

    config = load_config()
    assert config.parsing.encoding == "cp1252"
    assert config.parsing.default_parser == "gcc"


def test_env_var_overrides(
    clean_env: None, temp_dir: Path, sample_config_yaml: str
) -> None:
    """Test that WARNPARSE_* environment variables override config files."""
    os.chdir(temp_dir)
    (temp_dir / "warnparse.yaml").write_text(sample_config_yaml)
    os.environ["WARNPARSE_PARSING__ENCODING"] = "cp1252"
    os.environ["WARNPARSE_VERBOSITY"] = "debug"

    config = load_config()
    assert config.parsing.encoding == "cp1252"
    assert config.parsing.default_parser == "gcc"
    assert config.verbosity == "debug"


def test_empty_config_file_uses_defaults(clean_env: None, temp_dir: Path) -> None:
    """Test that an empty warnparse.yaml is treated as no settings."""
    os.chdir(temp_dir)
    (temp_dir / "warnparse.yaml").write_text("")

    config = load_config()
    assert config.output.format == "text"


def test_invalid_yaml_raises_config_error(clean_env: None, temp_dir: Path) -> None:
    """Test that malformed YAML raises ConfigError."""
    os.chdir(temp_dir)
    (temp_dir / "warnparse.yaml").write_text("parsing: [unclosed\n")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config()


def test_non_mapping_yaml_raises_config_error(clean_env: None, temp_dir: Path) -> None:
    """Test that a YAML list at the top level is rejected."""
    os.chdir(temp_dir)
    (temp_dir / "warnparse.yaml").write_text("- gcc\n- javac\n")

    with pytest.raises(ConfigError) as exc_info:
        load_config()

    assert exc_info.value.value == "list"


def test_invalid_strip_prefix_raises_config_error(
    clean_env: None, temp_dir: Path
) -> None:
    """Test that a strip_prefix which does not compile is rejected."""
    os.chdir(temp_dir)
    (temp_dir / "warnparse.yaml").write_text('parsing:\n  strip_prefix: "[unclosed"\n')

    with pytest.raises(ConfigError) as exc_info:
        load_config()

    assert exc_info.value.field == "parsing.strip_prefix"
    assert exc_info.value.value == "[unclosed"


def test_invalid_output_format_raises_config_error(
    clean_env: None, temp_dir: Path
) -> None:
    """Test that an unknown output format is rejected."""
    os.chdir(temp_dir)
    (temp_dir / "warnparse.yaml").write_text("output:\n  format: xml\n")

    with pytest.raises(ConfigError) as exc_info:
        load_config()

    assert exc_info.value.field == "output.format"


class TestBuildTransformer:
    """Tests for ParsingConfig.build_transformer."""

    def test_defaults_strip_ansi(self) -> None:
        transform = ParsingConfig().build_transformer()
        assert transform is not None
        assert transform("\x1b[1;33mwarning\x1b[0m: x") == "warning: x"

    def test_nothing_to_rewrite(self) -> None:
        assert ParsingConfig(strip_ansi=False).build_transformer() is None

    def test_prefix_applied_after_ansi(self) -> None:
        config = ParsingConfig(strip_prefix=r"\[\w+\]\s*")
        transform = config.build_transformer()
        assert transform is not None
        assert transform("\x1b[32m[javac]\x1b[0m Foo.java:3: warning: x") == (
            "Foo.java:3: warning: x"
        )


def test_output_config_default() -> None:
    assert OutputConfig().format == "text"
