"""Tests for the config module."""

import re
from pathlib import Path

import pytest

from cenumgen.config import (
    ConfigFile,
    Settings,
    load_config_file,
    resolve_config,
)
from cenumgen.exceptions import ConfigurationError
from cenumgen.pipeline import CaseStyle


class TestSettings:
    """Test environment-driven settings."""

    def test_settings_defaults(self, monkeypatch):
        """Test default values when the environment is clean."""
        monkeypatch.delenv("CENUMGEN_LOG_LEVEL", raising=False)
        monkeypatch.delenv("CENUMGEN_SUPPORT_MODULE", raising=False)

        settings = Settings()

        assert settings.log_level == "WARNING"
        assert settings.support_module == "CEnumMacros"

    def test_settings_explicit(self):
        """Test explicit values override defaults."""
        settings = Settings(log_level="DEBUG", support_module="Markers")

        assert settings.log_level == "DEBUG"
        assert settings.support_module == "Markers"


class TestConfigFile:
    """Test JSON config loading."""

    def test_load_all_keys(self, write_config):
        """Test every documented key is accepted."""
        path = write_config(
            {
                "input": "h.h",
                "output": "o.swift",
                "enum": "Keys",
                "match": "^k",
                "dropPrefix": ["k"],
                "dropSuffix": ["Key"],
                "caseStyle": "upperCamel",
                "access": "public",
                "imports": ["Foundation"],
                "expand": True,
            }
        )
        config = load_config_file(path)

        assert config == ConfigFile(
            input="h.h",
            output="o.swift",
            enum_name="Keys",
            match="^k",
            drop_prefix=["k"],
            drop_suffix=["Key"],
            case_style="upperCamel",
            access="public",
            imports=["Foundation"],
            expand=True,
        )

    def test_unknown_key(self, write_config):
        """Test unknown keys are rejected."""
        path = write_config({"enumName": "Keys"})
        with pytest.raises(ConfigurationError, match="enumName"):
            load_config_file(path)

    def test_wrong_type(self, write_config):
        """Test list fields must be lists."""
        path = write_config({"dropPrefix": 3})
        with pytest.raises(ConfigurationError, match="dropPrefix"):
            load_config_file(path)

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON is a configuration error."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_config_file(path)

    def test_missing_file(self, tmp_path):
        """Test an unreadable config is a configuration error."""
        with pytest.raises(ConfigurationError, match="Cannot read config"):
            load_config_file(tmp_path / "missing.json")

    def test_config_not_utf8(self, tmp_path):
        """Test a config that is not UTF-8 is a configuration error."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"enum": "\xa9"}')
        with pytest.raises(ConfigurationError, match="Cannot read config"):
            load_config_file(path)


class TestResolveConfig:
    """Test merging of config file and flags."""

    def test_flags_only(self, parse_args, tmp_path):
        """Test a complete flag set with defaults."""
        args = parse_args("--input", "h.h", "--output", "out/o.swift", "--enum", "Keys")
        config = resolve_config(args, cwd=tmp_path)

        assert config.input_path == tmp_path / "h.h"
        assert config.output_path == tmp_path / "out" / "o.swift"
        assert config.enum_name == "Keys"
        assert config.match is None
        assert config.case_style == CaseStyle.LOWER_CAMEL
        assert config.access is None
        assert config.drop_prefixes == ()
        assert config.expand is False

    def test_absolute_flag_paths(self, parse_args, tmp_path):
        """Test absolute paths are kept as given."""
        header = tmp_path / "abs.h"
        args = parse_args("--input", str(header), "--output", "o.swift", "--enum", "E")
        config = resolve_config(args, cwd=Path("/somewhere/else"))

        assert config.input_path == header

    def test_config_paths_relative_to_file(self, parse_args, write_config, tmp_path):
        """Test config paths resolve against the config's directory."""
        path = write_config(
            {"input": "IOPSKeys.h", "output": "gen/IOPSKey.swift", "enum": "IOPSKey"},
            name="sub/cenumgen.json",
        )
        args = parse_args("--config", str(path))
        config = resolve_config(args, cwd=Path("/elsewhere"))

        assert config.input_path == tmp_path / "sub" / "IOPSKeys.h"
        assert config.output_path == tmp_path / "sub" / "gen" / "IOPSKey.swift"

    def test_flags_override_config(self, parse_args, write_config, tmp_path):
        """Test scalar flags replace config values and list flags extend them."""
        path = write_config(
            {
                "input": "a.h",
                "output": "a.swift",
                "enum": "A",
                "caseStyle": "keep",
                "access": "internal",
                "dropPrefix": ["kIOPS"],
                "imports": ["Foundation"],
            }
        )
        args = parse_args(
            "--config", str(path),
            "--enum", "B",
            "--case-style", "upperCamel",
            "--access", "public",
            "--drop-prefix", "k",
            "--import", "IOKit",
        )
        config = resolve_config(args, cwd=tmp_path)

        assert config.enum_name == "B"
        assert config.case_style == CaseStyle.UPPER_CAMEL
        assert config.access == "public"
        assert config.drop_prefixes == ("kIOPS", "k")
        assert config.imports == ("Foundation", "IOKit")

    def test_match_compiled(self, parse_args, tmp_path):
        """Test the match pattern is compiled."""
        args = parse_args(
            "--input", "h", "--output", "o", "--enum", "E", "--match", "^kIOPS.*Key$"
        )
        config = resolve_config(args, cwd=tmp_path)

        assert isinstance(config.match, re.Pattern)
        assert config.match.pattern == "^kIOPS.*Key$"

    @pytest.mark.parametrize(
        "argv,message",
        [
            (("--output", "o", "--enum", "E"), "Missing required --input"),
            (("--input", "h", "--enum", "E"), "Missing required --output"),
            (("--input", "h", "--output", "o"), "Missing required --enum"),
            (("--input", "h", "--output", "o", "--enum", "E", "--match", "(["), "Invalid --match"),
            (
                ("--input", "h", "--output", "o", "--enum", "E", "--case-style", "snake"),
                "Invalid --case-style: snake",
            ),
            (
                ("--input", "h", "--output", "o", "--enum", "E", "--access", "open"),
                "Invalid --access: open",
            ),
        ],
    )
    def test_invalid(self, parse_args, tmp_path, argv, message):
        """Test configuration errors."""
        with pytest.raises(ConfigurationError, match=re.escape(message)):
            resolve_config(parse_args(*argv), cwd=tmp_path)

    def test_invalid_case_style_in_config(self, parse_args, write_config, tmp_path):
        """Test a bad caseStyle in the file is reported."""
        path = write_config({"caseStyle": "kebab"})
        with pytest.raises(ConfigurationError, match="Invalid caseStyle in config: kebab"):
            resolve_config(parse_args("--config", str(path)), cwd=tmp_path)
