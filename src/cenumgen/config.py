"""Configuration management for cenumgen."""

import json
import os
import re
from pathlib import Path
from typing import Optional, Pattern

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError
from .pipeline.models import CaseStyle

load_dotenv()

ACCESS_LEVELS = ("public", "internal", "package", "fileprivate", "private")


class Settings(BaseModel):
    """Process-wide settings read from the environment."""

    # Logging level used when --verbose is not given
    log_level: str = os.getenv("CENUMGEN_LOG_LEVEL", "WARNING")

    # Module imported by generated files for @CEnumRawValues / @CEnumValue
    support_module: str = os.getenv("CENUMGEN_SUPPORT_MODULE", "CEnumMacros")


settings = Settings()


class ConfigFile(BaseModel):
    """Contents of a JSON config file. Every key is optional."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    input: Optional[str] = None
    output: Optional[str] = None
    enum_name: Optional[str] = Field(default=None, alias="enum")
    match: Optional[str] = None
    drop_prefix: Optional[list[str]] = Field(default=None, alias="dropPrefix")
    drop_suffix: Optional[list[str]] = Field(default=None, alias="dropSuffix")
    case_style: Optional[str] = Field(default=None, alias="caseStyle")
    access: Optional[str] = None
    imports: Optional[list[str]] = None
    expand: Optional[bool] = None


class GenerationConfig(BaseModel):
    """Fully resolved, immutable settings for one generation run."""

    model_config = ConfigDict(frozen=True)

    input_path: Path
    output_path: Path
    enum_name: str
    match: Optional[Pattern] = None
    drop_prefixes: tuple[str, ...] = ()
    drop_suffixes: tuple[str, ...] = ()
    case_style: CaseStyle = CaseStyle.LOWER_CAMEL
    access: Optional[str] = None
    imports: tuple[str, ...] = ()
    expand: bool = False


def load_config_file(path: Path) -> ConfigFile:
    """
    Load and validate a JSON config file.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid JSON,
            or contains unknown keys or wrongly typed values
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read config {path}: {e.strerror or e}", details={"path": str(path)}
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(
            f"Cannot read config {path}: {e}", details={"path": str(path)}
        ) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in config {path}: {e.msg} (line {e.lineno})",
            details={"path": str(path)},
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config {path} must contain a JSON object")

    try:
        return ConfigFile.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(
            f"Invalid config {path}: {location}: {first['msg']}",
            details={"path": str(path)},
        ) from e


def resolve_path(path: str, base: Path) -> Path:
    """Resolve a possibly relative path against base."""
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return base / candidate


def parse_case_style(value: str, source: str) -> CaseStyle:
    try:
        return CaseStyle(value)
    except ValueError:
        raise ConfigurationError(f"Invalid {source}: {value}") from None


def resolve_config(args, cwd: Optional[Path] = None) -> GenerationConfig:
    """
    Merge a config file with command-line values into a GenerationConfig.

    Config file values are applied first and flags override them. Repeatable
    flags (drop prefixes, drop suffixes, imports) extend the config lists.
    Relative paths from the config file resolve against its directory, and
    relative paths from flags against ``cwd``.

    Args:
        args: Parsed command-line namespace
        cwd: Working directory, defaults to the process's

    Returns:
        The resolved configuration

    Raises:
        ConfigurationError: For missing required values, an invalid case
            style, access level, or match pattern
    """
    cwd = cwd or Path.cwd()

    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    enum_name: Optional[str] = None
    match_pattern: Optional[str] = None
    drop_prefixes: list[str] = []
    drop_suffixes: list[str] = []
    case_style = CaseStyle.LOWER_CAMEL
    access: Optional[str] = None
    imports: list[str] = []
    expand = False

    if args.config:
        config_path = resolve_path(args.config, cwd)
        config = load_config_file(config_path)
        base = config_path.parent

        if config.input is not None:
            input_path = resolve_path(config.input, base)
        if config.output is not None:
            output_path = resolve_path(config.output, base)
        if config.enum_name is not None:
            enum_name = config.enum_name
        if config.match is not None:
            match_pattern = config.match
        if config.drop_prefix is not None:
            drop_prefixes = list(config.drop_prefix)
        if config.drop_suffix is not None:
            drop_suffixes = list(config.drop_suffix)
        if config.case_style is not None:
            case_style = parse_case_style(config.case_style, "caseStyle in config")
        if config.access is not None:
            access = config.access
        if config.imports is not None:
            imports = list(config.imports)
        if config.expand is not None:
            expand = config.expand

    if args.input:
        input_path = resolve_path(args.input, cwd)
    if args.output:
        output_path = resolve_path(args.output, cwd)
    if args.enum:
        enum_name = args.enum
    if args.match is not None:
        match_pattern = args.match
    drop_prefixes.extend(args.drop_prefix or [])
    drop_suffixes.extend(args.drop_suffix or [])
    if args.case_style is not None:
        case_style = parse_case_style(args.case_style, "--case-style")
    if args.access is not None:
        access = args.access
    imports.extend(args.imports or [])
    if args.expand:
        expand = True

    if input_path is None:
        raise ConfigurationError("Missing required --input")
    if output_path is None:
        raise ConfigurationError("Missing required --output")
    if not enum_name:
        raise ConfigurationError("Missing required --enum")

    match = None
    if match_pattern is not None:
        try:
            match = re.compile(match_pattern)
        except re.error as e:
            raise ConfigurationError(
                f"Invalid --match pattern '{match_pattern}': {e}"
            ) from e

    if access is not None and access not in ACCESS_LEVELS:
        raise ConfigurationError(f"Invalid --access: {access}")

    return GenerationConfig(
        input_path=input_path,
        output_path=output_path,
        enum_name=enum_name,
        match=match,
        drop_prefixes=tuple(drop_prefixes),
        drop_suffixes=tuple(drop_suffixes),
        case_style=case_style,
        access=access,
        imports=tuple(imports),
        expand=expand,
    )
