"""One generation run: read the header, build the enum, write the file."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from .config import GenerationConfig, settings
from .exceptions import CEnumGenError, GenerationIOError
from .pipeline.models import GenerationResult
from .pipeline.naming import KeywordPolicy
from .pipeline.transform import TransformOptions, transform_header
from .swift.emitter import DeclarationEmitter
from .swift.keywords import SWIFT_KEYWORD_POLICY

logger = logging.getLogger(__name__)


def read_header(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise GenerationIOError("read", str(path), e) from e


def write_atomic(path: Path, text: str) -> None:
    """Write text to path through a uniquely named sibling file and os.replace."""
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise GenerationIOError("write", str(path), e) from e


def render(
    text: str,
    config: GenerationConfig,
    keywords: KeywordPolicy = SWIFT_KEYWORD_POLICY,
    support_module: Optional[str] = None,
) -> GenerationResult:
    """
    Produce the generated source for header text without touching the disk.

    Args:
        text: Raw header source
        config: Resolved run configuration
        keywords: Reserved-word policy for case identifiers
        support_module: Module defining the markers, defaults to settings

    Returns:
        GenerationResult with entries, warnings, and the rendered text
    """
    options = TransformOptions(
        match=config.match,
        drop_prefixes=list(config.drop_prefixes),
        drop_suffixes=list(config.drop_suffixes),
        case_style=config.case_style,
    )
    transformed = transform_header(text, options, keywords)

    emitter = DeclarationEmitter(
        enum_name=config.enum_name,
        access=config.access,
        imports=list(config.imports),
        support_module=support_module or settings.support_module,
        expand=config.expand,
    )
    try:
        emitted = emitter.emit(transformed.entries)
    except CEnumGenError as e:
        e.warnings = transformed.warnings + e.warnings
        raise

    return GenerationResult(
        entries=transformed.entries,
        warnings=transformed.warnings + emitted.warnings,
        text=emitted.text,
    )


def generate(config: GenerationConfig) -> GenerationResult:
    """
    Run the whole generation for a resolved configuration.

    Nothing is written unless every stage succeeds.

    Raises:
        GenerationIOError: If the header cannot be read or the output written
        IdentifierCollisionError: If two C names map to one identifier
    """
    logger.info(f"Generating {config.enum_name} from {config.input_path}")
    result = render(read_header(config.input_path), config)
    try:
        write_atomic(config.output_path, result.text)
    except GenerationIOError as e:
        e.warnings = list(result.warnings)
        raise
    logger.info(f"Wrote {len(result.entries)} cases to {config.output_path}")
    return result
