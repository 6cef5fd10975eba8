"""Exception hierarchy for cenumgen.

Every fatal condition of a generation run is raised as a subclass of
``CEnumGenError`` and unwinds straight to the CLI, which reports it and exits
non-zero. Non-fatal conditions are collected as warnings instead.
"""

from typing import Optional


class CEnumGenError(Exception):
    """Base exception for all cenumgen errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.details = details or {}
        # Non-fatal warnings raised earlier in the same run
        self.warnings: list[str] = []


class ConfigurationError(CEnumGenError):
    """Invalid or incomplete configuration (missing field, bad enum value, bad regex)."""

    pass


class IdentifierCollisionError(CEnumGenError):
    """Two different C names produced the same Swift identifier."""

    def __init__(self, identifier: str, source_name: str, existing_source: str):
        self.identifier = identifier
        self.source_name = source_name
        self.existing_source = existing_source
        super().__init__(
            f"Case name collision for '{identifier}' derived from {source_name} "
            f"(already used by {existing_source})",
            details={
                "identifier": identifier,
                "source_name": source_name,
                "existing_source": existing_source,
            },
        )


class DeclarationError(CEnumGenError):
    """A declaration would be rejected by the raw-value expansion."""

    def __init__(self, message: str, diagnostic_id: str):
        self.diagnostic_id = diagnostic_id
        super().__init__(message, details={"id": diagnostic_id})


class GenerationIOError(CEnumGenError):
    """Reading the header or writing the generated file failed."""

    def __init__(self, action: str, path: str, cause: Exception):
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(
            f"Failed to {action} {path}: {reason}",
            details={"path": path, "action": action},
        )
