"""
Pure input checks, run before any LLM call.
"""
from dataclasses import dataclass

from agent.errors import InputValidationError, ValidationFailure
from agent.platforms import Platform, lookup

MAX_INPUT_LENGTH = 10_000


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: str | None = None
    failure: ValidationFailure | None = None


def validate_input(content: str | None, max_length: int = MAX_INPUT_LENGTH) -> ValidationResult:
    """Check submitted text for emptiness and length.

    Emptiness is judged on the trimmed text, length on the raw text.
    """
    if not content or not content.strip():
        return ValidationResult(
            valid=False,
            error="Content cannot be empty",
            failure=ValidationFailure.EMPTY_CONTENT,
        )
    if len(content) > max_length:
        return ValidationResult(
            valid=False,
            error=f"Content exceeds {max_length} character limit",
            failure=ValidationFailure.TOO_LONG,
        )
    return ValidationResult(valid=True)


def resolve_platforms(platform_ids: list[str] | None) -> list[tuple[str, Platform]]:
    """Map requested ids to platforms, keeping caller order and the caller's spelling.

    Repeated ids are dropped after their first occurrence.
    Raises InputValidationError on an empty list or an unknown id.
    """
    if not platform_ids:
        raise InputValidationError(
            ValidationFailure.NO_PLATFORMS_SELECTED,
            "At least one platform must be selected",
        )

    resolved: list[tuple[str, Platform]] = []
    seen: set[str] = set()
    for platform_id in platform_ids:
        platform = lookup(platform_id)
        if platform is None:
            raise InputValidationError(
                ValidationFailure.UNRECOGNIZED_PLATFORM,
                f"Unrecognized platform: {platform_id!r}",
            )
        if platform_id in seen:
            continue
        seen.add(platform_id)
        resolved.append((platform_id, platform))
    return resolved
