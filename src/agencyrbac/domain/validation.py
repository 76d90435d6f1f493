"""Validation of permission keys, section maps and member tiers."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from agencyrbac.domain.catalog import ALL_PERMISSIONS, is_known_section
from agencyrbac.domain.exceptions import ValidationError
from agencyrbac.domain.value_objects import MemberType


@dataclass(frozen=True)
class KeyValidation:
    """Result of checking a single permission key."""

    valid: bool
    error: str | None = None
    suggestion: str | None = None


@dataclass
class CleanResult:
    """Cleaned key -> bool map plus what was dropped or coerced."""

    values: dict[str, bool] = field(default_factory=dict)
    dropped: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _suggest(key: str) -> str | None:
    lowered = key.lower()
    for known in ALL_PERMISSIONS:
        if lowered in known.lower() or known.lower().removeprefix("can_") in lowered:
            return known
    return None


def validate_permission_key(key: object) -> KeyValidation:
    """Check that ``key`` names a catalog permission; suggest a near match if not."""
    if not isinstance(key, str):
        return KeyValidation(valid=False, error="Permission key must be a string")
    if not key.strip():
        return KeyValidation(valid=False, error="Permission key cannot be empty")
    if key not in ALL_PERMISSIONS:
        return KeyValidation(
            valid=False,
            error=f"Invalid permission key: {key}",
            suggestion=_suggest(key),
        )
    return KeyValidation(valid=True)


def clean_permission_map(raw: Mapping[str, object] | None) -> CleanResult:
    """Keep catalog keys only. Non-bool values read as False."""
    result = CleanResult()
    if not raw:
        return result
    for key, value in raw.items():
        check = validate_permission_key(key)
        if not check.valid:
            result.dropped.append(str(key))
            if check.suggestion:
                result.warnings.append(
                    f"Unknown permission '{key}', did you mean '{check.suggestion}'?"
                )
            else:
                result.warnings.append(check.error or f"Invalid permission key: {key}")
            continue
        if not isinstance(value, bool):
            result.warnings.append(
                f"Permission '{key}' value should be boolean, got {type(value).__name__}; treating as false"
            )
        result.values[key] = value is True
    return result


def clean_section_access(raw: Mapping[str, object] | None) -> CleanResult:
    """Keep known sections only."""
    result = CleanResult()
    if not raw:
        return result
    for section, value in raw.items():
        if not is_known_section(section):
            result.dropped.append(str(section))
            result.warnings.append(f"Unknown section '{section}'")
            continue
        result.values[section] = value is True
    return result


def parse_member_type(raw: object) -> MemberType:
    """Normalise a stored tier string. Raises ValidationError for anything else."""
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError("Member type is required")
    normalized = raw.strip().lower()
    try:
        return MemberType(normalized)
    except ValueError:
        allowed = ", ".join(m.value for m in MemberType)
        raise ValidationError(f"Invalid member type: {raw}. Must be one of: {allowed}") from None
