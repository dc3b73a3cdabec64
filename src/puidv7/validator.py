"""puidv7 validator."""

from dataclasses import dataclass

from puidv7 import puid
from puidv7.exceptions import Puidv7Error

# Version nibble position in canonical UUID text
_VERSION_INDEX = 14


@dataclass
class ValidationResult:
    """puidv7 validation result."""

    valid: bool
    error: str | None = None
    warnings: list[str] | None = None
    uuid: str | None = None

    def __post_init__(self) -> None:
        """Initialize warnings list."""
        if self.warnings is None:
            self.warnings = []


class PuidValidator:
    """puidv7 validator for an optional expected prefix."""

    def __init__(self, expected_prefix: str = ""):
        """Initialize validator.

        Args:
            expected_prefix: Required prefix, or "" to accept any prefix

        Raises:
            InvalidPrefixError: If expected_prefix is set and invalid
        """
        if expected_prefix:
            puid.validate_prefix(expected_prefix)
        self.expected_prefix = expected_prefix

    def validate(self, value: str, strict: bool = False) -> ValidationResult:
        """Validate a puidv7 string.

        Args:
            value: puidv7 string to validate
            strict: Treat warnings as validation failures

        Returns:
            Validation result
        """
        try:
            uuid = puid.decode(value, self.expected_prefix)
        except Puidv7Error as e:
            return ValidationResult(valid=False, error=str(e))

        warnings = []
        if value != puid.normalize(value):
            warnings.append(f"Not in canonical form: {value!r}")

        version = uuid[_VERSION_INDEX]
        if version != "7":
            warnings.append(f"UUID version is {int(version, 16)}, expected 7: {uuid}")

        if strict and warnings:
            return ValidationResult(
                valid=False,
                error=f"Strict validation failed: {warnings[0]}",
                warnings=warnings,
                uuid=uuid,
            )

        return ValidationResult(valid=True, warnings=warnings, uuid=uuid)
