"""Input validation for connector registration."""

from typing import List, Optional
from dataclasses import dataclass, field

from connectorlib.naming import (
    MAX_NAME_LENGTH,
    ResourceNames,
    derive_names,
    max_label_length,
    parse_port,
    sanitize,
)


@dataclass
class ValidationError:
    """Represents an input validation error."""
    field: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation, with the derived names when valid."""
    is_valid: bool
    errors: List[ValidationError]
    names: Optional[ResourceNames] = None
    warnings: List[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


class InputValidator:
    """Validates the short name and port and derives resource names."""

    def validate(self, short_name: str, port: str, registry: str, image_tag: str = "latest") -> ValidationResult:
        """Validate raw CLI input.

        Args:
            short_name: Free-text identifier
            port: Port as given on the command line
            registry: Image registry path the label is appended to
            image_tag: Image tag

        Returns:
            ValidationResult carrying ResourceNames when valid
        """
        errors = []
        warnings = []

        label = sanitize(short_name)
        if not label:
            errors.append(ValidationError(
                field="short-name",
                message="short-name resolves to empty after sanitization",
                suggestion="Use letters, digits or hyphens, e.g. 'api'"
            ))
        elif label != short_name:
            warnings.append(ValidationError(
                field="short-name",
                message=f"short-name '{short_name}' sanitized to '{label}'"
            ))

        parsed_port = None
        try:
            parsed_port = parse_port(port)
        except ValueError:
            errors.append(ValidationError(
                field="port",
                message="port must be an integer between 1 and 65535",
                suggestion="Pass the container's listen port, e.g. 8080"
            ))

        if label:
            errors.extend(self._validate_name_lengths(derive_names(label, parsed_port or 0, registry, image_tag)))

        if errors:
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        return ValidationResult(
            is_valid=True,
            errors=[],
            names=derive_names(label, parsed_port, registry, image_tag),
            warnings=warnings,
        )

    def _validate_name_lengths(self, names: ResourceNames) -> List[ValidationError]:
        errors = []
        for kind, name in names.all_names().items():
            if len(name) > MAX_NAME_LENGTH:
                errors.append(ValidationError(
                    field="short-name",
                    message=f"{kind} name '{name}' is longer than {MAX_NAME_LENGTH} characters",
                    suggestion=f"Use a short-name of at most {max_label_length()} characters"
                ))
        return errors


validator = InputValidator()


def validate_input(short_name: str, port: str, registry: str, image_tag: str = "latest") -> ValidationResult:
    """Convenience function to validate CLI input."""
    return validator.validate(short_name, port, registry, image_tag)


def format_validation_result(result: ValidationResult) -> str:
    """Format validation errors for display on stderr."""
    lines = []
    for error in result.errors:
        lines.append(f"Error: {error.message}")
        if error.suggestion:
            lines.append(f"  hint: {error.suggestion}")
    for warning in result.warnings:
        lines.append(f"Warning: {warning.message}")
    return "\n".join(lines)
