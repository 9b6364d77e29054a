"""Validation utilities for transport text, values and transform inputs."""

import json
import math
from collections.abc import Mapping
from typing import Any, List, Optional, Set
from ..types import ContractError, ErrorType, ValidationError, ValidationResult, ValueKind
from ..value_detector import detect_kind


def _reject_constant(token: str) -> Any:
    raise ValueError(f"bare {token} token is not valid transport text")


class ValidationUtils:
    """Utility class for validating transport text, values and call arguments."""

    @staticmethod
    def parse_json(text: str) -> Any:
        """
        Parse strict JSON text.

        ``NaN``, ``Infinity`` and ``-Infinity`` tokens are rejected.

        Raises:
            json.JSONDecodeError: If the text is not valid JSON
            ValueError: If the text contains a non-finite constant
        """
        return json.loads(text, parse_constant=_reject_constant)

    @staticmethod
    def validate_transport_text(text: Any) -> ValidationResult:
        """
        Validate transport text syntax.

        Args:
            text: Transport text to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not isinstance(text, str):
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Transport text must be str, got {type(text).__name__}",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if not text.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="Transport text is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        parsed = None
        try:
            parsed = ValidationUtils.parse_json(text)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
        except ValueError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=str(e),
                location="input"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            parsed=parsed
        )

    @staticmethod
    def validate_value(value: Any, max_depth: int = 100) -> ValidationResult:
        """
        Validate that a value lies inside the encodable domain.

        Args:
            value: Value to validate
            max_depth: Nesting depth beyond which a warning is emitted

        Returns:
            ValidationResult with validation details
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        ValidationUtils._check_domain(value, "$", errors, set())

        if not errors:
            depth = ValidationUtils._calculate_max_depth(value)
            if depth > max_depth:
                warnings.append(f"Deep nesting detected (depth: {depth}). "
                                "Decoding may hit the recursion limit.")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _check_domain(value: Any, location: str, errors: List[ValidationError],
                      seen: Set[int]) -> None:
        """Recursively collect domain violations."""
        kind = detect_kind(value)

        if kind is None:
            errors.append(ValidationError(
                type=ErrorType.DOMAIN,
                message=f"Unsupported value type: {type(value).__name__}",
                location=location
            ))
            return

        if kind == ValueKind.NUMBER and isinstance(value, float) and math.isinf(value):
            errors.append(ValidationError(
                type=ErrorType.DOMAIN,
                message=f"Infinite number is not encodable: {value}",
                location=location
            ))
            return

        if kind == ValueKind.PATTERN and not isinstance(value.pattern, str):
            errors.append(ValidationError(
                type=ErrorType.DOMAIN,
                message="Only str patterns are encodable, got a bytes pattern",
                location=location
            ))
            return

        if kind not in (ValueKind.LIST, ValueKind.MAPPING):
            return

        obj_id = id(value)
        if obj_id in seen:
            errors.append(ValidationError(
                type=ErrorType.DOMAIN,
                message="Circular reference detected",
                location=location
            ))
            return
        seen.add(obj_id)

        if kind == ValueKind.MAPPING:
            for key, item in value.items():
                if not isinstance(key, str):
                    errors.append(ValidationError(
                        type=ErrorType.DOMAIN,
                        message=f"Mapping key must be str, got {type(key).__name__}",
                        location=f"{location}.{key!r}"
                    ))
                    continue
                ValidationUtils._check_domain(item, f"{location}.{key}", errors, seen)
        else:
            for i, item in enumerate(value):
                ValidationUtils._check_domain(item, f"{location}[{i}]", errors, seen)

        seen.remove(obj_id)

    @staticmethod
    def _calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if isinstance(data, dict):
            children = data.values()
        elif isinstance(data, list):
            children = data
        else:
            return current_depth

        max_child_depth = current_depth
        for item in children:
            child_depth = ValidationUtils._calculate_max_depth(item, current_depth + 1)
            max_child_depth = max(max_child_depth, child_depth)

        return max_child_depth

    @staticmethod
    def require_mapping(value: Any, name: str = "mapping") -> Mapping:
        """
        Reject anything that is not a mapping.

        Raises:
            ContractError: If value is not a Mapping
        """
        if not isinstance(value, Mapping):
            raise ContractError(f"{name} must be a mapping, got {type(value).__name__}")
        return value

    @staticmethod
    def require_callable(value: Any, name: str = "function") -> Any:
        """
        Reject anything that is not callable.

        Raises:
            ContractError: If value is not callable
        """
        if not callable(value):
            raise ContractError(f"{name} must be callable, got {type(value).__name__}")
        return value

    @staticmethod
    def require_str(value: Any, name: str = "value", allow_empty: bool = True) -> str:
        """
        Reject anything that is not a string.

        Raises:
            ContractError: If value is not a str (or is empty when disallowed)
        """
        if not isinstance(value, str):
            raise ContractError(f"{name} must be str, got {type(value).__name__}")
        if not allow_empty and not value:
            raise ContractError(f"{name} cannot be empty")
        return value

    @staticmethod
    def format_errors(result: ValidationResult, location: Optional[str] = None) -> str:
        """Join validation errors into a single message."""
        parts = []
        for error in result.errors:
            where = error.location or location
            parts.append(f"{error.message} at {where}" if where else error.message)
        return "; ".join(parts)
