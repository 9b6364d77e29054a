"""Error handling implementation for hoon."""

import logging
from typing import Any, Optional
from .types import (
    ErrorResponse,
    ErrorType,
    HoonError,
    ValidationError,
    ValidationResult,
)
from .utils.validation import ValidationUtils


class ErrorHandler:
    """
    Error handler for codec and storage operations.

    Validates transport text and values before the codec touches them
    and turns library errors into user-facing suggestions.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, text: Any) -> ValidationResult:
        """
        Validate transport text before decoding.

        Args:
            text: Transport text to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_transport_text(text)
        except RecursionError as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Transport text is nested too deeply: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

    def validate_value(self, value: Any, max_depth: int = 100) -> ValidationResult:
        """
        Validate a value before encoding.

        Args:
            value: Value to validate
            max_depth: Nesting depth beyond which a warning is emitted

        Returns:
            ValidationResult with validation details
        """
        try:
            result = ValidationUtils.validate_value(value, max_depth)
        except RecursionError as e:
            self.logger.error(f"Unexpected error during value validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.DOMAIN,
                    message=f"Value is nested too deeply: {str(e)}",
                    location="$"
                )],
                warnings=[]
            )

        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def handle_error(self, error: HoonError) -> ErrorResponse:
        """
        Handle a library error and provide a recovery suggestion.

        Args:
            error: HoonError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"{error.error_type.value} error: {error}")

        if error.error_type == ErrorType.SYNTAX:
            return ErrorResponse(
                can_recover=False,
                suggested_action="The text was not produced by hoon's encoder. "
                                 "Write values through the codec-wrapped accessors only."
            )
        elif error.error_type == ErrorType.DOMAIN:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Only undefined, NaN, None, bools, finite numbers, strings, "
                                 "compiled patterns, datetimes, lists and str-keyed dicts "
                                 "can be encoded. Remove cycles and foreign objects."
            )
        elif error.error_type == ErrorType.STORAGE:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Check file permissions and that the store file "
                                 "contains a JSON object of strings."
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Check the argument types passed to the call."
            )
