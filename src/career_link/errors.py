"""
career_link.errors — Custom exception classes
==============================================

Defines the exception hierarchy for gateway failures.
Each exception stores the request it belongs to for structured logging.

    CareerLinkError
    └── GatewayError
        ├── GatewayTransportError   (network, timeout, API status)
        ├── GatewaySchemaError      (response has the wrong shape)
        └── EmptyResponseError      (service returned no body)
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from .error_formatter import format_error_block


class CareerLinkError(Exception):
    """Base exception for all Career Link package errors."""
    pass


class GatewayError(CareerLinkError):
    """Base class for failures of a challenge or validation request."""

    error_type = "GATEWAY_ERROR"

    def __init__(
        self,
        operation: str,
        request_payload: Dict[str, Any],
        message: str,
    ):
        self.operation = operation
        self.request_payload = request_payload
        self.message = message
        super().__init__(f"{operation}: {message}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type=self.error_type,
            operation=self.operation,
            request_payload=self.request_payload,
            detail=self.message,
        )


class GatewayTransportError(GatewayError):
    """Raised when the service cannot be reached or rejects the request."""

    error_type = "TRANSPORT_FAILURE"


class EmptyResponseError(GatewayError):
    """Raised when the service answers without any usable body."""

    error_type = "EMPTY_RESPONSE"

    def __init__(self, operation: str, request_payload: Dict[str, Any]):
        super().__init__(operation, request_payload, "No response from AI service")


class GatewaySchemaError(GatewayError):
    """Raised when the service's response does not match the expected schema."""

    error_type = "SCHEMA_VALIDATION_FAILURE"

    def __init__(
        self,
        operation: str,
        request_payload: Dict[str, Any],
        raw_output: Any,
        validation_errors: Optional[List[str]] = None,
    ):
        self.raw_output = raw_output
        self.validation_errors = validation_errors or []
        super().__init__(
            operation,
            request_payload,
            f"Response failed validation: {self.validation_errors}",
        )

    def format_error_log(self) -> str:
        return format_error_block(
            error_type=self.error_type,
            operation=self.operation,
            request_payload=self.request_payload,
            raw_output=self.raw_output,
            validation_errors=self.validation_errors,
        )
