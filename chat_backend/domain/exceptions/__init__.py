"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from chat_backend.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "DomainValidationError",
]
