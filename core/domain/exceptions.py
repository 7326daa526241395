"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""
from typing import Iterable


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ActivationException(DomainException):
    """Base exception for activation-related errors."""

    pass


class MissingFieldsError(ActivationException):
    """Raised when an activation request lacks a required field."""

    def __init__(self, fields: Iterable[str] = ()):
        self.fields = list(fields)
        message = "Missing required fields (licenseKey, uuid, domain)."
        if self.fields:
            message = f"Missing required fields: {', '.join(self.fields)}."
        super().__init__(message, code="MISSING_FIELDS")


class LicenseException(DomainException):
    """Base exception for license-related errors."""

    pass


class InvalidLicenseKeyError(LicenseException):
    """Raised when a license key does not exist."""

    def __init__(self, message: str = "The license key is not valid."):
        super().__init__(message, code="INVALID_LICENSE_KEY")


class LicenseInUseError(LicenseException):
    """Raised when a license is already bound to a different domain."""

    def __init__(self, message: str = "This license is already in use on another domain."):
        super().__init__(message, code="LICENSE_IN_USE")


class DuplicateLicenseKeyError(LicenseException):
    """Raised when provisioning a license key that already exists."""

    def __init__(self, message: str = "License key already exists"):
        super().__init__(message, code="DUPLICATE_LICENSE_KEY")


class CredentialException(DomainException):
    """Base exception for credential-layer rejections."""

    pass


class UnauthenticatedError(CredentialException):
    """Raised when a protected operation is called without a bearer token."""

    def __init__(self, message: str = "Access denied. No token provided."):
        super().__init__(message, code="UNAUTHENTICATED")


class TokenInvalidOrExpiredError(CredentialException):
    """Raised when a presented token fails verification."""

    def __init__(self, message: str = "Invalid or expired token.", reason=None):
        super().__init__(message, code="TOKEN_INVALID_OR_EXPIRED")
        self.reason = reason
