"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


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


class LicenseException(DomainException):
    """Base exception for license-related errors."""

    pass


class LicenseStoreCorruptedError(LicenseException):
    """Raised when the license record file cannot be parsed."""

    def __init__(self, message: str = "License file is corrupted"):
        super().__init__(message, code="STORE_CORRUPTED")


class ActivationException(DomainException):
    """Base exception for activation-related errors."""

    pass


class MissingLicenseParametersError(ActivationException):
    """Raised when email or order ID is missing from an activation request."""

    def __init__(
        self,
        message: str = 'Missing license registration parameters "email" or "orderId"',
    ):
        super().__init__(message, code="MISSING_PARAMETERS")


class LicenseAlreadyActivatedError(ActivationException):
    """Raised when a valid license is already active for the package."""

    def __init__(self, message: str = "License key already activated"):
        super().__init__(message, code="ALREADY_ACTIVATED")


class LicensePackageMismatchError(ActivationException):
    """Raised when the authority issued a license for another package."""

    def __init__(self, message: str = "License key not valid for this plugin"):
        super().__init__(message, code="PACKAGE_MISMATCH")


class LicenseVersionIncompatibleError(ActivationException):
    """Raised when the installed plugin version is not covered by the license."""

    def __init__(
        self,
        message: str = "License key not valid for this plugin version, please upgrade your license",
    ):
        super().__init__(message, code="VERSION_INCOMPATIBLE")


class LicensingAuthorityError(ActivationException):
    """
    Raised when the remote licensing authority rejects or fails a request.

    The message is the authority's own, passed through unchanged.
    """

    def __init__(self, message: str = "Licensing authority request failed", status_code: int = None):
        super().__init__(message, code="REMOTE_AUTHORITY_FAILURE")
        self.status_code = status_code
