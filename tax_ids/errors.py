"""Exceptions raised while validating and verifying tax ids.

Validation errors are raised offline, before any registry is contacted.
Verification errors are raised when a registry call fails or answers with
something the adapter does not know how to interpret. Known registry failure
modes are not errors: they come back as an ``Unavailable`` verification status.
"""


class TaxIdError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(TaxIdError):
    """Settings that cannot be turned into a working setup."""


class ValidationError(TaxIdError):
    """The tax id was rejected by the local syntax checks."""


class InvalidLength(ValidationError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Tax id {value!r} is too short to carry a country code")
        self.value = value


class UnsupportedCountryCode(ValidationError):
    def __init__(self, country_code: str) -> None:
        super().__init__(f"Country code {country_code} is not supported")
        self.country_code = country_code


class InvalidSyntax(ValidationError):
    def __init__(self, value: str | None = None) -> None:
        super().__init__("Invalid syntax")
        self.value = value


class VerificationError(TaxIdError):
    """The registry could not give an answer this package understands."""


class HttpError(VerificationError):
    """Transport failure; the original exception is chained as ``__cause__``."""


class XmlParsingError(VerificationError):
    pass


class JsonParsingError(VerificationError):
    pass


class UnexpectedResponse(VerificationError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnexpectedStatusCode(VerificationError):
    def __init__(self, status: int) -> None:
        super().__init__(f"Unexpected status code: {status}")
        self.status = status
