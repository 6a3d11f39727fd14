"""
Errors raised by the encryption engine.

Callers of `SecureData` never see these: the facade turns them into
failed `OperationResult` records. They surface only when the lower-level
functions are used directly.
"""


class VessotError(Exception):
    """Base class for every error raised by this package."""


class CryptKeyError(VessotError):
    """The encryption key could not be loaded."""


class KeyMissingError(CryptKeyError):
    pass


class KeyEncodingError(CryptKeyError):
    pass


class CryptoError(VessotError):
    """A single seal or open operation failed."""


class BadEncodingError(CryptoError):
    pass


class TruncatedError(CryptoError):
    pass


class AuthenticationFailedError(CryptoError):
    pass


class RandomUnavailableError(CryptoError):
    pass


class RecursionLimitExceeded(VessotError):
    """A value tree is nested too deeply or a container is too wide."""


class UnsupportedValueError(VessotError):
    """A leaf value has no JSON representation."""
