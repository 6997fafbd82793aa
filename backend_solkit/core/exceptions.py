"""
Application-level exceptions.

Every error the core raises is a SolkitError carrying a human-readable message
and the HTTP status the API layer should answer with. Request validation
failures derive from RequestValidationFailed; lower layers (codec, key
handling, instruction encoding) have their own types.
"""

from __future__ import annotations

ZERO_AMOUNT_MESSAGE = "Amount must be greater than 0"


class SolkitError(Exception):
    """Base class for all client-facing errors."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class RequestValidationFailed(SolkitError):
    """A request field was missing or could not be parsed."""

    def __init__(self, message: str | None = None, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class MissingField(RequestValidationFailed):
    default_message = "Missing required fields"


class InvalidIdentifier(RequestValidationFailed):
    default_message = "Invalid address"


class InvalidAmount(RequestValidationFailed):
    default_message = "Invalid amount"


class InvalidSecretEncoding(RequestValidationFailed):
    default_message = "Invalid secret key format"


class InvalidSignatureEncoding(RequestValidationFailed):
    default_message = "Invalid signature format"


class DecodeError(SolkitError, ValueError):
    """Text is not valid base58, or decodes to the wrong length."""

    default_message = "Invalid base58 string"


class InvalidKeyError(SolkitError, ValueError):
    """Secret bytes do not form a valid ed25519 keypair."""

    default_message = "Invalid keypair bytes"


class KeyGenerationError(SolkitError):
    default_message = "Failed to generate keypair"


class InstructionError(SolkitError):
    """The protocol encoding rejected the instruction parameters."""

    default_message = "Instruction parameters rejected"


InstructionEncodingError = InstructionError
