"""Failure kinds raised by the textbook RSA core.

Every core failure derives from `RSAError` and from `ValueError`, so callers can either catch the precise kind or
treat them as bad numeric input like the rest of the package does.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSAError(Exception):
    """Base class for all textbook RSA core failures."""


class RangeExhausted(RSAError, ValueError):
    """No usable prime is available in the configured sampling interval."""


class KeyTooSmall(RSAError, ValueError):
    """The generated modulus cannot hold every code of the target alphabet."""


class NotInvertible(RSAError, ValueError):
    """The requested modular inverse does not exist."""


class PlaintextOutOfRange(RSAError, ValueError):
    """A plaintext character code is not 7-bit ASCII or does not fit below the modulus."""


class CiphertextOutOfRange(RSAError, ValueError):
    """A ciphertext value is negative or not below the modulus."""


class DecodedNotAscii(RSAError, ValueError):
    """A decrypted value falls outside of 7-bit ASCII."""


class CiphertextFormatError(ValueError):
    """The textual ciphertext representation could not be parsed.

    Kept apart from `RSAError` as it describes malformed input text, not a failure of the RSA arithmetic.
    """
