"""Textbook RSA over small primes, for teaching purposes.

Provides key-pair generation over small primes, per-character encryption and decryption of ASCII text, and a
round-trip self-check of key pairs. No padding, no constant-time arithmetic: never use this to protect anything.

Typical usage example:

    kp = generate_key_pair()
    c = encrypt("Hi there!", kp.public_key)
    r = decrypt(c, kp.private_key)
    assert validate_keys(kp.public_key, kp.private_key)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from textbookrsa.errors import CiphertextFormatError
from textbookrsa.errors import CiphertextOutOfRange
from textbookrsa.errors import DecodedNotAscii
from textbookrsa.errors import KeyTooSmall
from textbookrsa.errors import NotInvertible
from textbookrsa.errors import PlaintextOutOfRange
from textbookrsa.errors import RangeExhausted
from textbookrsa.errors import RSAError
from textbookrsa.keygen import generate_key_pair
from textbookrsa.keygen import KeyPair
from textbookrsa.keygen import PrivateKey
from textbookrsa.keygen import PublicKey
from textbookrsa.rsa import decrypt
from textbookrsa.rsa import encrypt
from textbookrsa.rsa import format_ciphertext
from textbookrsa.rsa import parse_ciphertext
from textbookrsa.rsa import validate_keys

__version__ = "0.1.0"
__all__ = [
    "KeyPair",
    "PublicKey",
    "PrivateKey",
    "generate_key_pair",
    "encrypt",
    "decrypt",
    "validate_keys",
    "format_ciphertext",
    "parse_ciphertext",
    "RSAError",
    "RangeExhausted",
    "KeyTooSmall",
    "NotInvertible",
    "PlaintextOutOfRange",
    "CiphertextOutOfRange",
    "DecodedNotAscii",
    "CiphertextFormatError",
]
