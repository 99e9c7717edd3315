"""
Custom exceptions for the Paillier key material.
"""

from tno.mpc.encryption_schemes.templates import SerializationError


class PaillierKeyConstructionError(ValueError):
    """
    Raised when key parameters do not form a valid Paillier key.
    """


class PaillierDecodingError(SerializationError):
    """
    Raised when a serialized key misses a field or contains a field that can not be decoded.
    """


class PaillierPreconditionError(ValueError):
    """
    Raised when a plaintext, randomness or ciphertext lies outside of its valid domain.
    """
