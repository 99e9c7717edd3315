"""
Serialization of Paillier keys to and from mappings of field names to bytes.

Every integer field is stored as its big-endian, minimal-length, unsigned byte representation,
where zero is represented by the empty byte string. A serialized secret key contains the
serialized public key under the field "pk".
"""

from __future__ import annotations

import typing
from collections.abc import Mapping
from functools import singledispatch
from typing import Any, TypedDict, Union

from tno.mpc.encryption_schemes.paillier_keys.exceptions import PaillierDecodingError
from tno.mpc.encryption_schemes.paillier_keys.paillier import (
    PaillierPrivateKey,
    PaillierPublicKey,
)


class SerializedPaillierPublicKey(TypedDict):
    n: bytes
    n2: bytes
    g: bytes


# "lambda" is a keyword, hence the functional syntax
SerializedPaillierPrivateKey = TypedDict(
    "SerializedPaillierPrivateKey",
    {
        "lambda": bytes,
        "mu": bytes,
        "p": bytes,
        "q": bytes,
        "pk": SerializedPaillierPublicKey,
    },
)

SerializedPaillierKey = Union[SerializedPaillierPublicKey, SerializedPaillierPrivateKey]


def int_to_bytes(value: typing.SupportsInt) -> bytes:
    """
    Convert a non-negative integer to its big-endian, minimal-length byte representation.

    :param value: Integer to convert.
    :raise ValueError: When the integer is negative.
    :return: Byte representation of the integer, empty for zero.
    """
    value_int = int(value)
    if value_int < 0:
        raise ValueError(f"Only non-negative integers can be encoded, received {value_int}.")
    return value_int.to_bytes((value_int.bit_length() + 7) // 8, "big")


def bytes_to_int(data: bytes | bytearray | memoryview) -> int:
    """
    Convert a big-endian unsigned byte representation to an integer.

    :param data: Bytes to convert.
    :return: Integer represented by the bytes, zero for the empty byte string.
    """
    return int.from_bytes(data, "big")


@singledispatch
def serialize(key: Any) -> SerializedPaillierKey:
    """
    Serialize a Paillier key.

    :param key: PaillierPublicKey or PaillierPrivateKey to serialize.
    :raise TypeError: When the object is not a Paillier key.
    :return: Serialized key.
    """
    raise TypeError(f"Can not serialize object of type {type(key)}.")


@serialize.register
def serialize_public_key(key: PaillierPublicKey) -> SerializedPaillierPublicKey:
    """
    Serialize a Paillier public key.

    :param key: Public key to serialize.
    :return: Serialized public key with fields "n", "n2" and "g".
    """
    return {
        "n": int_to_bytes(key.n),
        "n2": int_to_bytes(key.n_squared),
        "g": int_to_bytes(key.g),
    }


@serialize.register
def serialize_private_key(key: PaillierPrivateKey) -> SerializedPaillierPrivateKey:
    """
    Serialize a Paillier secret key, including its public key.

    :param key: Secret key to serialize.
    :return: Serialized secret key with fields "lambda", "mu", "p", "q" and "pk".
    """
    return {
        "lambda": int_to_bytes(key.lambda_),
        "mu": int_to_bytes(key.mu),
        "p": int_to_bytes(key.p),
        "q": int_to_bytes(key.q),
        "pk": serialize_public_key(key.public_key),
    }


def deserialize_public_key(obj: Mapping[str, Any]) -> PaillierPublicKey:
    """
    Deserialize a Paillier public key.

    :param obj: Serialized public key.
    :raise PaillierDecodingError: When a field is missing or can not be decoded.
    :raise PaillierKeyConstructionError: When the decoded values do not form a valid key.
    :return: Deserialized PaillierPublicKey.
    """
    _check_mapping(obj, "public key")
    return PaillierPublicKey(
        n=_decode_field(obj, "n"),
        n_squared=_decode_field(obj, "n2"),
        g=_decode_field(obj, "g"),
    )


def deserialize_private_key(obj: Mapping[str, Any]) -> PaillierPrivateKey:
    """
    Deserialize a Paillier secret key, including its public key.

    :param obj: Serialized secret key.
    :raise PaillierDecodingError: When a field is missing or can not be decoded.
    :raise PaillierKeyConstructionError: When the decoded values do not form a valid key.
    :return: Deserialized PaillierPrivateKey.
    """
    _check_mapping(obj, "secret key")
    lambda_ = _decode_field(obj, "lambda")
    mu = _decode_field(obj, "mu")
    p = _decode_field(obj, "p")
    q = _decode_field(obj, "q")
    if "pk" not in obj:
        raise PaillierDecodingError("Serialized secret key misses the field 'pk'.")
    public_key = deserialize_public_key(obj["pk"])
    return PaillierPrivateKey(lambda_=lambda_, mu=mu, p=p, q=q, public_key=public_key)


def deserialize(obj: Mapping[str, Any]) -> PaillierPublicKey | PaillierPrivateKey:
    """
    Deserialize a Paillier key. Serialized secret keys are recognised by the field "pk".

    :param obj: Serialized public or secret key.
    :raise PaillierDecodingError: When a field is missing or can not be decoded.
    :return: Deserialized PaillierPublicKey or PaillierPrivateKey.
    """
    _check_mapping(obj, "key")
    if "pk" in obj:
        return deserialize_private_key(obj)
    return deserialize_public_key(obj)


def _check_mapping(obj: Any, description: str) -> None:
    if not isinstance(obj, Mapping):
        raise PaillierDecodingError(
            f"Serialized {description} should be a mapping, received {type(obj)}."
        )


def _decode_field(obj: Mapping[str, Any], field: str) -> int:
    try:
        data = obj[field]
    except KeyError as exc:
        raise PaillierDecodingError(
            f"Serialized key misses the field '{field}'."
        ) from exc
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise PaillierDecodingError(
            f"Field '{field}' should contain bytes, received {type(data)}."
        )
    return bytes_to_int(data)
