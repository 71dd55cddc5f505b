# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ptypes

"""
Base64urlUInt: an unsigned big-endian integer carried as unpadded base64url text (RFC7518 section 2).
"""

import binascii
import re
from typing import Any

from authlib.common.encoding import to_bytes, to_unicode, urlsafe_b64decode, urlsafe_b64encode
from pydantic import ConfigDict, RootModel, ValidationError, field_serializer, field_validator

from coreason_ptypes.exceptions import InvalidBase64Error
from coreason_ptypes.utils.logger import logger

_BASE64URL = re.compile(r"[A-Za-z0-9\-_]*={0,2}")


def decode_base64url(text: str) -> bytes:
    """
    Decodes base64url text, with or without padding.

    Args:
        text: The base64url text (RFC4648 section 5 alphabet).

    Returns:
        The decoded bytes.

    Raises:
        InvalidBase64Error: If the text uses characters outside the alphabet,
            has malformed padding or an impossible length, or its final
            symbol carries non-zero unused bits.
    """
    if not _BASE64URL.fullmatch(text):
        raise InvalidBase64Error("Value is not a valid base64url encoding")

    body = text.rstrip("=")
    padding = len(text) - len(body)
    if len(body) % 4 == 1:
        raise InvalidBase64Error(f"Invalid base64url length: {len(body)}")
    if padding and padding != -len(body) % 4:
        raise InvalidBase64Error("Invalid base64url padding")

    try:
        data = urlsafe_b64decode(to_bytes(body, charset="ascii"))
    except binascii.Error as e:  # pragma: no cover
        raise InvalidBase64Error(f"Invalid base64url encoding: {e}") from e

    # Text whose last symbol has non-zero unused bits would not re-encode to itself
    if urlsafe_b64encode(data) != to_bytes(body, charset="ascii"):
        raise InvalidBase64Error("Invalid base64url encoding: non-zero trailing bits")
    return data


def encode_base64url(data: bytes) -> str:
    """Encodes bytes as base64url text without padding."""
    return to_unicode(urlsafe_b64encode(data), charset="ascii")


class Base64urlUInt(RootModel[bytes]):
    """
    A byte string holding an unsigned big-endian integer.

    Constructed from bytes, the bytes are stored as given. Constructed from
    text (or read from JSON), the text is base64url-decoded. The stored bytes
    are never canonicalized, so equality is byte-wise and `is_canonical()`
    reports whether the bytes are the minimal form. Serializes to unpadded
    base64url text.
    """

    model_config = ConfigDict(frozen=True)

    root: bytes

    @field_validator("root", mode="before")
    @classmethod
    def decode_text(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        try:
            data = decode_base64url(v)
        except InvalidBase64Error as e:
            logger.debug(f"Rejected Base64urlUInt text: {e}")
            raise
        if data[:1] == b"\x00" and len(data) > 1:
            logger.debug("Decoded a non-canonical Base64urlUInt; keeping the bytes verbatim")
        return data

    @field_serializer("root", when_used="always")
    def encode_text(self, v: bytes) -> str:
        return encode_base64url(v)

    @classmethod
    def from_text(cls, text: str) -> "Base64urlUInt":
        """
        Creates a Base64urlUInt from base64url text.

        Raises:
            InvalidBase64Error: If the text is not valid base64url.
        """
        if not isinstance(text, str):
            raise InvalidBase64Error(f"Expected str, got {type(text).__name__}")
        try:
            value = cls(text)
        except ValidationError as e:
            reason = e.errors()[0]["msg"].removeprefix("Value error, ")
            raise InvalidBase64Error(reason) from e
        return value

    @classmethod
    def from_int(cls, number: int) -> "Base64urlUInt":
        """
        Creates the minimal big-endian form of a non-negative integer.
        Zero is the single byte 0x00.

        Raises:
            ValueError: If the number is negative.
        """
        if number < 0:
            raise ValueError(f"Base64urlUInt cannot hold a negative number: {number}")
        length = max(1, (number.bit_length() + 7) // 8)
        return cls(number.to_bytes(length, "big"))

    @property
    def data(self) -> bytes:
        return self.root

    def to_int(self) -> int:
        return int.from_bytes(self.root, "big")

    def to_text(self) -> str:
        return encode_base64url(self.root)

    def is_canonical(self) -> bool:
        """True if the bytes carry no redundant leading zero byte and are not empty."""
        if not self.root:
            return False
        return self.root[0] != 0 or len(self.root) == 1

    def __bytes__(self) -> bytes:
        return self.root

    def __repr__(self) -> str:
        # Typically key material; never print the payload
        return f"Base64urlUInt(<{len(self.root)} bytes>)"

    def __str__(self) -> str:
        return self.__repr__()
