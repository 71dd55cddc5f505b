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
Uri: an immutable, syntactically valid RFC3986 URI that keeps its exact source text.
"""

import ipaddress
import re
from functools import total_ordering
from urllib.parse import SplitResult

from pydantic import ConfigDict, RootModel, ValidationError, field_validator

from coreason_ptypes.exceptions import InvalidUriError
from coreason_ptypes.utils.logger import logger

# RFC3986 Appendix B
_URI_PARTS = re.compile(r"^(([^:/?#]+):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?$", re.DOTALL)

_PCT = r"%[0-9A-Fa-f]{2}"
_UNRESERVED = r"A-Za-z0-9\-._~"
_SUB_DELIMS = r"!$&'()*+,;="

_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+\-.]*")
_USERINFO = re.compile(rf"(?:[{_UNRESERVED}{_SUB_DELIMS}:]|{_PCT})*")
_REG_NAME = re.compile(rf"(?:[{_UNRESERVED}{_SUB_DELIMS}]|{_PCT})*")
_IPV_FUTURE = re.compile(rf"[vV][0-9A-Fa-f]+\.[{_UNRESERVED}{_SUB_DELIMS}:]+")
_PORT = re.compile(r"[0-9]*")
_PATH = re.compile(rf"(?:[{_UNRESERVED}{_SUB_DELIMS}:@/]|{_PCT})*")
_QUERY = re.compile(rf"(?:[{_UNRESERVED}{_SUB_DELIMS}:@/?]|{_PCT})*")


def _check_ip_literal(literal: str) -> None:
    if _IPV_FUTURE.fullmatch(literal):
        return
    # Zone identifiers are not part of the RFC3986 grammar
    if "%" in literal:
        raise InvalidUriError(f"Invalid IP literal: [{literal}]")
    try:
        ipaddress.IPv6Address(literal)
    except ValueError as e:
        raise InvalidUriError(f"Invalid IP literal: [{literal}]") from e


def _check_authority(authority: str) -> None:
    userinfo, at, host_port = authority.rpartition("@")
    if at and not _USERINFO.fullmatch(userinfo):
        raise InvalidUriError(f"Invalid userinfo: {userinfo!r}")

    if host_port.startswith("["):
        literal, bracket, rest = host_port[1:].partition("]")
        if not bracket:
            raise InvalidUriError(f"Unterminated IP literal: {host_port!r}")
        _check_ip_literal(literal)
        if rest and not rest.startswith(":"):
            raise InvalidUriError(f"Unexpected characters after IP literal: {rest!r}")
        port = rest[1:]
    else:
        host, _, port = host_port.partition(":")
        if not _REG_NAME.fullmatch(host):
            raise InvalidUriError(f"Invalid host: {host!r}")

    if not _PORT.fullmatch(port):
        raise InvalidUriError(f"Invalid port: {port!r}")


def check_uri(text: str) -> str:
    """
    Validates text against the RFC3986 `URI` production.

    The text is decomposed as in RFC3986 Appendix B and each component is
    checked against its character set. Relative references are rejected.

    Args:
        text: The candidate URI.

    Returns:
        The unchanged text.

    Raises:
        InvalidUriError: If the text is not a syntactically valid absolute URI.
    """
    match = _URI_PARTS.fullmatch(text)
    if match is None:  # pragma: no cover
        raise InvalidUriError(f"Unparseable URI: {text!r}")

    scheme, authority, path, query, fragment = match.group(2, 4, 5, 7, 9)

    if scheme is None:
        raise InvalidUriError(f"Missing scheme: {text!r}")
    if not _SCHEME.fullmatch(scheme):
        raise InvalidUriError(f"Invalid scheme: {scheme!r}")
    if authority is not None:
        _check_authority(authority)
    if not _PATH.fullmatch(path):
        raise InvalidUriError(f"Invalid path: {path!r}")
    if query is not None and not _QUERY.fullmatch(query):
        raise InvalidUriError(f"Invalid query: {query!r}")
    if fragment is not None and not _QUERY.fullmatch(fragment):
        raise InvalidUriError(f"Invalid fragment: {fragment!r}")
    return text


@total_ordering
class Uri(RootModel[str]):
    """
    A syntactically valid URI.

    The source text is stored verbatim and never normalized, so equality,
    ordering and hashing all operate on the exact text, and serialization
    returns it unchanged.
    """

    model_config = ConfigDict(frozen=True)

    root: str

    @field_validator("root")
    @classmethod
    def validate_syntax(cls, v: str) -> str:
        try:
            return check_uri(v)
        except InvalidUriError as e:
            logger.debug(f"Rejected URI: {e}")
            raise

    @classmethod
    def parse(cls, text: str) -> "Uri":
        """
        Creates a Uri from text.

        Raises:
            InvalidUriError: If the text is not a valid URI.
        """
        try:
            return cls(text)
        except ValidationError as e:
            reason = e.errors()[0]["msg"].removeprefix("Value error, ")
            raise InvalidUriError(reason) from e

    @classmethod
    def from_bytes(cls, data: bytes) -> "Uri":
        """
        Creates a Uri from UTF-8 encoded bytes.

        Raises:
            InvalidUriError: If the bytes are not UTF-8 or not a valid URI.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidUriError(f"Expected bytes, got {type(data).__name__}")
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidUriError(f"URI is not valid UTF-8: {e}") from e
        return cls.parse(text)

    @property
    def components(self) -> SplitResult:
        """The (scheme, netloc, path, query, fragment) decomposition of the URI."""
        match = _URI_PARTS.fullmatch(self.root)
        scheme, authority, path, query, fragment = match.group(2, 4, 5, 7, 9)  # type: ignore[union-attr]
        return SplitResult(scheme, authority or "", path, query or "", fragment or "")

    def __str__(self) -> str:
        return self.root

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Uri):
            return NotImplemented
        return self.root < other.root
