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
StringOrUri: the JOSE `StringOrURI` type (RFC7519 section 2).
"""

from typing import Union

from pydantic import ConfigDict, Field, RootModel, field_validator

from coreason_ptypes.exceptions import VariantMismatchError
from coreason_ptypes.uri import Uri
from coreason_ptypes.utils.logger import logger


class StringOrUri(RootModel[Union[Uri, str]]):
    """
    A plain string or a Uri.

    Text that is a valid URI is read as a Uri, anything else as a plain
    string, so reading never fails. Both variants serialize to the bare
    text. Equality and hashing use the text only: a Uri and a plain string
    with the same text are equal.
    """

    model_config = ConfigDict(frozen=True)

    root: Union[Uri, str] = Field(union_mode="left_to_right")

    @field_validator("root", mode="after")
    @classmethod
    def note_fallback(cls, v: Union[Uri, str]) -> Union[Uri, str]:
        if not isinstance(v, Uri):
            logger.debug("StringOrUri value is not a URI; keeping it as a plain string")
        return v

    @classmethod
    def parse(cls, text: str) -> "StringOrUri":
        """Reads text as a Uri when it is one, otherwise as a plain string."""
        return cls(text)

    @classmethod
    def string(cls, text: str) -> "StringOrUri":
        """Creates the plain string variant without attempting URI validation."""
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        return cls.model_construct(text)

    @classmethod
    def uri(cls, uri: Uri) -> "StringOrUri":
        """Creates the Uri variant."""
        if not isinstance(uri, Uri):
            raise TypeError(f"Expected Uri, got {type(uri).__name__}")
        return cls.model_construct(uri)

    @property
    def text(self) -> str:
        """The underlying text of either variant."""
        return str(self.root)

    def is_string(self) -> bool:
        return not isinstance(self.root, Uri)

    def is_uri(self) -> bool:
        return isinstance(self.root, Uri)

    def as_string(self) -> str:
        """
        Returns the plain string.

        Raises:
            VariantMismatchError: If this is the Uri variant.
        """
        if isinstance(self.root, Uri):
            raise VariantMismatchError("StringOrUri holds a Uri, not a plain string.")
        return self.root

    def as_uri(self) -> Uri:
        """
        Returns the Uri.

        Raises:
            VariantMismatchError: If this is the plain string variant.
        """
        if not isinstance(self.root, Uri):
            raise VariantMismatchError("StringOrUri holds a plain string, not a Uri.")
        return self.root

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringOrUri):
            return NotImplemented
        return self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text
