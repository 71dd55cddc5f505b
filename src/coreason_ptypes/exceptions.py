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
Custom exceptions for the coreason-ptypes package.
"""


class PtypesError(Exception):
    """Base exception for all coreason-ptypes errors."""


class FormatError(PtypesError, ValueError):
    """
    Raised when input text or bytes do not satisfy a type's grammar.
    Subclasses ValueError so pydantic reports it as a ValidationError inside models.
    """


class InvalidUriError(FormatError):
    """Raised when a value is not a syntactically valid RFC3986 URI."""


class InvalidBase64Error(FormatError):
    """Raised when a value is not valid base64url text."""


class VariantMismatchError(PtypesError):
    """Raised when the payload of an inactive variant is requested."""
