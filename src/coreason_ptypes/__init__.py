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
Value types for polymorphic fields of JSON-based specifications (JOSE, JSON-LD, verifiable credentials).
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .base64url_uint import Base64urlUInt
from .exceptions import FormatError, InvalidBase64Error, InvalidUriError, PtypesError, VariantMismatchError
from .object_with_id import ObjectWithId
from .one_or_many import OneOrMany
from .string_or_uri import StringOrUri
from .uri import Uri

__all__ = [
    "Base64urlUInt",
    "FormatError",
    "InvalidBase64Error",
    "InvalidUriError",
    "ObjectWithId",
    "OneOrMany",
    "PtypesError",
    "StringOrUri",
    "Uri",
    "VariantMismatchError",
]
