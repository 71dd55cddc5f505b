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
ObjectWithId: a JSON-LD node object identified by `id`, with any other members kept as-is.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from coreason_ptypes.string_or_uri import StringOrUri


class ObjectWithId(BaseModel):
    """
    A JSON object with a mandatory `id` member, such as a verifiable
    credential `issuer` or `credentialSubject`.

    Members other than `id` are not interpreted; they are kept and
    serialized back unchanged.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        json_schema_extra={
            "example": {
                "id": "did:example:ebfeb1f712ebc6f1c276e12ec21",
                "degree": {"type": "BachelorDegree", "name": "Bachelor of Science and Arts"},
            }
        },
    )

    id: StringOrUri = Field(..., description="Identifier of the node, a URI or an opaque string.")

    def get(self, name: str, default: Any = None) -> Any:
        """Returns the value of a member other than `id`, or the default."""
        return (self.model_extra or {}).get(name, default)
