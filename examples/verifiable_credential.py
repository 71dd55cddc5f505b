# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ptypes

import json

from pydantic import BaseModel, ConfigDict, Field

from coreason_ptypes import Base64urlUInt, ObjectWithId, OneOrMany, StringOrUri, Uri


class VerifiableCredential(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    context: OneOrMany[str] = Field(alias="@context")
    type: OneOrMany[str]
    issuer: StringOrUri
    credential_subject: ObjectWithId = Field(alias="credentialSubject")


class RsaPublicJwk(BaseModel):
    kty: str
    kid: StringOrUri
    n: Base64urlUInt
    e: Base64urlUInt


def main() -> None:
    """
    Reads a verifiable credential and a JWK, inspects the polymorphic fields
    and writes both back in the shape they were read from.
    """
    print(">>> Verifiable credential")
    raw_credential = {
        "@context": ["https://www.w3.org/2018/credentials/v1", "https://www.w3.org/2018/credentials/examples/v1"],
        "type": ["VerifiableCredential", "UniversityDegreeCredential"],
        "issuer": "https://example.edu/issuers/14",
        "credentialSubject": {
            "id": "did:example:ebfeb1f712ebc6f1c276e12ec21",
            "degree": {"type": "BachelorDegree", "name": "Bachelor of Science and Arts"},
        },
    }
    credential = VerifiableCredential.model_validate_json(json.dumps(raw_credential))
    print(f"    types: {credential.type.to_list()}")
    print(f"    issuer is a URI: {credential.issuer.is_uri()} ({credential.issuer.as_uri().components.netloc})")
    print(f"    subject: {credential.credential_subject.id}")
    assert json.loads(credential.model_dump_json(by_alias=True)) == raw_credential

    print(">>> RSA public key")
    jwk = RsaPublicJwk.model_validate_json('{"kty": "RSA", "kid": "key-1", "n": "0vx7agoebGcQSuuPiLJXZptN", "e": "AQAB"}')
    print(f"    kid is a plain string: {jwk.kid.is_string()}")
    print(f"    modulus: {jwk.n}, {jwk.n.to_int().bit_length()} bits")
    print(f"    exponent: {jwk.e.to_int()}")

    print(">>> Rejected input")
    try:
        Uri.parse("not a uri")
    except ValueError as e:
        print(f"    {type(e).__name__}: {e}")


if __name__ == "__main__":
    main()
