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
OneOrMany: a JSON property that holds either a single value or an array of values.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, List, Optional, TypeVar, Union

from pydantic import ConfigDict, Field, RootModel

from coreason_ptypes.exceptions import VariantMismatchError

T = TypeVar("T")


class OneOrMany(RootModel[Union[List[T], T]], Generic[T]):
    """
    Either exactly one `T` (One) or a list of `T` (Many).

    A JSON array, including an empty one, is always read as Many and any
    other value as One, so `T` must not itself be an array type. The
    variant is kept as read: One(x) and Many([x]) are different values and
    serialize to different JSON.

    Example:
        >>> OneOrMany[str].model_validate_json('"VerifiableCredential"').is_one()
        True
        >>> OneOrMany[str](["VerifiableCredential", "UniversityDegreeCredential"]).model_dump_json()
        '["VerifiableCredential","UniversityDegreeCredential"]'
    """

    model_config = ConfigDict(frozen=True)

    root: Union[List[T], T] = Field(union_mode="left_to_right")

    @classmethod
    def one(cls, value: T) -> "OneOrMany[T]":
        """Creates the One variant."""
        if isinstance(value, (list, tuple)):
            raise TypeError("A sequence payload is always read as Many; use OneOrMany.many() instead.")
        return cls(value)

    @classmethod
    def many(cls, values: Iterable[T]) -> "OneOrMany[T]":
        """Creates the Many variant from any iterable, including an empty one."""
        return cls(list(values))

    def is_one(self) -> bool:
        return not isinstance(self.root, list)

    def is_many(self) -> bool:
        return isinstance(self.root, list)

    def as_one(self) -> T:
        """
        Returns the single value of the One variant.

        Raises:
            VariantMismatchError: If this is the Many variant.
        """
        if isinstance(self.root, list):
            raise VariantMismatchError("OneOrMany holds Many values, not One.")
        return self.root

    def as_many(self) -> List[T]:
        """
        Returns a copy of the values of the Many variant.

        Raises:
            VariantMismatchError: If this is the One variant.
        """
        if not isinstance(self.root, list):
            raise VariantMismatchError("OneOrMany holds One value, not Many.")
        return list(self.root)

    def to_list(self) -> List[T]:
        """Returns the held value(s) as a new list, whatever the variant."""
        return list(self)

    def first(self) -> Optional[T]:
        """Returns the One value or the first Many value; None for an empty Many."""
        if not isinstance(self.root, list):
            return self.root
        return self.root[0] if self.root else None

    def to_single(self) -> Optional[T]:
        """Returns the element if exactly one is held, otherwise None."""
        if not isinstance(self.root, list):
            return self.root
        return self.root[0] if len(self.root) == 1 else None

    def any(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(value) for value in self)

    def contains(self, value: Any) -> bool:
        return value in self

    def is_empty(self) -> bool:
        return isinstance(self.root, list) and not self.root

    def __len__(self) -> int:
        return len(self.root) if isinstance(self.root, list) else 1

    def __contains__(self, value: Any) -> bool:
        if isinstance(self.root, list):
            return value in self.root
        return bool(self.root == value)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        if isinstance(self.root, list):
            return iter(self.root)
        return iter((self.root,))
