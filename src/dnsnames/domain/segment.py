"""Label validation and the validated :class:`Segment` value type.

A segment is the text between two dots of a domain name. Rules:
- 1 to 63 characters, ASCII case-folded to lowercase.
- Letters, digits and ``-``, plus the standalone markers ``*`` (wildcard)
  and ``@`` (origin).
- No leading or trailing hyphen, and no ``--`` at positions 3-4.

INVARIANT: A Segment instance is always valid. Validation runs in the
constructor, so there is no way to hold an unchecked label.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, overload

from dnsnames.domain._schema import text_schema
from dnsnames.domain.errors import SegmentError, SegmentErrorKind

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import core_schema

    from dnsnames.domain.names import (
        DomainName,
        FullyQualifiedDomainName,
        PartiallyQualifiedDomainName,
    )

MAX_SEGMENT_LENGTH = 63
WILDCARD = "*"
ORIGIN = "@"
VALID_CHARACTERS = frozenset("-0123456789abcdefghijklmnopqrstuvwxyz")
SEGMENT_CHARACTERS = VALID_CHARACTERS | {WILDCARD, ORIGIN}

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold_case(text: str) -> str:
    """Lowercase ASCII letters only, leaving any other character untouched."""
    return text.translate(_ASCII_FOLD)


def check_label(value: str, allowed: frozenset[str]) -> None:
    """Apply the checks shared by name and pattern segments.

    Checks run in a fixed order and the first failure wins: emptiness,
    length, character set, then the three hyphen rules.

    Raises:
        SegmentError: If *value* breaks any rule.
    """
    if not value:
        raise SegmentError(SegmentErrorKind.EMPTY_STRING)

    if len(value) > MAX_SEGMENT_LENGTH:
        raise SegmentError(SegmentErrorKind.TOO_LONG, length=len(value))

    for character in value:
        if character not in allowed:
            raise SegmentError(SegmentErrorKind.INVALID_CHARACTER, character=character)

    if value.startswith("-"):
        raise SegmentError(SegmentErrorKind.ILLEGAL_HYPHEN, position=1)

    if value.endswith("-"):
        raise SegmentError(SegmentErrorKind.ILLEGAL_HYPHEN, position=len(value))

    # Reserved for ASCII-compatible encoding prefixes such as "xn--".
    if value[2:4] == "--":
        raise SegmentError(SegmentErrorKind.ILLEGAL_HYPHEN, position=3)


@dataclass(frozen=True, order=True, repr=False)
class Segment:
    """A single validated label of a domain name."""

    value: str

    def __post_init__(self) -> None:
        value = fold_case(self.value)
        check_label(value, SEGMENT_CHARACTERS)
        if len(value) > 1:
            if WILDCARD in value:
                raise SegmentError(SegmentErrorKind.NON_STANDALONE_WILDCARD)
            if ORIGIN in value:
                raise SegmentError(SegmentErrorKind.NON_STANDALONE_ORIGIN)
        object.__setattr__(self, "value", value)

    @classmethod
    def parse(cls, text: str) -> Segment:
        """Validate *text* as a label. Raises :class:`SegmentError`."""
        return cls(text)

    @property
    def is_wildcard(self) -> bool:
        return self.value == WILDCARD

    @property
    def is_origin(self) -> bool:
        return self.value == ORIGIN

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Segment({self.value!r})"

    @overload
    def __add__(self, other: FullyQualifiedDomainName) -> FullyQualifiedDomainName: ...

    @overload
    def __add__(
        self, other: PartiallyQualifiedDomainName
    ) -> PartiallyQualifiedDomainName: ...

    @overload
    def __add__(self, other: DomainName) -> DomainName: ...

    def __add__(self, other: Any) -> Any:
        """Prepend this segment to a name as its new most-specific label.

        The result is validated like any other name, so prepending to a
        name that already starts with a wildcard fails.
        """
        from dnsnames.domain.names import (
            DomainName,
            FullyQualifiedDomainName,
            PartiallyQualifiedDomainName,
        )

        match other:
            case FullyQualifiedDomainName() | PartiallyQualifiedDomainName():
                return type(other)((self, *other.segments))
            case DomainName():
                return DomainName(self + other.name)
        return NotImplemented

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return text_schema(cls, cls.parse)
