"""Fully and partially qualified domain names, and their tagged union.

Names hold their segments most-specific first, mirroring the text:
``www.example.org.`` is ``(www, example, org)`` anchored at the root.

- :class:`FullyQualifiedDomainName` (FQN): anchored at the root, text
  carries a trailing dot.
- :class:`PartiallyQualifiedDomainName` (PQN): relative to an unspecified
  ancestor, no trailing dot.
- :class:`DomainName`: either of the two, classified purely by the
  trailing dot.

Equality, ordering and hashing are the dataclass-derived structural ones
over the segment tuple, so every type can key a dict or a sorted set.

Algebra:
- ``fqn - fqn`` strips a root suffix and yields a PQN.
- ``pqn + pqn`` yields a PQN, ``pqn + fqn`` yields an FQN.
- ``segment + name`` prepends a label (see :class:`Segment`).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any, overload

from dnsnames.domain._schema import text_schema
from dnsnames.domain.errors import (
    CompositeNameError,
    FullyQualifiedDomainNameError,
    NameErrorKind,
    PartiallyQualifiedDomainNameError,
    SegmentError,
    SuffixMismatchError,
)
from dnsnames.domain.segment import Segment

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import core_schema

SEPARATOR = "."


def parse_segments(
    labels: Iterable[str], error: type[CompositeNameError]
) -> tuple[Segment, ...]:
    """Validate *labels* in textual order, wrapping the first failure in *error*."""
    segments: list[Segment] = []
    for index, label in enumerate(labels):
        try:
            segments.append(Segment(label))
        except SegmentError as exc:
            raise error(NameErrorKind.SEGMENT_ERROR, segment_error=exc, index=index) from exc
    return tuple(segments)


def _text_length(segments: tuple[Segment, ...]) -> int:
    """Length of the dot-joined segments, without any trailing separator."""
    if not segments:
        return 0
    return sum(len(segment) for segment in segments) + len(segments) - 1


def _has_non_leading_wildcard(segments: tuple[Segment, ...]) -> bool:
    return any(segment.is_wildcard for segment in segments[1:])


@dataclass(frozen=True, order=True, repr=False)
class FullyQualifiedDomainName:
    """A domain name anchored at the DNS root.

    INVARIANT: Only the first (most-specific) segment may be a wildcard.
    The root itself is the name with no segments and renders as ``.``.
    """

    segments: tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        if _has_non_leading_wildcard(segments):
            raise FullyQualifiedDomainNameError(NameErrorKind.NON_LEADING_WILDCARD)
        object.__setattr__(self, "segments", segments)

    @classmethod
    def root(cls) -> FullyQualifiedDomainName:
        return cls(())

    @classmethod
    def parse(cls, text: str) -> FullyQualifiedDomainName:
        """Parse *text*, which must end with the root separator.

        Raises:
            FullyQualifiedDomainNameError: If the trailing dot is missing, a
                segment is invalid, or a wildcard is not leading.

        Examples:
            >>> str(FullyQualifiedDomainName.parse("WWW.Example.org."))
            'www.example.org.'
        """
        if not text.endswith(SEPARATOR):
            raise FullyQualifiedDomainNameError(NameErrorKind.DOMAIN_IS_PARTIALLY_QUALIFIED)
        body = text[: -len(SEPARATOR)]
        if not body:
            return cls.root()
        return cls(parse_segments(body.split(SEPARATOR), FullyQualifiedDomainNameError))

    @property
    def is_root(self) -> bool:
        return not self.segments

    def is_subdomain_of(self, parent: FullyQualifiedDomainName) -> bool:
        """True if *parent*'s segments terminate this name's segments.

        Irreflexive: a name is never its own subdomain.
        """
        if len(parent.segments) >= len(self.segments):
            return False
        return self.segments[len(self.segments) - len(parent.segments) :] == parent.segments

    def parent(self) -> FullyQualifiedDomainName | None:
        """The name one level up, or None for the root."""
        if self.is_root:
            return None
        return FullyQualifiedDomainName(self.segments[1:])

    def __sub__(self, other: FullyQualifiedDomainName) -> PartiallyQualifiedDomainName:
        """Strip the root suffix *other* from this name.

        Segments are compared from the least-specific end. When *other* is
        exhausted first, the unconsumed leading segments form the result.

        Raises:
            SuffixMismatchError: If *other* is not a suffix of this name. The
                error carries this name unchanged.
        """
        if not isinstance(other, FullyQualifiedDomainName):
            return NotImplemented

        remaining = len(self.segments)
        for suffix_segment in reversed(other.segments):
            if remaining == 0 or self.segments[remaining - 1] != suffix_segment:
                raise SuffixMismatchError(self, other)
            remaining -= 1

        return PartiallyQualifiedDomainName(self.segments[:remaining])

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        """Textual length, trailing separator included."""
        return _text_length(self.segments) + len(SEPARATOR)

    def __str__(self) -> str:
        if self.is_root:
            return SEPARATOR
        return SEPARATOR.join(str(segment) for segment in self.segments) + SEPARATOR

    def __repr__(self) -> str:
        return f"FullyQualifiedDomainName({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return text_schema(cls, cls.parse)


@dataclass(frozen=True, order=True, repr=False)
class PartiallyQualifiedDomainName:
    """A domain name relative to some unspecified ancestor.

    INVARIANT: Only the first segment may be a wildcard, and only the last
    segment may be the origin marker ``@``.

    Parsing never yields an empty name, but subtracting a name from itself
    does; the empty name renders as the empty string.
    """

    segments: tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        if _has_non_leading_wildcard(segments):
            raise PartiallyQualifiedDomainNameError(NameErrorKind.NON_LEADING_WILDCARD)
        if any(segment.is_origin for segment in segments[:-1]):
            raise PartiallyQualifiedDomainNameError(
                NameErrorKind.ORIGIN_IN_NON_TERMINAL_SEGMENT
            )
        object.__setattr__(self, "segments", segments)

    @classmethod
    def parse(cls, text: str) -> PartiallyQualifiedDomainName:
        """Parse *text*, which must not end with a separator.

        Raises:
            PartiallyQualifiedDomainNameError: If the text is fully qualified,
                a segment is invalid, or a marker is misplaced.
        """
        if text.endswith(SEPARATOR):
            raise PartiallyQualifiedDomainNameError(NameErrorKind.DOMAIN_IS_FULLY_QUALIFIED)
        return cls(parse_segments(text.split(SEPARATOR), PartiallyQualifiedDomainNameError))

    @property
    def is_origin_relative(self) -> bool:
        """True if the name ends with the origin marker."""
        return bool(self.segments) and self.segments[-1].is_origin

    def with_origin(self, origin: FullyQualifiedDomainName) -> FullyQualifiedDomainName:
        """Anchor this name at *origin*, consuming a terminal ``@`` if present."""
        segments = self.segments[:-1] if self.is_origin_relative else self.segments
        return FullyQualifiedDomainName(segments + origin.segments)

    @overload
    def __add__(
        self, other: PartiallyQualifiedDomainName
    ) -> PartiallyQualifiedDomainName: ...

    @overload
    def __add__(self, other: FullyQualifiedDomainName) -> FullyQualifiedDomainName: ...

    def __add__(self, other: Any) -> Any:
        """Concatenate, this name first. The result type follows *other*.

        The combined segments are validated again, so an origin marker or
        wildcard that ends up in the middle is rejected.
        """
        if isinstance(other, PartiallyQualifiedDomainName | FullyQualifiedDomainName):
            return type(other)(self.segments + other.segments)
        return NotImplemented

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        """Textual length; there is no trailing separator."""
        return _text_length(self.segments)

    def __str__(self) -> str:
        return SEPARATOR.join(str(segment) for segment in self.segments)

    def __repr__(self) -> str:
        return f"PartiallyQualifiedDomainName({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return text_schema(cls, cls.parse)


class Qualification(StrEnum):
    """Which variant a :class:`DomainName` holds."""

    FULL = "full"
    PARTIAL = "partial"


@dataclass(frozen=True, order=True, repr=False)
class DomainName:
    """Either a fully or a partially qualified name.

    ``kind`` is derived from the wrapped name and compared first, so fully
    qualified names sort before partially qualified ones.
    """

    kind: Qualification = field(init=False)
    name: FullyQualifiedDomainName | PartiallyQualifiedDomainName

    def __post_init__(self) -> None:
        match self.name:
            case FullyQualifiedDomainName():
                kind = Qualification.FULL
            case PartiallyQualifiedDomainName():
                kind = Qualification.PARTIAL
            case _:
                raise TypeError(f"not a qualified name: {self.name!r}")
        object.__setattr__(self, "kind", kind)

    @classmethod
    def of(cls, name: FullyQualifiedDomainName | PartiallyQualifiedDomainName) -> DomainName:
        return cls(name)

    @classmethod
    def parse(cls, text: str) -> DomainName:
        """Classify *text* by its trailing dot and parse that variant.

        Classification cannot fail; segment-level errors from the chosen
        variant still propagate.
        """
        if text.endswith(SEPARATOR):
            return cls(FullyQualifiedDomainName.parse(text))
        return cls(PartiallyQualifiedDomainName.parse(text))

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self.name.segments

    @property
    def is_fully_qualified(self) -> bool:
        return self.kind is Qualification.FULL

    @property
    def is_partially_qualified(self) -> bool:
        return self.kind is Qualification.PARTIAL

    def as_full(self) -> FullyQualifiedDomainName | None:
        match self.name:
            case FullyQualifiedDomainName():
                return self.name
        return None

    def as_partial(self) -> PartiallyQualifiedDomainName | None:
        match self.name:
            case PartiallyQualifiedDomainName():
                return self.name
        return None

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.name)

    def __len__(self) -> int:
        return len(self.name)

    def __str__(self) -> str:
        return str(self.name)

    def __repr__(self) -> str:
        return f"DomainName({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return text_schema(cls, cls.parse)
