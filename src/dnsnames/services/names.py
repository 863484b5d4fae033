"""NameService — inspection, matching and algebra over domain names.

Each public method takes text, parses it through the validating
constructors and returns a ServiceResult. Invalid input becomes an error
result with one of the codes from :mod:`dnsnames.services.base`.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from dnsnames.domain.errors import DomainNameError, SuffixMismatchError
from dnsnames.domain.names import (
    DomainName,
    FullyQualifiedDomainName,
    PartiallyQualifiedDomainName,
)
from dnsnames.domain.pattern import Pattern
from dnsnames.services.base import (
    INVALID_JOIN,
    INVALID_NAME,
    INVALID_PATTERN,
    NO_ORIGIN,
    SUFFIX_MISMATCH,
    BaseService,
)
from dnsnames.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class NameService(BaseService):
    """Text-in, ServiceResult-out operations on names and patterns."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def inspect(self, text: str) -> ServiceResult:
        """Parse *text* as a domain name and describe it."""
        op = "inspect_name"
        try:
            name = DomainName.parse(text)
        except DomainNameError as exc:
            return self._failure(op, INVALID_NAME, str(exc), exc=exc, input=text)

        segments = name.segments
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": str(name),
                "kind": str(name.kind),
                "segments": [str(segment) for segment in segments],
                "segment_count": len(segments),
                "length": len(name),
                "wildcard": bool(segments) and segments[0].is_wildcard,
                "origin_relative": bool(segments) and segments[-1].is_origin,
            },
        )

    def match(
        self,
        pattern: str,
        names: Iterable[str],
        *,
        origin: str | None = None,
    ) -> ServiceResult:
        """Split *names* into those *pattern* matches and those it misses.

        A trailing ``@`` in the pattern is resolved against *origin*, or the
        service's default origin. Unparseable names are skipped with a
        warning rather than failing the whole operation.
        """
        op = "match_pattern"
        try:
            parsed = Pattern.parse(pattern)
        except DomainNameError as exc:
            return self._failure(op, INVALID_PATTERN, str(exc), exc=exc, input=pattern)

        if parsed.is_origin_relative:
            zone = self._resolve_origin(origin)
            if isinstance(zone, ServiceResult):
                return zone.model_copy(update={"op": op})
            parsed = parsed.with_origin(zone)

        matches: list[str] = []
        misses: list[str] = []
        warnings: list[str] = []
        for text in names:
            try:
                name = DomainName.parse(text)
            except DomainNameError as exc:
                warnings.append(f"Skipped invalid name {text!r}: {exc}")
                continue
            (matches if parsed.matches(name) else misses).append(str(name))

        logger.debug(
            "pattern_matched", pattern=parsed, matched=len(matches), missed=len(misses)
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "pattern": str(parsed),
                "matches": matches,
                "misses": misses,
                "count": len(matches),
            },
            warnings=warnings,
        )

    def relativize(self, name: str, *, origin: str | None = None) -> ServiceResult:
        """Express the fully qualified *name* relative to *origin*."""
        op = "relativize"
        try:
            absolute = FullyQualifiedDomainName.parse(name)
        except DomainNameError as exc:
            return self._failure(op, INVALID_NAME, str(exc), exc=exc, input=name)

        zone = self._resolve_origin(origin)
        if isinstance(zone, ServiceResult):
            return zone.model_copy(update={"op": op})

        try:
            relative = absolute - zone
        except SuffixMismatchError as exc:
            return self._failure(
                op, SUFFIX_MISMATCH, str(exc), exc=exc, name=str(exc.name), origin=str(zone)
            )
        except DomainNameError as exc:
            return self._failure(op, INVALID_NAME, str(exc), exc=exc, input=name)

        return ServiceResult(
            ok=True,
            op=op,
            data={"name": str(absolute), "origin": str(zone), "relative": str(relative)},
        )

    def join(self, relative: str, base: str) -> ServiceResult:
        """Concatenate the partially qualified *relative* in front of *base*.

        The result is fully qualified when *base* is, partial otherwise.
        """
        op = "join_names"
        try:
            head = PartiallyQualifiedDomainName.parse(relative)
        except DomainNameError as exc:
            return self._failure(op, INVALID_NAME, str(exc), exc=exc, input=relative)
        try:
            tail = DomainName.parse(base)
        except DomainNameError as exc:
            return self._failure(op, INVALID_NAME, str(exc), exc=exc, input=base)

        try:
            joined = DomainName(head + tail.name)
        except DomainNameError as exc:
            return self._failure(
                op, INVALID_JOIN, str(exc), exc=exc, relative=str(head), base=str(tail)
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "relative": str(head),
                "base": str(tail),
                "name": str(joined),
                "kind": str(joined.kind),
            },
        )

    def subdomain(self, name: str, parent: str) -> ServiceResult:
        """Report whether *name* lies strictly below *parent*."""
        op = "is_subdomain"
        parsed: list[FullyQualifiedDomainName] = []
        for text in (name, parent):
            try:
                parsed.append(FullyQualifiedDomainName.parse(text))
            except DomainNameError as exc:
                return self._failure(op, INVALID_NAME, str(exc), exc=exc, input=text)

        child, ancestor = parsed
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": str(child),
                "parent": str(ancestor),
                "is_subdomain": child.is_subdomain_of(ancestor),
            },
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_origin(self, origin: str | None) -> FullyQualifiedDomainName | ServiceResult:
        """Parse an explicit origin, or fall back to the default one."""
        if origin is None:
            if self._origin is None:
                return self._failure(
                    "resolve_origin",
                    NO_ORIGIN,
                    "No origin given and no default zone origin configured",
                )
            return self._origin
        try:
            return FullyQualifiedDomainName.parse(origin)
        except DomainNameError as exc:
            return self._failure("resolve_origin", INVALID_NAME, str(exc), exc=exc, input=origin)
