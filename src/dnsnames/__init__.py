"""dnsnames — validated DNS domain names and wildcard patterns."""

from dnsnames.domain.errors import (
    DomainNameError,
    FullyQualifiedDomainNameError,
    PartiallyQualifiedDomainNameError,
    PatternError,
    SegmentError,
    SuffixMismatchError,
)
from dnsnames.domain.names import (
    DomainName,
    FullyQualifiedDomainName,
    PartiallyQualifiedDomainName,
    Qualification,
)
from dnsnames.domain.pattern import Pattern, PatternSegment
from dnsnames.domain.records import RecordClass, RecordIdent, RecordType
from dnsnames.domain.segment import Segment

__version__ = "0.1.0"

__all__ = [
    "DomainName",
    "DomainNameError",
    "FullyQualifiedDomainName",
    "FullyQualifiedDomainNameError",
    "PartiallyQualifiedDomainName",
    "PartiallyQualifiedDomainNameError",
    "Pattern",
    "PatternError",
    "PatternSegment",
    "Qualification",
    "RecordClass",
    "RecordIdent",
    "RecordType",
    "Segment",
    "SegmentError",
    "SuffixMismatchError",
    "__version__",
]
