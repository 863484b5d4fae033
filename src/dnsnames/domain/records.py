"""Record types, classes and record identity.

These are plain lookup tables; the name types only contribute the
equality, ordering and hashing of the ``fqdn`` in :class:`RecordIdent`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from dnsnames.domain.names import FullyQualifiedDomainName


class RecordClass(StrEnum):
    """DNS record classes."""

    IN = "IN"
    CH = "CH"
    HS = "HS"


DEFAULT_RECORD_CLASS = RecordClass.IN


class RecordType(StrEnum):
    """DNS resource record types, by mnemonic."""

    A = "A"
    AAAA = "AAAA"
    AFSDB = "AFSDB"
    APL = "APL"
    CAA = "CAA"
    CDNSKEY = "CDNSKEY"
    CDS = "CDS"
    CERT = "CERT"
    CNAME = "CNAME"
    CSYNC = "CSYNC"
    DHCID = "DHCID"
    DLV = "DLV"
    DNAME = "DNAME"
    DNSKEY = "DNSKEY"
    DS = "DS"
    EUI48 = "EUI48"
    EUI64 = "EUI64"
    HINFO = "HINFO"
    HIP = "HIP"
    HTTPS = "HTTPS"
    IPSECKEY = "IPSECKEY"
    KEY = "KEY"
    KX = "KX"
    LOC = "LOC"
    MX = "MX"
    NAPTR = "NAPTR"
    NS = "NS"
    NSEC = "NSEC"
    NSEC3 = "NSEC3"
    NSEC3PARAM = "NSEC3PARAM"
    OPENPGPKEY = "OPENPGPKEY"
    PTR = "PTR"
    RRSIG = "RRSIG"
    RP = "RP"
    SIG = "SIG"
    SMIMEA = "SMIMEA"
    SOA = "SOA"
    SRV = "SRV"
    SSHFP = "SSHFP"
    SVCB = "SVCB"
    TA = "TA"
    TKEY = "TKEY"
    TLSA = "TLSA"
    TSIG = "TSIG"
    TXT = "TXT"
    URI = "URI"
    ZONEMD = "ZONEMD"


@dataclass(frozen=True, order=True)
class RecordIdent:
    """The (fqdn, type, rdata) tuple that uniquely identifies a record in a zone.

    Zones cannot hold two records agreeing on all three, so this can key
    dicts and sets of records.
    """

    fqdn: FullyQualifiedDomainName
    record_type: RecordType
    rdata: str
