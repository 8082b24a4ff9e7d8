from __future__ import annotations

import dataclasses as dc
from typing import Any, Literal, NotRequired, TypedDict

DNSRecordType = Literal[
    'A',
    'AAAA',
    'ANY',
    'CAA',
    'CNAME',
    'DNSKEY',
    'DS',
    'MX',
    'NAPTR',
    'NS',
    'NSEC',
    'NSEC3',
    'PTR',
    'RRSIG',
    'SOA',
    'SRV',
    'SSHFP',
    'TLSA',
    'TXT',
]

SUPPORTED_RECORD_TYPES: frozenset[str] = frozenset(DNSRecordType.__args__)  # type: ignore[attr-defined]


class ARecord(TypedDict):
    type: Literal['A']
    address: str
    ttl: NotRequired[int]


class AAAARecord(TypedDict):
    type: Literal['AAAA']
    address: str
    ttl: NotRequired[int]


class CNAMERecord(TypedDict):
    type: Literal['CNAME']
    value: str
    ttl: NotRequired[int]


class NSRecord(TypedDict):
    type: Literal['NS']
    value: str
    ttl: NotRequired[int]


class PTRRecord(TypedDict):
    type: Literal['PTR']
    value: str
    ttl: NotRequired[int]


class MXRecord(TypedDict):
    type: Literal['MX']
    priority: int
    exchange: str
    ttl: NotRequired[int]


class TXTRecord(TypedDict):
    type: Literal['TXT']
    entries: list[str]
    ttl: NotRequired[int]


class SOARecord(TypedDict, total=False):
    '''
    Either naming convention may be used, `primary`/`admin`/`expiration`/`minimum`
    or the resolver style `nsname`/`hostmaster`/`expire`/`minttl`.
    See `rrvalidator.compat.normalize_soa`.
    '''
    type: Literal['SOA']
    primary: str
    admin: str
    serial: int
    refresh: int
    retry: int
    expiration: int
    minimum: int
    nsname: str
    hostmaster: str
    expire: int
    minttl: int
    ttl: int


class SRVRecord(TypedDict):
    type: Literal['SRV']
    priority: int
    weight: int
    port: int
    name: str
    ttl: NotRequired[int]


class CAARecord(TypedDict):
    type: Literal['CAA']
    critical: int
    issue: NotRequired[str]
    issuewild: NotRequired[str]
    iodef: NotRequired[str]
    contactemail: NotRequired[str]
    contactphone: NotRequired[str]
    ttl: NotRequired[int]


class NAPTRRecord(TypedDict):
    type: Literal['NAPTR']
    order: int
    preference: int
    flags: str
    service: str
    regexp: str
    replacement: str
    ttl: NotRequired[int]


class TLSARecord(TypedDict, total=False):
    '''
    `usage`/`matchingType`/`certificate` or `certUsage`/`match`/`data`,
    `data` may also hold the raw certificate bytes.
    '''
    type: Literal['TLSA']
    usage: int
    selector: int
    matchingType: int
    certificate: str
    certUsage: int
    match: int
    data: str | bytes
    ttl: int


class ANYRecord(TypedDict, total=False):
    type: Literal['ANY']
    value: Any
    records: list[dict[str, Any]]
    ttl: int


class DNSKEYRecord(TypedDict):
    type: Literal['DNSKEY']
    flags: int
    protocol: int
    algorithm: int
    publicKey: str
    ttl: NotRequired[int]


class DSRecord(TypedDict):
    type: Literal['DS']
    keyTag: int
    algorithm: int
    digestType: int
    digest: str
    ttl: NotRequired[int]


class NSECRecord(TypedDict):
    type: Literal['NSEC']
    nextDomainName: str
    typeBitMaps: list[str]
    ttl: NotRequired[int]


class NSEC3Record(TypedDict):
    type: Literal['NSEC3']
    hashAlgorithm: int
    flags: int
    iterations: int
    salt: str
    nextHashedOwnerName: str
    typeBitMaps: list[str]
    ttl: NotRequired[int]


class RRSIGRecord(TypedDict):
    type: Literal['RRSIG']
    typeCovered: str
    algorithm: int
    labels: int
    originalTTL: int
    signatureExpiration: int
    signatureInception: int
    keyTag: int
    signerName: str
    signature: str
    ttl: NotRequired[int]


class SSHFPRecord(TypedDict):
    type: Literal['SSHFP']
    algorithm: int
    fpType: int
    fingerprint: str
    ttl: NotRequired[int]


DNSRecord = (
    ARecord |
    AAAARecord |
    CNAMERecord |
    MXRecord |
    TXTRecord |
    NSRecord |
    PTRRecord |
    SOARecord |
    SRVRecord |
    CAARecord |
    NAPTRRecord |
    TLSARecord |
    ANYRecord |
    DNSKEYRecord |
    DSRecord |
    NSECRecord |
    NSEC3Record |
    RRSIGRecord |
    SSHFPRecord
)


# functional form, 'class' is a keyword
DNSQuestion = TypedDict(
    'DNSQuestion',
    {'name': str, 'type': str, 'class': str},
)


class DNSQueryResult(TypedDict):
    question: DNSQuestion
    answers: list[DNSRecord]
    authority: NotRequired[list[DNSRecord]]
    additional: NotRequired[list[DNSRecord]]


@dc.dataclass(slots=True)
class ValidationResult:
    '''
    The outcome of an accumulating validation pass.

    Attributes
    ----------
    - is_valid: True when `errors` is empty.
    - errors: Human readable messages, one per violated constraint.
    - warnings: Advisory messages, these never affect `is_valid`.
    '''
    is_valid: bool
    errors: list[str] = dc.field(default_factory=list)
    warnings: list[str] = dc.field(default_factory=list)

    @classmethod
    def from_messages(
        cls,
        errors: list[str],
        warnings: list[str] | None = None,
    ) -> ValidationResult:
        return cls(
            is_valid=not errors,
            errors=errors,
            warnings=warnings or [],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'isValid': self.is_valid,
            'errors': list(self.errors),
            'warnings': list(self.warnings),
        }
