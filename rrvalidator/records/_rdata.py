'''
Conversion of dnspython rdata into the plain record mappings the
validators accept.

Names lose their trailing dot and opaque binary fields are rendered as
hex, the same shapes `is_dns_record` expects.
'''
from __future__ import annotations

import base64
import functools
from collections.abc import Iterable
from typing import Any

import dns.name
import dns.rdata
import dns.rdatatype
import dns.rrset
from dns.rdtypes.ANY.CAA import CAA as R_CAA
from dns.rdtypes.ANY.CNAME import CNAME as R_CNAME
from dns.rdtypes.ANY.DNSKEY import DNSKEY as R_DNSKEY
from dns.rdtypes.ANY.DS import DS as R_DS
from dns.rdtypes.ANY.MX import MX as R_MX
from dns.rdtypes.ANY.NS import NS as R_NS
from dns.rdtypes.ANY.NSEC import NSEC as R_NSEC
from dns.rdtypes.ANY.NSEC3 import NSEC3 as R_NSEC3
from dns.rdtypes.ANY.PTR import PTR as R_PTR
from dns.rdtypes.ANY.RRSIG import RRSIG as R_RRSIG
from dns.rdtypes.ANY.SOA import SOA as R_SOA
from dns.rdtypes.ANY.SSHFP import SSHFP as R_SSHFP
from dns.rdtypes.ANY.TLSA import TLSA as R_TLSA
from dns.rdtypes.ANY.TXT import TXT as R_TXT
from dns.rdtypes.IN.A import A as R_A
from dns.rdtypes.IN.AAAA import AAAA as R_AAAA
from dns.rdtypes.IN.NAPTR import NAPTR as R_NAPTR
from dns.rdtypes.IN.SRV import SRV as R_SRV

from rrvalidator.errors import InvalidRecordTypeError
from rrvalidator.records._models import SUPPORTED_RECORD_TYPES, DNSRecord


def _name(n: dns.name.Name | None) -> str:
    return "" if n is None else str(n).rstrip(".")


def _text(b: bytes) -> str:
    return b.decode(errors="ignore")


def _type_list(windows: Iterable[tuple[int, bytes]]) -> list[str]:
    '''
    Decode an NSEC style type bitmap into type mnemonics.
    '''
    types: list[str] = []
    for window, bitmap in windows:
        for i, byte in enumerate(bitmap):
            for bit in range(8):
                if byte & (0x80 >> bit):
                    types.append(dns.rdatatype.to_text(window * 256 + i * 8 + bit))
    return types


@functools.singledispatch
def _convert(r: dns.rdata.Rdata) -> dict[str, Any]:
    raise InvalidRecordTypeError(dns.rdatatype.to_text(r.rdtype))


@_convert.register
def _(r: R_A) -> dict[str, Any]:
    return {'type': 'A', 'address': r.address}


@_convert.register
def _(r: R_AAAA) -> dict[str, Any]:
    return {'type': 'AAAA', 'address': r.address}


@_convert.register
def _(r: R_CNAME) -> dict[str, Any]:
    return {'type': 'CNAME', 'value': _name(r.target)}


@_convert.register
def _(r: R_NS) -> dict[str, Any]:
    return {'type': 'NS', 'value': _name(r.target)}


@_convert.register
def _(r: R_PTR) -> dict[str, Any]:
    return {'type': 'PTR', 'value': _name(r.target)}


@_convert.register
def _(r: R_MX) -> dict[str, Any]:
    return {
        'type': 'MX',
        'priority': int(r.preference),
        'exchange': _name(r.exchange),
    }


@_convert.register
def _(r: R_TXT) -> dict[str, Any]:
    return {'type': 'TXT', 'entries': [_text(s) for s in r.strings]}


@_convert.register
def _(r: R_SOA) -> dict[str, Any]:
    return {
        'type': 'SOA',
        'primary': _name(r.mname),
        'admin': _name(r.rname),
        'serial': int(r.serial),
        'refresh': int(r.refresh),
        'retry': int(r.retry),
        'expiration': int(r.expire),
        'minimum': int(r.minimum),
    }


@_convert.register
def _(r: R_SRV) -> dict[str, Any]:
    return {
        'type': 'SRV',
        'priority': int(r.priority),
        'weight': int(r.weight),
        'port': int(r.port),
        'name': _name(r.target),
    }


@_convert.register
def _(r: R_CAA) -> dict[str, Any]:
    return {
        'type': 'CAA',
        'critical': int(r.flags),
        _text(r.tag).lower(): _text(r.value),
    }


@_convert.register
def _(r: R_NAPTR) -> dict[str, Any]:
    return {
        'type': 'NAPTR',
        'order': int(r.order),
        'preference': int(r.preference),
        'flags': _text(r.flags),
        'service': _text(r.service),
        'regexp': _text(r.regexp),
        'replacement': _name(r.replacement),
    }


@_convert.register
def _(r: R_TLSA) -> dict[str, Any]:
    return {
        'type': 'TLSA',
        'usage': int(r.usage),
        'selector': int(r.selector),
        'matchingType': int(r.mtype),
        'certificate': r.cert.hex(),
    }


@_convert.register
def _(r: R_DNSKEY) -> dict[str, Any]:
    return {
        'type': 'DNSKEY',
        'flags': int(r.flags),
        'protocol': int(r.protocol),
        'algorithm': int(r.algorithm),
        'publicKey': r.key.hex(),
    }


@_convert.register
def _(r: R_DS) -> dict[str, Any]:
    return {
        'type': 'DS',
        'keyTag': int(r.key_tag),
        'algorithm': int(r.algorithm),
        'digestType': int(r.digest_type),
        'digest': r.digest.hex(),
    }


@_convert.register
def _(r: R_NSEC) -> dict[str, Any]:
    return {
        'type': 'NSEC',
        'nextDomainName': _name(r.next),
        'typeBitMaps': _type_list(r.windows),
    }


@_convert.register
def _(r: R_NSEC3) -> dict[str, Any]:
    return {
        'type': 'NSEC3',
        'hashAlgorithm': int(r.algorithm),
        'flags': int(r.flags),
        'iterations': int(r.iterations),
        'salt': r.salt.hex(),
        # presentation form: unpadded base32hex
        'nextHashedOwnerName': base64.b32hexencode(r.next).decode().rstrip('=').lower(),
        'typeBitMaps': _type_list(r.windows),
    }


@_convert.register
def _(r: R_RRSIG) -> dict[str, Any]:
    return {
        'type': 'RRSIG',
        'typeCovered': dns.rdatatype.to_text(r.type_covered),
        'algorithm': int(r.algorithm),
        'labels': int(r.labels),
        'originalTTL': int(r.original_ttl),
        'signatureExpiration': int(r.expiration),
        'signatureInception': int(r.inception),
        'keyTag': int(r.key_tag),
        'signerName': _name(r.signer),
        'signature': r.signature.hex(),
    }


@_convert.register
def _(r: R_SSHFP) -> dict[str, Any]:
    return {
        'type': 'SSHFP',
        'algorithm': int(r.algorithm),
        'fpType': int(r.fp_type),
        'fingerprint': r.fingerprint.hex(),
    }


def parse_rdata(rdata: dns.rdata.Rdata, ttl: int | None = None) -> DNSRecord:
    '''
    Convert one dnspython rdata into a plain record.

    Parameters
    ----------
    rdata : dns.rdata.Rdata
    ttl : int | None, optional
        Set as the record's `ttl` when given, by default None

    Returns
    -------
    DNSRecord

    Raises
    ------
    InvalidRecordTypeError
        When the rdata type has no record shape here, e.g. CDS or HINFO.

    Example
    -------
    >>> import dns.rdata
    >>> parse_rdata(dns.rdata.from_text('IN', 'MX', '10 mail.example.com.'), ttl=300)
    {'type': 'MX', 'priority': 10, 'exchange': 'mail.example.com', 'ttl': 300}
    '''
    # subclasses such as CDS share their parent's rdata class
    if (rtype := dns.rdatatype.to_text(rdata.rdtype)) not in SUPPORTED_RECORD_TYPES:
        raise InvalidRecordTypeError(rtype)

    record = _convert(rdata)
    if ttl is not None:
        record['ttl'] = ttl
    return record  # type: ignore[return-value]


def parse_rrset(rrset: dns.rrset.RRset) -> list[DNSRecord]:
    '''
    Convert every rdata of an RRset, each record carrying the RRset TTL.
    '''
    return [parse_rdata(rdata, ttl=rrset.ttl) for rdata in rrset]
