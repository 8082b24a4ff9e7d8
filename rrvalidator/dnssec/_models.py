'''
The normalized records returned by the strict DNSSEC validators.
'''
from __future__ import annotations

import dataclasses as dc
import re
from typing import Any

_CAMEL_BOUNDARY = re.compile(r'_([a-z])')

# snake_case attributes whose record key is not a plain camelCase spelling
_KEY_OVERRIDES = {
    'original_ttl': 'originalTTL',
}


def _record_key(attribute: str) -> str:
    if attribute in _KEY_OVERRIDES:
        return _KEY_OVERRIDES[attribute]
    return _CAMEL_BOUNDARY.sub(lambda m: m.group(1).upper(), attribute)


class _RecordData:
    __slots__ = ()

    def to_dict(self) -> dict[str, Any]:
        '''
        The record with its original key spelling, e.g. `keyTag`.
        '''
        return {
            _record_key(field.name): getattr(self, field.name)
            for field in dc.fields(self)  # type: ignore[arg-type]
        }


@dc.dataclass(slots=True, frozen=True)
class RRSIGData(_RecordData):
    type_covered: str
    algorithm: int
    labels: int
    original_ttl: int
    signature_expiration: int
    signature_inception: int
    key_tag: int
    signer_name: str
    signature: str


@dc.dataclass(slots=True, frozen=True)
class DNSKEYData(_RecordData):
    flags: int
    protocol: int
    algorithm: int
    public_key: str


@dc.dataclass(slots=True, frozen=True)
class DSData(_RecordData):
    key_tag: int
    algorithm: int
    digest_type: int
    digest: str


@dc.dataclass(slots=True, frozen=True)
class NSECData(_RecordData):
    next_domain_name: str
    type_bit_maps: list[str]

    @property
    def types(self) -> list[str]:
        '''
        Deprecated alias of `type_bit_maps`, the same list object.
        '''
        return self.type_bit_maps

    def to_dict(self) -> dict[str, Any]:
        data = _RecordData.to_dict(self)
        data['types'] = self.type_bit_maps
        return data


@dc.dataclass(slots=True, frozen=True)
class NSEC3Data(_RecordData):
    hash_algorithm: int
    flags: int
    iterations: int
    salt: str
    next_hashed_owner_name: str
    type_bit_maps: list[str]

    @property
    def types(self) -> list[str]:
        '''
        Deprecated alias of `type_bit_maps`, the same list object.
        '''
        return self.type_bit_maps

    def to_dict(self) -> dict[str, Any]:
        data = _RecordData.to_dict(self)
        data['types'] = self.type_bit_maps
        return data


@dc.dataclass(slots=True, frozen=True)
class NSEC3PARAMData(_RecordData):
    hash_algorithm: int
    flags: int
    iterations: int
    salt: str
