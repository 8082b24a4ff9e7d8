'''
Primitive field validators.

Every function takes a single value of any type and answers with a
bool, they never raise. The record predicates, the DNSSEC validators and
the enhanced validators all build on these.
'''
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Final

from rrvalidator import _formats

MAX_TTL: Final = 2_147_483_647
MAX_UINT16: Final = 65_535
MAX_UINT8: Final = 255

_NAPTR_FLAGS: Final = frozenset({'S', 'A', 'U', 'P', ''})
_PRINTABLE_RE: Final = re.compile(r'[\x20-\x7e]*')


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: object) -> bool:
    '''
    An int (never a bool) or a float with no fractional part, which is
    how integral JSON numbers sometimes arrive.
    '''
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def in_range(value: object, low: int, high: int) -> bool:
    return is_integer(value) and low <= value <= high  # type: ignore[operator]


def is_non_negative_integer(value: object) -> bool:
    return is_integer(value) and value >= 0  # type: ignore[operator]


def is_valid_ttl(ttl: object) -> bool:
    return in_range(ttl, 0, MAX_TTL)


def is_valid_port(port: object) -> bool:
    return in_range(port, 0, MAX_UINT16)


def is_valid_priority(priority: object) -> bool:
    return in_range(priority, 0, MAX_UINT16)


def is_valid_weight(weight: object) -> bool:
    return in_range(weight, 0, MAX_UINT16)


def is_valid_caa_flags(flags: object) -> bool:
    return in_range(flags, 0, MAX_UINT8)


def is_valid_naptr_flags(flags: object) -> bool:
    '''
    NAPTR flags are one of S, A, U, P (any case) or empty.
    '''
    return isinstance(flags, str) and flags.upper() in _NAPTR_FLAGS


def is_valid_tlsa_usage(usage: object) -> bool:
    return in_range(usage, 0, 3)


def is_valid_tlsa_selector(selector: object) -> bool:
    return in_range(selector, 0, 1)


def is_valid_tlsa_matching_type(matching_type: object) -> bool:
    return in_range(matching_type, 0, 2)


def is_valid_hex_string(value: object) -> bool:
    return _formats.is_hexadecimal(value)


def is_valid_text_record(text: object) -> bool:
    '''
    Printable ASCII only (0x20-0x7E). TXT rdata can carry any 8-bit
    data, but anything outside that range is treated as a mistake.
    '''
    return isinstance(text, str) and _PRINTABLE_RE.fullmatch(text) is not None


def is_absent(record: Mapping[str, Any], key: str) -> bool:
    '''
    Only a missing key is absent, a key set to None (JSON null) is
    present and gets validated like any other value.
    '''
    return key not in record


def has_valid_ttl(record: Mapping[str, Any]) -> bool:
    '''
    The optional `ttl` of any record: absent, or a valid TTL.
    '''
    return is_absent(record, 'ttl') or is_valid_ttl(record['ttl'])


def tagged(value: object, rtype: str) -> Mapping[str, Any] | None:
    '''
    The value as a record when it is a mapping tagged `rtype`, else None.
    '''
    if not isinstance(value, Mapping) or value.get('type') != rtype:
        return None
    return value
