'''
**rrvalidator.compat**
----------------------

Conversions between the record shapes used here and the ones resolver
libraries hand back: the `nsname`/`hostmaster`/`expire`/`minttl` SOA
spelling, the `certUsage`/`match`/`data` TLSA spelling, TXT answers as
lists of string chunks, and heterogeneous ANY answers.

`normalize_soa` and `normalize_tlsa` mutate their argument.
'''
from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, MutableMapping, Sequence
from typing import Any, Final

from rrvalidator import _fields as fields
from rrvalidator.records._models import ANYRecord, TXTRecord
from rrvalidator.records._predicates import BINARY_TYPES

# (canonical, alias), text fields only count as present when non-empty
_SOA_TEXT_ALIASES: Final = (('primary', 'nsname'), ('admin', 'hostmaster'))
_SOA_NUMBER_ALIASES: Final = (('expiration', 'expire'), ('minimum', 'minttl'))
_TLSA_NUMBER_ALIASES: Final = (('usage', 'certUsage'), ('matchingType', 'match'))

_NODE_SOA_NUMBERS: Final = ('serial', 'refresh', 'retry', 'expire', 'minttl')


def _truthy(record: Mapping[str, Any], key: str) -> bool:
    return bool(record.get(key))


def _present(record: Mapping[str, Any], key: str) -> bool:
    return not fields.is_absent(record, key)


def _fill_both_ways(
    record: MutableMapping[str, Any],
    pairs: Iterable[tuple[str, str]],
    *,
    present: Callable[[Mapping[str, Any], str], bool] = _present,
) -> None:
    for first, second in pairs:
        if present(record, first) and not present(record, second):
            record[second] = record[first]
        if present(record, second) and not present(record, first):
            record[first] = record[second]


def normalize_soa(record: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    '''
    Fill in whichever spelling of each SOA field is missing from the
    one that is present, in place.

    Parameters
    ----------
    record : MutableMapping[str, Any]

    Returns
    -------
    MutableMapping[str, Any]
        The same record.
    '''
    _fill_both_ways(record, _SOA_TEXT_ALIASES, present=_truthy)
    _fill_both_ways(record, _SOA_NUMBER_ALIASES)
    return record


def normalize_tlsa(record: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    '''
    The TLSA counterpart of `normalize_soa`. Raw bytes under `data` are
    never copied to `certificate`, which only holds hex text.
    '''
    _fill_both_ways(record, _TLSA_NUMBER_ALIASES)
    if _truthy(record, 'certificate') and not _truthy(record, 'data'):
        record['data'] = record['certificate']
    if (
        _truthy(record, 'data')
        and not _truthy(record, 'certificate')
        and isinstance(record['data'], str)
    ):
        record['certificate'] = record['data']
    return record


def is_node_soa_shape(obj: object) -> bool:
    '''
    True when `obj` is an SOA already using the resolver spelling. Types
    only, values are not validated.
    '''
    if not (r := fields.tagged(obj, 'SOA')):
        return False
    return (
        isinstance(r.get('nsname'), str)
        and isinstance(r.get('hostmaster'), str)
        and all(fields.is_number(r.get(key)) for key in _NODE_SOA_NUMBERS)
    )


def is_node_tlsa_shape(obj: object) -> bool:
    if not (r := fields.tagged(obj, 'TLSA')):
        return False
    return (
        fields.is_number(r.get('certUsage'))
        and fields.is_number(r.get('selector'))
        and fields.is_number(r.get('match'))
        and isinstance(r.get('data'), (str, *BINARY_TYPES))
    )


def to_any_record(entries: Sequence[Mapping[str, Any]]) -> ANYRecord:
    '''
    Wrap records of mixed types in an ANY container. Entries are not
    validated.
    '''
    return {'type': 'ANY', 'records': list(entries)}  # type: ignore[typeddict-item]


def from_node_resolve_any(answers: Sequence[Mapping[str, Any]]) -> ANYRecord:
    return to_any_record(answers)


def from_node_txt(
    records: Iterable[Sequence[str]],
    ttl: int | None = None,
) -> list[TXTRecord]:
    '''
    Turn TXT answers given as lists of string chunks into TXT records,
    one per answer. `ttl` is only set when given.

    Example
    -------
    >>> from_node_txt([['v=spf1', '-all']], ttl=300)
    [{'type': 'TXT', 'entries': ['v=spf1', '-all'], 'ttl': 300}]
    '''
    txt_records: list[TXTRecord] = []
    for chunks in records:
        record: TXTRecord = {'type': 'TXT', 'entries': list(chunks)}
        if ttl is not None:
            record['ttl'] = ttl
        txt_records.append(record)
    return txt_records


def to_node_txt(records: Iterable[Mapping[str, Any]]) -> list[list[str]]:
    return [list(record['entries']) for record in records]


def normalized(record: Mapping[str, Any]) -> dict[str, Any]:
    '''
    A normalized copy of an SOA or TLSA record, the input is left alone.
    Records of other types are copied unchanged.
    '''
    copy = dict(record)
    match copy.get('type'):
        case 'SOA':
            normalize_soa(copy)
        case 'TLSA':
            normalize_tlsa(copy)
    return copy
