'''
**rrvalidator.query**
---------------------

Checks on whole query results, `{question, answers, authority?,
additional?}`, rather than single records.
'''
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeGuard

from rrvalidator import _fields as fields
from rrvalidator import _formats
from rrvalidator.errors import InvalidQueryStructureError
from rrvalidator.records._models import (
    SUPPORTED_RECORD_TYPES,
    DNSQueryResult,
    DNSRecord,
    ValidationResult,
)

log = logging.getLogger(__name__)


def is_valid_record_type(value: object) -> bool:
    return isinstance(value, str) and value in SUPPORTED_RECORD_TYPES


def is_valid_dns_record(record: object) -> TypeGuard[DNSRecord]:
    '''
    Loose structural check: a mapping with a supported `type` and, if
    present, a valid `ttl`. The type specific fields are not looked at,
    use `is_dns_record` for that.
    '''
    if not isinstance(record, Mapping):
        return False
    return is_valid_record_type(record.get('type')) and fields.has_valid_ttl(record)


def _is_name(value: object) -> bool:
    return isinstance(value, str) and bool(value)


def is_valid_dns_query_result(result: object) -> TypeGuard[DNSQueryResult]:
    '''
    True when `result` has a complete question and every answer passes
    `is_valid_dns_record`.

    Parameters
    ----------
    result : object

    Returns
    -------
    bool
    '''
    if not isinstance(result, Mapping):
        return False

    question = result.get('question')
    if not isinstance(question, Mapping):
        return False
    if not all(_is_name(question.get(key)) for key in ('name', 'type', 'class')):
        return False

    answers = result.get('answers')
    if not isinstance(answers, list):
        return False
    return all(is_valid_dns_record(answer) for answer in answers)


def validate_dns_response(result: Mapping[str, Any]) -> ValidationResult:
    '''
    Check that a query result is consistent: the question names a valid
    domain, and the answers are of the type that was asked for.

    Type mismatches and an empty answer section are warnings, they do
    not make the result invalid. Questions of type ANY match anything.

    Parameters
    ----------
    result : Mapping[str, Any]
        A query result, see `DNSQueryResult`.

    Returns
    -------
    ValidationResult

    Raises
    ------
    InvalidQueryStructureError
        When `question` is not a mapping or `answers` is not a list.
    '''
    question = result.get('question')
    if not isinstance(question, Mapping):
        raise InvalidQueryStructureError('Query result must have a question object', 'question')
    answers = result.get('answers')
    if not isinstance(answers, list):
        raise InvalidQueryStructureError('Query result must have an answers array', 'answers')

    errors: list[str] = []
    warnings: list[str] = []

    name = question.get('name')
    if not _formats.is_fqdn(name, require_tld=True):
        errors.append(f'Invalid domain name in question: {name}')

    qtype = question.get('type')
    if qtype != 'ANY':
        for answer in answers:
            atype = answer.get('type') if isinstance(answer, Mapping) else None
            if atype != qtype:
                warnings.append(
                    f'Answer type {atype} does not match question type {qtype}'
                )

    if not answers:
        warnings.append('No answers found in DNS response')

    if warnings:
        log.debug(f'Response for {name!r} has {len(warnings)} warning(s)')
    return ValidationResult.from_messages(errors, warnings)
