'''
**rrvalidator.performance**
---------------------------

Helpers for validating large batches: a compiled pattern cache, cheap
regex pre-checks that reject obviously bad values before the full
validators run, typed field accessors and a timing tracker.

Nothing here is global, create a `PatternCache` or a
`ValidationPerformanceTracker` where you need one and pass it along.

Example
-------
>>> from rrvalidator import is_a_record
>>> tracker = ValidationPerformanceTracker()
>>> @track_performance(tracker)
... def check(record):
...     return is_a_record(record)
'''
from __future__ import annotations

import dataclasses as dc
import functools
import re
import time
from collections.abc import Callable, Mapping
from typing import Any, Literal, ParamSpec, TypeVar

from rrvalidator import _fields as fields

P = ParamSpec('P')
R = TypeVar('R')

ExpectedType = Literal['string', 'number', 'boolean', 'object']
PatternName = Literal['ipv4', 'hex', 'fqdn', 'email']

_IPV4 = (
    r'(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}'
    r'(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)'
)
_HEX = r'[0-9a-fA-F]+'
_FQDN = (
    r'[a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?'
    r'(\.([a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?))*'
)
_EMAIL = r'[^@]+@[^@]+\.[^@]+'


class PatternCache:
    '''
    Compiled regular expressions keyed by `(pattern, flags)`.

    Parameters
    ----------
    tracker : ValidationPerformanceTracker | None, optional
        When given, every lookup is counted on it as a hit or a miss.
    '''

    def __init__(self, tracker: ValidationPerformanceTracker | None = None) -> None:
        self._patterns: dict[tuple[str, int], re.Pattern[str]] = {}
        self.tracker = tracker
        self.hits: int = 0
        self.misses: int = 0

    def get(self, pattern: str, flags: int = 0) -> re.Pattern[str]:
        key = (pattern, flags)
        if compiled := self._patterns.get(key):
            self.hits += 1
            if self.tracker:
                self.tracker.record_cache_hit()
            return compiled

        self.misses += 1
        if self.tracker:
            self.tracker.record_cache_miss()
        compiled = self._patterns[key] = re.compile(pattern, flags)
        return compiled

    def clear(self) -> None:
        self._patterns.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._patterns)


@dc.dataclass(slots=True, frozen=True)
class ValidationPatterns:
    '''
    Permissive patterns for `fast_pre_validate`. A value passing one of
    these still needs the full check, a value failing it is definitely
    invalid.
    '''
    ipv4: re.Pattern[str]
    hex: re.Pattern[str]
    fqdn: re.Pattern[str]
    email: re.Pattern[str]

    @classmethod
    def compile(cls, cache: PatternCache) -> ValidationPatterns:
        return cls(
            ipv4=cache.get(_IPV4),
            hex=cache.get(_HEX),
            fqdn=cache.get(_FQDN),
            email=cache.get(_EMAIL),
        )


def fast_pre_validate(
    value: object,
    pattern: PatternName,
    patterns: ValidationPatterns,
) -> Literal[False] | None:
    '''
    Reject a value that cannot possibly be valid.

    Parameters
    ----------
    value : object
    pattern : PatternName
        Which of `patterns` to match against.
    patterns : ValidationPatterns

    Returns
    -------
    Literal[False] | None
        False when the value is definitely invalid, None when the full
        validator should decide.
    '''
    if not isinstance(value, str) or not value:
        return False
    if (regex := getattr(patterns, pattern, None)) and not regex.fullmatch(value):
        return False
    return None


def is_plain_object(value: object) -> bool:
    '''
    A plain `dict`, not a subclass, list or other mapping type.
    '''
    return type(value) is dict


def is_valid_integer_in_range(value: object, low: int, high: int) -> bool:
    return fields.in_range(value, low, high)


def _has_type(value: object, expected: ExpectedType) -> bool:
    match expected:
        case 'string':
            return isinstance(value, str)
        case 'number':
            return fields.is_number(value)
        case 'boolean':
            return isinstance(value, bool)
        case 'object':
            return is_plain_object(value)
    return False


def get_required_field(
    record: Mapping[str, Any],
    field: str,
    expected_type: ExpectedType,
) -> Any | None:
    '''
    The value of `field` if it has the expected type, else None.
    '''
    value = record.get(field)
    if value is None or not _has_type(value, expected_type):
        return None
    return value


def get_optional_field(
    record: Mapping[str, Any],
    field: str,
    expected_type: ExpectedType,
    default: Any = None,
) -> Any | None:
    '''
    Like `get_required_field`, but an absent field gives `default`
    while a present field of the wrong type still gives None. Pass a
    sentinel as `default` to tell the two apart.
    '''
    value = record.get(field)
    if value is None:
        return default
    return value if _has_type(value, expected_type) else None


@dc.dataclass(slots=True)
class ValidationMetrics:
    total_validations: int = 0
    successful_validations: int = 0
    average_time_ms: float = 0.0
    cache_hits: int = 0
    cache_misses: int = 0

    def to_dict(self) -> dict[str, int | float]:
        return {
            'totalValidations': self.total_validations,
            'successfulValidations': self.successful_validations,
            'averageTimeMs': self.average_time_ms,
            'cacheHits': self.cache_hits,
            'cacheMisses': self.cache_misses,
        }


class ValidationPerformanceTracker:
    '''
    Counts validations and their mean duration.

    Not thread safe, concurrent callers should keep one tracker each.
    '''

    def __init__(self) -> None:
        self._metrics = ValidationMetrics()
        self._total_ms: float = 0.0

    def start_validation(self) -> Callable[[], None]:
        '''
        Start timing one validation.

        Returns
        -------
        Callable[[], None]
            Call it when the validation is done to record its duration.
        '''
        start = time.perf_counter()

        def stop() -> None:
            self._record_validation((time.perf_counter() - start) * 1000)

        return stop

    def _record_validation(self, duration_ms: float) -> None:
        self._metrics.total_validations += 1
        self._total_ms += duration_ms
        self._metrics.average_time_ms = self._total_ms / self._metrics.total_validations

    def record_success(self) -> None:
        self._metrics.successful_validations += 1

    def record_cache_hit(self) -> None:
        self._metrics.cache_hits += 1

    def record_cache_miss(self) -> None:
        self._metrics.cache_misses += 1

    def get_metrics(self) -> ValidationMetrics:
        return dc.replace(self._metrics)

    def reset(self) -> None:
        self._metrics = ValidationMetrics()
        self._total_ms = 0.0


def _succeeded(result: object) -> bool:
    match result:
        case bool():
            return result
        case Mapping():
            return bool(result.get('isValid'))
    return bool(getattr(result, 'is_valid', False))


class track_performance:
    '''
    Decorator timing every call of a validator on `tracker`. A call
    counts as a success when it returns True or a result whose
    `is_valid` is true. Calls that raise are timed but never succeed.
    '''

    def __init__(self, tracker: ValidationPerformanceTracker) -> None:
        self.tracker = tracker

    def __call__(self, func: Callable[P, R]) -> Callable[P, R]:

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            stop = self.tracker.start_validation()
            try:
                result = func(*args, **kwargs)
                if _succeeded(result):
                    self.tracker.record_success()
                return result
            finally:
                stop()

        return wrapper
