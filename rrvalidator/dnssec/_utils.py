from __future__ import annotations

import functools
import struct
import time
from collections.abc import Callable, Mapping
from typing import Any

from rrvalidator import _fields as fields
from rrvalidator.dnssec._enums import (
    RECOMMENDED_ALGORITHMS,
    RECOMMENDED_DIGEST_ALGORITHMS,
)
from rrvalidator.dnssec._models import DNSKEYData

DEFAULT_CLOCK_SKEW = 300


def _render(value: Any) -> str:
    # integral floats render like JSON integers, 257.0 -> '257'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@functools.singledispatch
def _key_material(dnskey: Any) -> str:
    raise TypeError(f'Cannot compute a key tag from {type(dnskey).__name__}')


@_key_material.register
def _(dnskey: Mapping) -> str:
    return ''.join(
        _render(dnskey.get(key))
        for key in ('flags', 'protocol', 'algorithm', 'publicKey')
    )


@_key_material.register
def _(dnskey: DNSKEYData) -> str:
    return ''.join(
        _render(value)
        for value in (dnskey.flags, dnskey.protocol, dnskey.algorithm, dnskey.public_key)
    )


def calculate_key_tag(dnskey: Mapping[str, Any] | DNSKEYData) -> int:
    '''
    Compute the 16 bit key tag of a DNSKEY.

    This is NOT the RFC 4034 Appendix B algorithm over the wire format.
    It sums the UTF-16 code units of `flags + protocol + algorithm +
    publicKey` written out as text, shifting even positions left by 8,
    then folds the carry into the low 16 bits. Existing tags depend on
    this exact behaviour.

    Parameters
    ----------
    dnskey : Mapping[str, Any] | DNSKEYData
        A DNSKEY record or the result of `validate_dnskey`.

    Returns
    -------
    int
        A value in 0..65535.
    '''
    data = _key_material(dnskey).encode('utf-16-le', errors='surrogatepass')
    units = struct.unpack(f'<{len(data) // 2}H', data)

    tag = 0
    for i, unit in enumerate(units):
        tag += unit << 8 if i % 2 == 0 else unit

    tag += (tag >> 16) & 0xFFFF
    return tag & 0xFFFF


def is_recommended_algorithm(algorithm: object) -> bool:
    '''
    RSASHA256, RSASHA512, ECDSAP256SHA256, ECDSAP384SHA384, ED25519
    and ED448.
    '''
    return fields.is_integer(algorithm) and algorithm in RECOMMENDED_ALGORITHMS


def is_recommended_digest_algorithm(algorithm: object) -> bool:
    '''
    SHA-256 and SHA-384.
    '''
    return fields.is_integer(algorithm) and algorithm in RECOMMENDED_DIGEST_ALGORITHMS


def validate_signature_timestamps(
    inception: int,
    expiration: int,
    clock_skew: int = DEFAULT_CLOCK_SKEW,
    *,
    clock: Callable[[], float] = time.time,
) -> bool:
    '''
    Check that a signature validity window contains the current time,
    allowing `clock_skew` seconds of slack on both ends.

    Parameters
    ----------
    inception : int
        Unix seconds.
    expiration : int
        Unix seconds.
    clock_skew : int, optional
        by default 300
    clock : Callable[[], float], optional
        Source of the current unix time, by default `time.time`

    Returns
    -------
    bool
    '''
    now = int(clock())
    if now < inception - clock_skew:
        return False
    return now <= expiration + clock_skew
