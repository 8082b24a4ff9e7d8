'''
String format checks shared by every validation path.

IP literals and domain names are checked with dnspython, email
addresses with email_validator. Nothing in here touches the network:
deliverability checks are always disabled.
'''
from __future__ import annotations

import re
from typing import Final, Literal

import dns.exception
import dns.ipv4
import dns.ipv6
import dns.name
import email_validator

_HEX_RE: Final = re.compile(r'[0-9a-fA-F]+')
_LABEL_RE: Final = re.compile(r'[a-z0-9\u00a1-\uffff-]+', re.IGNORECASE)
_TLD_RE: Final = re.compile(
    r'[a-z\u00a1-\u00a8\u00aa-\ud7ff\uf900-\ufdcf\ufdf0-\uffef]{2,}|xn[a-z0-9-]{2,}',
    re.IGNORECASE,
)
_MAX_LABEL_LENGTH: Final = 63
# stands in for the domain while email_validator checks a local part
_LOCAL_PART_DOMAIN: Final = 'example.com'


def is_ip(value: object, version: Literal[4, 6]) -> bool:
    '''
    Check that `value` is an IP literal of exactly the given version,
    an IPv4 string never passes as IPv6 and vice versa.

    Parameters
    ----------
    value : object
    version : Literal[4, 6]

    Returns
    -------
    bool
    '''
    if not isinstance(value, str):
        return False

    parse = dns.ipv4.inet_aton if version == 4 else dns.ipv6.inet_aton
    try:
        parse(value)
    except (dns.exception.SyntaxError, ValueError):
        return False
    return True


def is_fqdn(value: object, *, require_tld: bool = True) -> bool:
    '''
    Check that `value` is a fully qualified domain name without a
    trailing dot.

    Labels are letters, digits and hyphens (no leading or trailing
    hyphen, at most 63 characters). With `require_tld` the name needs
    at least two labels and the last one must be alphabetic (or an
    `xn--` punycode label).

    Parameters
    ----------
    value : object
    require_tld : bool, optional
        by default True

    Returns
    -------
    bool
    '''
    if not isinstance(value, str) or not value:
        return False

    labels = value.split('.')
    if require_tld:
        if len(labels) < 2:
            return False
        if not _TLD_RE.fullmatch(labels[-1]):
            return False

    for label in labels:
        if not label or len(label) > _MAX_LABEL_LENGTH:
            return False
        if not _LABEL_RE.fullmatch(label):
            return False
        if label.startswith('-') or label.endswith('-'):
            return False

    try:
        dns.name.from_text(value, origin=None)
    except dns.exception.DNSException:
        return False
    return True


def is_email(value: object) -> bool:
    '''
    Check the syntax of an email address.

    The local part is checked by email_validator, the domain with
    `is_fqdn`. email_validator refuses special-use domains such as
    `.test` or `.local`, which are fine in zone data.

    Parameters
    ----------
    value : object

    Returns
    -------
    bool
    '''
    if not isinstance(value, str) or '@' not in value:
        return False

    local, _, domain = value.rpartition('@')
    if not is_fqdn(domain, require_tld=True):
        return False
    try:
        email_validator.validate_email(
            f'{local}@{_LOCAL_PART_DOMAIN}',
            check_deliverability=False,
        )
    except email_validator.EmailNotValidError:
        return False
    return True


def is_hexadecimal(value: object) -> bool:
    '''
    Every character is a hex digit. The empty string is not hex.
    '''
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None
