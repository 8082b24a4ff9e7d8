'''
**rrvalidator.errors**
----------------------

The structured exceptions raised by the strict validators, and the
`ValidationContext` used to collect several of them with the field path
they were found at.

Callers should branch on `DNSValidationError.code`, the message is for
humans and may change.
'''
from __future__ import annotations

import contextlib
import dataclasses as dc
from collections.abc import Iterator
from typing import Any, Final, Literal


class DNSValidationError(ValueError):
    '''
    Base class for all validation errors.

    Parent: ValueError

    Attributes
    ----------
    - message: The human readable description.
    - code: A stable machine readable identifier, e.g. `INVALID_DS_DIGEST_LENGTH`.
    - field: The offending field, if the error is about a single field.
    - value: The offending value.
    '''

    def __init__(
        self,
        message: str,
        code: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'name': type(self).__name__,
            'message': self.message,
            'code': self.code,
        }
        if self.field is not None:
            data['field'] = self.field
        if self.value is not None:
            data['value'] = self.value
        return data

    def __repr__(self) -> str:
        return f'{type(self).__name__}(code={self.code!r}, message={self.message!r})'


class InvalidRecordTypeError(DNSValidationError):
    def __init__(self, record_type: object) -> None:
        super().__init__(
            f'Invalid or unsupported DNS record type: {record_type}',
            'INVALID_RECORD_TYPE',
            'type',
            record_type,
        )


class MalformedRecordError(DNSValidationError):
    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        super().__init__(message, 'MALFORMED_RECORD', field, value)


class InvalidFieldValueError(DNSValidationError):
    def __init__(self, field: str, value: Any, expected_format: str | None = None) -> None:
        message = f"Invalid value for field '{field}': {value}"
        if expected_format:
            message = f'{message}. Expected: {expected_format}'
        super().__init__(message, 'INVALID_FIELD_VALUE', field, value)


class MissingRequiredFieldError(DNSValidationError):
    def __init__(self, field: str, record_type: str) -> None:
        super().__init__(
            f"Missing required field '{field}' for {record_type} record",
            'MISSING_REQUIRED_FIELD',
            field,
        )


class InvalidQueryStructureError(DNSValidationError):
    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, 'INVALID_QUERY_STRUCTURE', field)


# error code names of the Node.js `dns` module, for callers sharing
# result handling with a Node service
NODE_DNS_ERROR_CODES: Final = frozenset({
    'NODATA',
    'FORMERR',
    'SERVFAIL',
    'NOTFOUND',
    'NOTIMP',
    'REFUSED',
    'BADQUERY',
    'BADNAME',
    'BADFAMILY',
    'BADRESP',
    'CONNREFUSED',
    'TIMEOUT',
    'EOF',
    'FILE',
    'NOMEM',
    'DESTRUCTION',
    'BADSTR',
    'BADFLAGS',
    'NONAME',
    'BADHINTS',
    'NOTINITIALIZED',
    'LOADIPHLPAPI',
    'ADDRGETNETWORKPARAMS',
    'CANCELLED',
})


def is_node_dns_error_code(code: object) -> bool:
    return isinstance(code, str) and code in NODE_DNS_ERROR_CODES


@dc.dataclass(slots=True)
class DetailedValidationResult:
    is_valid: bool
    errors: list[DNSValidationError] = dc.field(default_factory=list)
    warnings: list[str] = dc.field(default_factory=list)
    suggestions: list[str] | None = None


class ValidationContext:
    '''
    Collects errors, warnings and suggestions over one validation pass
    while tracking which field is being looked at.

    Not thread safe, give each concurrent validation its own context.

    Example
    -------
    >>> ctx = ValidationContext()
    >>> with ctx.field('soa'), ctx.field('admin'):
    ...     ctx.current_path
    'soa.admin'
    '''

    def __init__(self) -> None:
        self._path: list[str] = []
        self._errors: list[DNSValidationError] = []
        self._warnings: list[str] = []
        self._suggestions: list[str] = []

    def enter_field(self, field: str) -> None:
        self._path.append(field)

    def exit_field(self) -> None:
        if self._path:
            self._path.pop()

    @contextlib.contextmanager
    def field(self, name: str) -> Iterator[ValidationContext]:
        self.enter_field(name)
        try:
            yield self
        finally:
            self.exit_field()

    @property
    def current_path(self) -> str:
        return '.'.join(self._path) if self._path else 'root'

    def add_error(self, error: DNSValidationError) -> None:
        '''
        Record an error, errors raised without a field are attributed
        to the current path.
        '''
        if error.field is None and self._path:
            error.field = self.current_path
        self._errors.append(error)

    def add_warning(self, message: str) -> None:
        self._warnings.append(message)

    def add_suggestion(self, message: str) -> None:
        self._suggestions.append(message)

    def get_result(self) -> DetailedValidationResult:
        return DetailedValidationResult(
            is_valid=not self._errors,
            errors=list(self._errors),
            warnings=list(self._warnings),
            suggestions=list(self._suggestions) or None,
        )

    def reset(self) -> None:
        self._path.clear()
        self._errors.clear()
        self._warnings.clear()
        self._suggestions.clear()


class ValidationErrorFactory:
    '''
    Constructors for the common field errors so messages stay uniform.
    '''

    @staticmethod
    def invalid_ip_address(address: str, version: Literal[4, 6]) -> InvalidFieldValueError:
        return InvalidFieldValueError('address', address, f'valid IPv{version} address')

    @staticmethod
    def invalid_fqdn(domain: str, field: str = 'value') -> InvalidFieldValueError:
        return InvalidFieldValueError(field, domain, 'valid FQDN')

    @staticmethod
    def invalid_port(port: Any) -> InvalidFieldValueError:
        return InvalidFieldValueError('port', port, 'integer between 0 and 65535')

    @staticmethod
    def invalid_ttl(ttl: Any) -> InvalidFieldValueError:
        return InvalidFieldValueError('ttl', ttl, 'integer between 0 and 2147483647')

    @staticmethod
    def invalid_priority(priority: Any) -> InvalidFieldValueError:
        return InvalidFieldValueError('priority', priority, 'integer between 0 and 65535')

    @staticmethod
    def invalid_weight(weight: Any) -> InvalidFieldValueError:
        return InvalidFieldValueError('weight', weight, 'integer between 0 and 65535')

    @staticmethod
    def invalid_email(email: str) -> InvalidFieldValueError:
        return InvalidFieldValueError('admin', email, 'valid email address format')

    @staticmethod
    def invalid_hex_string(value: str, field: str = 'certificate') -> InvalidFieldValueError:
        return InvalidFieldValueError(field, value, 'valid hexadecimal string')

    @staticmethod
    def missing_required_field(field: str, record_type: str) -> MissingRequiredFieldError:
        return MissingRequiredFieldError(field, record_type)

    @staticmethod
    def malformed_record(message: str) -> MalformedRecordError:
        return MalformedRecordError(message)

    @staticmethod
    def invalid_record_type(record_type: object) -> InvalidRecordTypeError:
        return InvalidRecordTypeError(record_type)
