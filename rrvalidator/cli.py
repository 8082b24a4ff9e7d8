'''
**rrvalidator.cli**
-------------------

The `rrvalidator` command: validate records and query results given as
JSON, one at a time or in bulk.

Exits 0 when every item was validated, 1 when any item failed or the
input could not be read.
'''
from __future__ import annotations

import argparse
import csv
import dataclasses as dc
import io
import json
import logging
import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any, Literal

from rich.console import Console
from rich.table import Table
from rich.text import Text

from rrvalidator.enhanced import (
    validate_a_record,
    validate_aaaa_record,
    validate_mx_record,
)
from rrvalidator.query import validate_dns_response
from rrvalidator.records import (
    SUPPORTED_RECORD_TYPES,
    ValidationResult,
    is_dns_record,
    validate_dns_record,
)

log = logging.getLogger(__name__)

OutputFormat = Literal['json', 'table', 'csv']
BulkMode = Literal['records', 'queries']

_ENHANCED: dict[str, Callable[[object], ValidationResult]] = {
    'A': validate_a_record,
    'AAAA': validate_aaaa_record,
    'MX': validate_mx_record,
}

_CELL_WIDTH = 50

EXAMPLES = '''
rrvalidator - usage examples

1. Validate a single A record:
   rrvalidator record --type A --data '{"name":"example.com","address":"192.168.1.1","ttl":300}'

2. Validate a record from a file:
   rrvalidator record --file record.json --format table

3. Validate a DNS query response:
   rrvalidator query --file query.json --verbose

4. Bulk validate records:
   rrvalidator bulk --file records.json --format csv --output results.csv

5. Bulk validate with strict mode:
   rrvalidator bulk --file records.json --strict --verbose

Sample A record JSON:
{
  "type": "A",
  "name": "example.com",
  "address": "192.168.1.1",
  "ttl": 300
}
'''


class InputError(Exception):
    '''
    The command input could not be read or has the wrong shape.
    '''


@dc.dataclass(slots=True)
class CLIOptions:
    '''
    Options shared by every subcommand.

    Attributes
    ----------
    - command: `record`, `query`, `bulk` or `examples`.
    - type: Record type to use when a record has none, or to override it.
    - data: Inline JSON input.
    - file: Path to a JSON input file.
    - output: Write results here instead of stdout.
    - format: `json`, `table` or `csv`.
    - strict: Report invalid records as failures instead of invalid results.
    - mode: What `bulk` input holds, `records` or `queries`.
    - verbose: Log progress at debug level.
    '''
    command: str
    type: str | None = None
    data: str | None = None
    file: Path | None = None
    output: Path | None = None
    format: OutputFormat = 'json'
    strict: bool = False
    mode: BulkMode = 'records'
    verbose: bool = False

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> CLIOptions:
        values = vars(ns)
        return cls(**{
            f.name: values[f.name]
            for f in dc.fields(cls)
            if f.name in values
        })


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('-f', '--file', type=Path, help='Read input from a JSON file')
    parser.add_argument('-o', '--output', type=Path, help='Write results to a file')
    parser.add_argument(
        '--format',
        default='json',
        choices=['json', 'table', 'csv'],
        help='Output format',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    parser.add_argument('-s', '--strict', action='store_true', help='Strict validation mode')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rrvalidator',
        description='Validate DNS records and query results',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    commands = parser.add_subparsers(dest='command', required=True)

    record = commands.add_parser('record', help='Validate a single DNS record')
    record.add_argument('-t', '--type', help='DNS record type (A, AAAA, MX, ...)')
    record.add_argument('-d', '--data', help='DNS record as a JSON string')
    _add_common(record)

    query = commands.add_parser('query', help='Validate a DNS query response')
    query.add_argument('-d', '--data', help='DNS query result as a JSON string')
    _add_common(query)

    bulk = commands.add_parser('bulk', help='Validate a JSON array of records or queries')
    bulk.add_argument('-t', '--type', help='Default type for records without one')
    bulk.add_argument(
        '--mode',
        default='records',
        choices=['records', 'queries'],
        help='What the input array holds',
    )
    _add_common(bulk)

    commands.add_parser('examples', help='Show usage examples')
    return parser


def parse_args(argv: Sequence[str] | None = None) -> CLIOptions:
    return CLIOptions.from_namespace(build_parser().parse_args(argv))


def validate_single_record(record: object, options: CLIOptions) -> dict[str, Any]:
    '''
    Validate one record and describe the outcome.

    `success` is False when the record could not be validated at all,
    or, with `--strict`, when it is invalid. Otherwise the details are
    under `validation`.

    Parameters
    ----------
    record : object
        A decoded JSON value.
    options : CLIOptions

    Returns
    -------
    dict[str, Any]
    '''
    given = record.get('type') if isinstance(record, Mapping) else None
    try:
        if not isinstance(record, Mapping):
            raise InputError('Record must be a JSON object')

        rtype = options.type or given
        if not rtype or not isinstance(rtype, str):
            raise InputError(
                'Record type must be specified either in the record or via --type option'
            )
        rtype = rtype.upper()
        typed = {**record, 'type': rtype}

        if rtype not in SUPPORTED_RECORD_TYPES:
            if options.strict:
                raise InputError(f'Unsupported record type: {rtype}')
            log.warning(f'Unknown record type {rtype}, not validated')
            validation = ValidationResult(
                is_valid=False,
                warnings=[f'Unknown record type: {rtype}'],
            )
        else:
            if options.strict and not is_dns_record(typed):
                raise InputError(f'Invalid {rtype} record structure')
            validate = _ENHANCED.get(rtype, validate_dns_record)
            validation = validate(typed)

    except InputError as exc:
        log.debug(f'Record failed: {exc}')
        return {
            'success': False,
            'type': options.type or given or 'unknown',
            'record': record,
            'error': str(exc),
        }

    return {
        'success': True,
        'type': rtype,
        'record': typed,
        'validation': validation.to_dict(),
    }


def validate_query(query: object, options: CLIOptions) -> dict[str, Any]:
    '''
    Validate one query result. A structurally broken result is a
    failure, an inconsistent one is a success with errors or warnings
    under `validation`. With `--strict` an invalid result is a failure.
    '''
    try:
        if not isinstance(query, Mapping):
            raise InputError('Query must be a JSON object')
        validation = validate_dns_response(query)
        if options.strict and not validation.is_valid:
            raise InputError('; '.join(validation.errors))
    except (InputError, ValueError) as exc:
        log.debug(f'Query failed: {exc}')
        return {'success': False, 'query': query, 'error': str(exc)}

    answers = query.get('answers')
    return {
        'success': True,
        'query': query,
        'validation': validation.to_dict(),
        'recordCount': len(answers) if isinstance(answers, list) else 0,
    }


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    return str(value)


def _compact(value: Any) -> str:
    return json.dumps(value, separators=(',', ':'), default=_json_default)


def _clip(text: str) -> str:
    return text[:_CELL_WIDTH] + '...'


def format_table(results: Sequence[Mapping[str, Any]]) -> str:
    table = Table('Type', 'Status', 'Record/Query', 'Result')
    for result in results:
        subject = result['record'] if 'record' in result else result.get('query')
        table.add_row(
            str(result.get('type') or 'Query'),
            '✓ Valid' if result['success'] else '✗ Invalid',
            Text(_clip(_compact(subject))),
            Text('OK' if result['success'] else _clip(str(result.get('error', '')))),
        )

    console = Console(file=io.StringIO(), record=True, width=160, color_system=None)
    console.print(table)
    return console.export_text().rstrip('\n')


def format_csv(results: Sequence[Mapping[str, Any]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
    writer.writerow(['Type', 'Success', 'Error', 'RecordData'])
    for result in results:
        subject = result['record'] if 'record' in result else result.get('query')
        writer.writerow([
            result.get('type') or 'Query',
            'true' if result['success'] else 'false',
            result.get('error', ''),
            _compact(subject),
        ])
    return buffer.getvalue().rstrip('\n')


def format_output(results: Sequence[Mapping[str, Any]], fmt: OutputFormat) -> str:
    match fmt:
        case 'table':
            return format_table(results)
        case 'csv':
            return format_csv(results)
        case _:
            return json.dumps(list(results), indent=2, default=_json_default)


def _read_input(options: CLIOptions) -> Any:
    try:
        if options.data is not None:
            return json.loads(options.data)
        if options.file:
            return json.loads(options.file.read_text(encoding='utf-8'))
    except json.JSONDecodeError as exc:
        raise InputError(f'Invalid JSON: {exc}') from exc
    except OSError as exc:
        raise InputError(f'Cannot read {options.file}: {exc.strerror}') from exc

    if options.command == 'bulk':
        raise InputError('Must provide --file option')
    raise InputError('Must provide either --data or --file option')


def _emit(output: str, options: CLIOptions) -> None:
    if options.output:
        try:
            options.output.write_text(output + '\n', encoding='utf-8')
        except OSError as exc:
            raise InputError(f'Cannot write {options.output}: {exc.strerror}') from exc
        print(f'Results written to {options.output}')
    else:
        print(output)


def _run(options: CLIOptions) -> int:
    if options.command == 'examples':
        print(EXAMPLES)
        return 0

    data = _read_input(options)
    match options.command:
        case 'record':
            results = [validate_single_record(data, options)]
        case 'query':
            results = [validate_query(data, options)]
        case _:
            if not isinstance(data, list):
                raise InputError('Input file must contain a JSON array')
            results = []
            for index, item in enumerate(data, start=1):
                log.debug(f'Processing item {index}/{len(data)}...')
                if options.mode == 'queries':
                    results.append(validate_query(item, options))
                else:
                    results.append(validate_single_record(item, options))

    _emit(format_output(results, options.format), options)

    failed = sum(not result['success'] for result in results)
    if options.command == 'bulk':
        print(f'\nSummary: {len(results) - failed} succeeded, {failed} failed', file=sys.stderr)
    if failed:
        log.warning(f'{failed} of {len(results)} item(s) failed')
    return 1 if failed else 0


def main(argv: Sequence[str] | None = None) -> int:
    options = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )
    try:
        return _run(options)
    except InputError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
