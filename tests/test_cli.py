"""Tests for the rrvalidator command"""

import json

import pytest

from rrvalidator.cli import CLIOptions, main, parse_args, validate_single_record


def _write(tmp_path, payload):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_parse_args_defaults():
    options = parse_args(["bulk", "--file", "records.json"])
    assert options.command == "bulk"
    assert options.mode == "records"
    assert options.format == "json"
    assert not options.strict
    assert str(options.file) == "records.json"


def test_record_from_data(capsys):
    code = main(["record", "--data", '{"type": "A", "address": "192.168.1.1", "ttl": 300}'])
    out = json.loads(capsys.readouterr().out)

    assert code == 0
    assert out[0]["success"]
    assert out[0]["type"] == "A"
    assert out[0]["validation"]["isValid"]


def test_type_option_overrides_record(capsys):
    code = main(["record", "--type", "aaaa", "--data", '{"address": "2001:db8::1"}'])
    out = json.loads(capsys.readouterr().out)

    assert code == 0
    assert out[0]["type"] == "AAAA"
    assert out[0]["record"]["type"] == "AAAA"


def test_invalid_record_is_reported_not_failed(capsys):
    code = main(["record", "--data", '{"type": "MX", "priority": -1, "exchange": "mail"}'])
    out = json.loads(capsys.readouterr().out)

    assert code == 0
    assert not out[0]["validation"]["isValid"]
    assert len(out[0]["validation"]["errors"]) == 2


def test_strict_invalid_record_fails(capsys):
    code = main(["record", "--strict", "--data", '{"type": "A", "address": "bad"}'])
    out = json.loads(capsys.readouterr().out)

    assert code == 1
    assert not out[0]["success"]
    assert out[0]["error"] == "Invalid A record structure"


@pytest.mark.parametrize("strict, expected", [(False, 0), (True, 1)])
def test_unknown_type(capsys, strict, expected):
    argv = ["record", "--data", '{"type": "HINFO"}']
    if strict:
        argv.append("--strict")
    assert main(argv) == expected

    out = json.loads(capsys.readouterr().out)
    if strict:
        assert out[0]["error"] == "Unsupported record type: HINFO"
    else:
        assert out[0]["validation"]["warnings"] == ["Unknown record type: HINFO"]


def test_dnssec_types_are_validated():
    options = CLIOptions(command="record")
    result = validate_single_record(
        {"type": "DS", "keyTag": 1, "algorithm": 8, "digestType": 2, "digest": "ab" * 32},
        options,
    )
    assert result["success"]
    assert result["validation"]["isValid"]


def test_record_without_type():
    result = validate_single_record({"address": "192.0.2.1"}, CLIOptions(command="record"))
    assert not result["success"]
    assert result["type"] == "unknown"
    assert "--type" in result["error"]


@pytest.mark.parametrize("argv, message", [
    (["record"], "Error: Must provide either --data or --file option"),
    (["bulk"], "Error: Must provide --file option"),
    (["record", "--data", "{not json"], "Error: Invalid JSON"),
    (["record", "--data", "abc"], "Error: Invalid JSON"),
    (["query", "--data", ""], "Error: Invalid JSON"),
])
def test_input_errors(capsys, argv, message):
    assert main(argv) == 1
    assert message in capsys.readouterr().err


def test_missing_file(capsys, tmp_path):
    assert main(["record", "--file", str(tmp_path / "missing.json")]) == 1
    assert "Error: Cannot read" in capsys.readouterr().err


def test_bulk_csv_with_a_bad_item(capsys, tmp_path):
    path = _write(tmp_path, [{"type": "A", "address": "192.0.2.1"}, 42])

    code = main(["bulk", "--file", str(path), "--format", "csv"])
    captured = capsys.readouterr()
    lines = captured.out.strip().splitlines()

    assert code == 1
    assert lines[0] == '"Type","Success","Error","RecordData"'
    assert lines[1].startswith('"A","true",""')
    assert lines[2] == '"unknown","false","Record must be a JSON object","42"'
    assert "Summary: 1 succeeded, 1 failed" in captured.err


def test_bulk_requires_array(capsys, tmp_path):
    path = _write(tmp_path, {"type": "A", "address": "192.0.2.1"})
    assert main(["bulk", "--file", str(path)]) == 1
    assert "Input file must contain a JSON array" in capsys.readouterr().err


def test_bulk_default_type(capsys, tmp_path):
    path = _write(tmp_path, [{"address": "192.0.2.1"}, {"address": "192.0.2.2"}])
    assert main(["bulk", "--file", str(path), "--type", "A"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [r["type"] for r in out] == ["A", "A"]


def test_query(capsys, query_result):
    code = main(["query", "--data", json.dumps(query_result)])
    out = json.loads(capsys.readouterr().out)

    assert code == 0
    assert out[0]["recordCount"] == 2
    assert out[0]["validation"]["isValid"]


def test_query_without_question(capsys):
    assert main(["query", "--data", '{"answers": []}']) == 1
    out = json.loads(capsys.readouterr().out)
    assert out[0]["error"] == "Query result must have a question object"


def test_bulk_queries(capsys, tmp_path, query_result):
    mismatched = {**query_result, "answers": [{"type": "MX", "priority": 1, "exchange": "mx.example.com"}]}
    path = _write(tmp_path, [query_result, mismatched])

    assert main(["bulk", "--mode", "queries", "--file", str(path)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out[1]["validation"]["warnings"] == ["Answer type MX does not match question type A"]


def test_table_output(capsys):
    code = main(["record", "--format", "table", "--data", '{"type": "A", "address": "192.0.2.1"}'])
    out = capsys.readouterr().out

    assert code == 0
    assert "Record/Query" in out
    assert "✓ Valid" in out


def test_output_file(capsys, tmp_path):
    target = tmp_path / "results.json"
    code = main(["record", "--output", str(target), "--data", '{"type": "A", "address": "192.0.2.1"}'])

    assert code == 0
    assert f"Results written to {target}" in capsys.readouterr().out
    assert json.loads(target.read_text(encoding="utf-8"))[0]["success"]


def test_examples(capsys):
    assert main(["examples"]) == 0
    assert "usage examples" in capsys.readouterr().out
