import pytest

from gotest2rdjsonl.models import Diagnostic, Location, Position, Range, Severity, TestEvent


def test_event_from_go_test_record():
    ev = TestEvent.from_dict(
        {
            "Time": "2024-05-01T10:00:00.1+09:00",
            "Action": "output",
            "Package": "example.com/pkg",
            "Test": "TestFoo",
            "Output": "    foo_test.go:3: boom\n",
        }
    )
    assert ev.action == "output"
    assert ev.package == "example.com/pkg"
    assert ev.test == "TestFoo"
    assert ev.output == "    foo_test.go:3: boom\n"
    assert ev.time == "2024-05-01T10:00:00.1+09:00"
    assert ev.elapsed == 0.0


def test_event_keys_are_case_insensitive_and_unknown_keys_ignored():
    ev = TestEvent.from_dict({"action": "fail", "ELAPSED": 1.5, "FailedBuild": "x"})
    assert ev.action == "fail"
    assert ev.elapsed == 1.5
    assert ev.output == ""


def test_event_null_fields_default_to_empty():
    ev = TestEvent.from_dict({"Action": "pass", "Test": None})
    assert ev.test == ""


def test_event_rejects_non_string_output():
    with pytest.raises(TypeError, match="output"):
        TestEvent.from_dict({"Action": "output", "Output": 12})


def test_severity_values():
    assert [int(s) for s in Severity] == [0, 1, 2, 3]
    assert Severity.ERROR == 1
    assert Severity.INFO == 3


def test_position_omits_unset_members():
    assert Position().to_dict() == {}
    assert Position(line=4).to_dict() == {"line": 4}
    assert Position(line=4, column=2).to_dict() == {"line": 4, "column": 2}


def test_diagnostic_rdf_shape():
    diag = Diagnostic(
        message="foo/bar.go:42: boom",
        severity=Severity.ERROR,
        location=Location(path="foo/bar.go", range=Range(start=Position(line=42))),
    )
    assert diag.to_dict() == {
        "message": "foo/bar.go:42: boom",
        "severity": 1,
        "location": {
            "path": "foo/bar.go",
            "range": {"start": {"line": 42}, "end": {}},
        },
    }


def test_diagnostic_without_location():
    assert Diagnostic(message="x").to_dict() == {"message": "x", "severity": 0, "location": None}
    assert Location(path="a.go").to_dict() == {"path": "a.go", "range": None}


def test_string_forms():
    loc = Location(path="a.go", range=Range(start=Position(line=3)))
    assert str(loc) == 'path:"a.go" start: line:3 end:'
    assert str(Location(path="a.go")) == 'path:"a.go"'
    assert str(Position(line=1, column=2)) == " line:1 column:2"
    diag = Diagnostic(message="m\n", severity=Severity.INFO, location=loc)
    assert str(diag) == "severity:INFO location:{path:\"a.go\" start: line:3 end:} message:'m\\n'"


@pytest.mark.parametrize("elapsed", ["1.5", True, [1], {"s": 1}])
def test_event_rejects_non_numeric_elapsed(elapsed):
    with pytest.raises(TypeError, match="elapsed"):
        TestEvent.from_dict({"Action": "pass", "Elapsed": elapsed})


def test_event_accepts_integer_elapsed():
    assert TestEvent.from_dict({"Action": "pass", "Elapsed": 2}).elapsed == 2.0
