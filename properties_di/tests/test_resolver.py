"""Property store: merge, lookup and fail-fast loading."""

from __future__ import annotations

import json

import pytest

from properties_di.base.errors import ErrorCode, FileReadError
from properties_di.base.logging import get_logger
from properties_di.discovery.property_file import PropertyFile
from properties_di.store.resolver import PropertyResolver, load_properties


@pytest.mark.parametrize(
    "key, expected",
    [
        ("myProp", "myVal"),
        ("myProp2", "myVal2"),
        ("myProp3", None),
    ],
)
def test_get_value(base_resolver, key, expected):
    assert base_resolver.get_value(key) == expected  # nosec B101 - test assertion


def test_get_is_idempotent(base_resolver):
    first = base_resolver.get("myProp")
    assert [base_resolver.get("myProp") for _ in range(3)] == [first] * 3  # nosec B101 - test assertion
    assert base_resolver.get(None) is None  # nosec B101 - test assertion


def test_non_property_files_are_not_loaded(base_resolver):
    assert "notProperty" not in base_resolver  # nosec B101 - test assertion


def test_mapping_is_read_only(base_resolver):
    mapping = base_resolver.as_mapping()
    with pytest.raises(TypeError):
        mapping["myProp"] = "changed"  # type: ignore[index]
    assert base_resolver.get_value("myProp") == "myVal"  # nosec B101 - test assertion


def test_constructor_snapshots_its_input():
    source = {"a": "1"}
    resolver = PropertyResolver(source)
    source["a"] = "2"
    assert resolver.get_value("a") == "1"  # nosec B101 - test assertion
    assert len(resolver) == 1  # nosec B101 - test assertion
    assert resolver.keys() == frozenset({"a"})  # nosec B101 - test assertion


def test_round_trip_of_written_values(write_properties):
    path = write_properties("app.properties", "first.key=alpha beta\nsecond.key = 42\n")
    resolver = PropertyResolver.from_files([path])
    assert resolver.get_value("first.key") == "alpha beta"  # nosec B101 - test assertion
    assert resolver.get_value("second.key") == "42"  # nosec B101 - test assertion


def test_later_file_overwrites_earlier_file(write_properties, tmp_path, capsys):
    get_logger("properties_di.tests")
    early = write_properties("a.properties", "shared=early\nonly.a=1\n")
    late = write_properties("b.properties", "shared=late\nonly.b=2\n")

    merged = load_properties([PropertyFile.of(early), PropertyFile.of(late)])

    assert dict(merged) == {"shared": "late", "only.a": "1", "only.b": "2"}  # nosec B101 - test assertion
    events = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.strip()]
    overridden = [e for e in events if e.get("event") == "properties.key_overridden"]
    assert len(overridden) == 1  # nosec B101 - test assertion
    assert overridden[0]["key"] == "shared"  # nosec B101 - test assertion
    assert overridden[0]["level"] == "WARNING"  # nosec B101 - test assertion


def test_colliding_roots_resolve_to_some_value(tmp_path, write_properties):
    write_properties("x.properties", "dup=one\n", root=tmp_path / "r1")
    write_properties("y.properties", "dup=two\n", root=tmp_path / "r2")
    resolver = PropertyResolver.from_roots([tmp_path / "r1", tmp_path / "r2"])
    assert resolver.get_value("dup") in {"one", "two"}  # nosec B101 - test assertion


def test_missing_file_aborts_loading(tmp_path, write_properties):
    good = write_properties("good.properties", "a=1\n")
    missing = tmp_path / "missing.properties"

    with pytest.raises(FileReadError) as excinfo:
        PropertyResolver.from_files([good, missing])

    err = excinfo.value
    assert err.code is ErrorCode.FILE_READ  # nosec B101 - test assertion
    assert err.path == str(missing)  # nosec B101 - test assertion
    assert isinstance(err.__cause__, FileNotFoundError)  # nosec B101 - test assertion


def test_directory_passed_as_file_is_a_read_error(tmp_path):
    with pytest.raises(FileReadError):
        load_properties([PropertyFile.of(tmp_path)])


def test_malformed_escape_is_a_read_error(write_properties):
    path = write_properties("bad.properties", "bad=\\u00G1\n")
    with pytest.raises(FileReadError) as excinfo:
        PropertyResolver.from_files([path])
    assert isinstance(excinfo.value.__cause__, ValueError)  # nosec B101 - test assertion


def test_default_encoding_is_latin1(write_properties):
    path = write_properties("latin.properties", data=b"word=caf\xe9\n")
    assert PropertyResolver.from_files([path]).get_value("word") == "café"  # nosec B101 - test assertion


def test_undecodable_file_is_a_read_error(write_properties):
    path = write_properties("latin.properties", data=b"word=caf\xe9\n")
    with pytest.raises(FileReadError) as excinfo:
        PropertyResolver.from_files([path], encoding="utf-8")
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)  # nosec B101 - test assertion
