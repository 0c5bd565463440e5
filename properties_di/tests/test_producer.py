"""Typed lookups: key resolution order, required handling and number parsing."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from properties_di.base.dto.lookup_request import PropertyLookupRequest, TargetType
from properties_di.base.errors import (
    ErrorCode,
    MissingRequiredPropertyError,
    PropertyTypeConversionError,
)
from properties_di.injection.producer import PropertyValueProducer
from properties_di.injection.result import LookupStatus
from properties_di.store.resolver import PropertyResolver


def _producer(values):
    return PropertyValueProducer(PropertyResolver(values))


def test_fixture_values_are_typed(producer):
    assert producer.get_double_value(PropertyLookupRequest(key="myArbitraryKey")) == 22.15  # nosec B101
    assert producer.get_integer_value(PropertyLookupRequest(key="myArbitraryKeyInt")) == 9  # nosec B101
    assert producer.get_string_value(PropertyLookupRequest(key="myProp3")) == "myVal3"  # nosec B101


def test_member_name_is_the_last_fallback(producer):
    request = PropertyLookupRequest(owner="pkg.Bean", member="myProp")
    assert producer.get_string_value(request) == "myVal"  # nosec B101


def test_qualified_identifier_wins_over_member():
    producer = _producer({"pkg.Bean.name": "qualified", "name": "bare"})
    request = PropertyLookupRequest(owner="pkg.Bean", member="name")
    result = producer.resolve(request)
    assert result.status is LookupStatus.OK  # nosec B101
    assert result.key == "pkg.Bean.name"  # nosec B101
    assert result.value == "qualified"  # nosec B101


def test_explicit_key_disables_fallback():
    producer = _producer({"name": "bare", "pkg.Bean.name": "qualified"})
    request = PropertyLookupRequest(key="other", owner="pkg.Bean", member="name", required=False)
    assert producer.get_string_value(request) is None  # nosec B101


@pytest.mark.parametrize("blank", ["", "   ", "\t"])
def test_blank_explicit_key_falls_back(blank):
    producer = _producer({"name": "bare"})
    request = PropertyLookupRequest(key=blank, owner="pkg.Bean", member="name")
    assert request.explicit_key is None  # nosec B101
    assert producer.get_string_value(request) == "bare"  # nosec B101


def test_required_missing_names_the_consumer():
    producer = _producer({})
    request = PropertyLookupRequest(owner="pkg.Owner", member="missing")

    with pytest.raises(MissingRequiredPropertyError) as excinfo:
        producer.get_typed_value(request)

    err = excinfo.value
    assert err.code is ErrorCode.MISSING_REQUIRED  # nosec B101
    assert err.key == "pkg.Owner.missing"  # nosec B101
    assert "pkg.Owner.missing" in err.message  # nosec B101


def test_required_missing_explicit_key_is_reported():
    producer = _producer({})
    with pytest.raises(MissingRequiredPropertyError) as excinfo:
        producer.get_string_value(PropertyLookupRequest(key="app.url"))
    assert excinfo.value.key == "app.url"  # nosec B101


def test_optional_missing_yields_none_without_error():
    producer = _producer({})
    request = PropertyLookupRequest(owner="pkg.Owner", member="missing", required=False, target_type=TargetType.INTEGER)

    result = producer.resolve(request)

    assert result.status is LookupStatus.MISSING  # nosec B101
    assert result.error is None  # nosec B101
    assert producer.get_typed_value(request) is None  # nosec B101


def test_missing_required_is_a_result_not_an_exception():
    result = _producer({}).resolve(PropertyLookupRequest(member="absent"))
    assert result.status is LookupStatus.MISSING  # nosec B101
    assert isinstance(result.error, MissingRequiredPropertyError)  # nosec B101
    assert result.value_or("fallback") == "fallback"  # nosec B101


def test_bad_number_carries_key_and_raw_value():
    producer = _producer({"port": "80a"})
    request = PropertyLookupRequest(key="port", target_type=TargetType.INTEGER)

    result = producer.resolve(request)
    assert result.status is LookupStatus.TYPE_ERROR  # nosec B101

    with pytest.raises(PropertyTypeConversionError) as excinfo:
        result.unwrap()
    err = excinfo.value
    assert err.code is ErrorCode.TYPE_CONVERSION  # nosec B101
    assert err.key == "port"  # nosec B101
    assert err.raw_value == "80a"  # nosec B101
    assert err.target_type == "integer"  # nosec B101
    assert isinstance(err.__cause__, ValueError)  # nosec B101


def test_string_target_never_fails_conversion():
    assert _producer({"x": "not a number"}).get(key="x") == "not a number"  # nosec B101


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("9", 9),
        ("+9", 9),
        ("-12", -12),
        ("007", 7),
        ("2147483648", 2147483648),
    ],
)
def test_integer_accepts_signed_digits(raw, expected):
    assert _producer({"n": raw}).get(key="n", target_type=TargetType.INTEGER) == expected  # nosec B101


@pytest.mark.parametrize("raw", ["", " 9", "9 ", "1_000", "0x10", "9.0", "nine", "+", "٣"])
def test_integer_rejects_everything_else(raw):
    with pytest.raises(PropertyTypeConversionError):
        _producer({"n": raw}).get(key="n", target_type=TargetType.INTEGER)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("22.15", 22.15),
        ("-1", -1.0),
        ("1e3", 1000.0),
        (" 2.5 ", 2.5),
        ("Infinity", math.inf),
    ],
)
def test_double_accepts_float_literals(raw, expected):
    assert _producer({"d": raw}).get(key="d", target_type=TargetType.DOUBLE) == expected  # nosec B101


def test_double_accepts_nan():
    assert math.isnan(_producer({"d": "NaN"}).get(key="d", target_type=TargetType.DOUBLE))  # nosec B101


@pytest.mark.parametrize("raw", ["", "abc", "1_000.5", "1.2.3", "22,15"])
def test_double_rejects_malformed(raw):
    with pytest.raises(PropertyTypeConversionError):
        _producer({"d": raw}).get(key="d", target_type=TargetType.DOUBLE)


def test_explicit_fallback_keys_are_tried_in_order():
    producer = _producer({"second": "2", "third": "3"})
    assert producer.get(fallback_keys=("first", "second", "third")) == "2"  # nosec B101


def test_explicit_fallback_keys_replace_member_derivation():
    producer = _producer({"name": "bare"})
    request = PropertyLookupRequest(member="name", fallback_keys=("alias",), required=False)
    assert request.candidate_keys() == ("alias",)  # nosec B101
    assert producer.get_string_value(request) is None  # nosec B101


def test_candidate_keys_are_deduplicated():
    request = PropertyLookupRequest(fallback_keys=("a", "b", "a"))
    assert request.candidate_keys() == ("a", "b")  # nosec B101


def test_request_needs_some_identifier():
    with pytest.raises(ValidationError):
        PropertyLookupRequest()
    with pytest.raises(ValidationError):
        PropertyLookupRequest(key="  ", owner="pkg.Bean")


def test_request_is_frozen():
    request = PropertyLookupRequest(key="a")
    with pytest.raises(ValidationError):
        request.key = "b"  # type: ignore[misc]
    assert request.with_target(TargetType.DOUBLE).target_type is TargetType.DOUBLE  # nosec B101
    assert request.target_type is TargetType.STRING  # nosec B101


def test_get_is_repeatable(producer):
    request = PropertyLookupRequest(key="myArbitraryKeyInt", target_type=TargetType.INTEGER)
    assert {producer.get_typed_value(request) for _ in range(5)} == {9}  # nosec B101
