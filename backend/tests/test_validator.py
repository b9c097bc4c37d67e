"""Tests for object validation against member policies."""

from dataclasses import dataclass, field
from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from governance import ValidationPolicy, governed_members, validate_object
from governance.checks import BaseCheck
from governance.validator import NULL_OBJECT_ERROR, ObjectValidator
from tests.entities import LaborOperationRecord, Part, ServiceTicket


def test_null_object_yields_single_error():
    result = validate_object(None)

    assert result.errors == [NULL_OBJECT_ERROR]
    assert not result.is_valid
    assert result.warnings == []


def test_valid_part_has_no_errors(valid_part: Part):
    result = validate_object(valid_part)

    assert result.is_valid
    assert result.errors == []


def test_invalid_part_reports_each_violation_in_declaration_order(invalid_part: Part):
    result = validate_object(invalid_part)

    assert not result.is_valid
    assert result.errors == [
        "name must be at least 1 characters long",
        "unit_price must be at least 0.0",
        "stock_quantity must be at least 0.0",
    ]


def test_upper_bounds_are_reported():
    part = Part("PART-3", "x" * 101, 200000.0, 20000)

    result = validate_object(part)

    assert result.errors == [
        "name must be no more than 100 characters long",
        "unit_price must be no more than 100000.0",
        "stock_quantity must be no more than 10000.0",
    ]


def test_required_null_member_stops_further_checks():
    part = Part("PART-4", None, 10.0, 1)

    result = validate_object(part)

    assert result.errors == ["name is required but is null"]


def test_optional_null_member_is_skipped(labor_record: LaborOperationRecord):
    assert labor_record.notes is None

    result = validate_object(labor_record)

    assert result.is_valid


@pytest.mark.parametrize("min_length,value", [(1, ""), (3, "ab"), (10, "short"), (5, "")])
def test_too_short_string_yields_exactly_one_length_error(min_length: int, value: str):
    @governed_members(code=ValidationPolicy(min_length=min_length, max_length=20))
    class Coded:
        def __init__(self, code):
            self.code = code

    result = validate_object(Coded(value))

    length_errors = [e for e in result.errors if e.startswith("code must")]
    assert length_errors == [f"code must be at least {min_length} characters long"]


@pytest.mark.parametrize(
    "value,expected",
    [
        (-0.5, ["reading must be at least 0.0"]),
        (0.0, []),
        (50, []),
        (100.0, []),
        (100.01, ["reading must be no more than 100.0"]),
    ],
)
def test_numeric_bounds(value, expected):
    @governed_members(reading=ValidationPolicy(min_value=0.0, max_value=100.0))
    class Gauge:
        def __init__(self, reading):
            self.reading = reading

    assert validate_object(Gauge(value)).errors == expected


def test_decimal_values_are_numeric():
    @governed_members(amount=ValidationPolicy(min_value=0.0))
    class Payment:
        def __init__(self, amount):
            self.amount = amount

    assert validate_object(Payment(Decimal("-1.25"))).errors == ["amount must be at least 0.0"]


def test_values_without_applicable_check_are_accepted():
    @governed_members(
        tags=ValidationPolicy(min_length=5),
        active=ValidationPolicy(min_value=5.0),
    )
    class Tagged:
        def __init__(self):
            self.tags = ["a"]
            self.active = True

    assert validate_object(Tagged()).is_valid


def test_frozen_record_is_validated():
    record = LaborOperationRecord(record_id="LAB-2", description="Fix", hours=30.0, hourly_rate=25.0)

    result = validate_object(record)

    assert result.errors == [
        "description must be at least 5 characters long",
        "hours must be no more than 24.0",
    ]


def test_pydantic_model_members_are_validated():
    ticket = ServiceTicket(ticket_id="SR-2", customer_name="B", labor_hours=-1.0)

    result = validate_object(ticket)

    assert result.errors == [
        "customer_name must be at least 2 characters long",
        "scheduled_for is required but is null",
        "labor_hours must be at least 0.0",
    ]


def test_unreadable_member_is_reported_and_validation_continues():
    @governed_members(
        serial=ValidationPolicy(min_length=3),
        mileage=ValidationPolicy(min_value=0.0),
    )
    class Odometer:
        def __init__(self):
            self.mileage = -1

        @property
        def serial(self):
            raise RuntimeError("sensor offline")

    result = validate_object(Odometer())

    assert result.errors == [
        "Cannot access field serial: sensor offline",
        "mileage must be at least 0.0",
    ]


def test_missing_member_is_reported():
    @governed_members(vin=ValidationPolicy(min_length=17))
    class Chassis:
        pass

    result = validate_object(Chassis())

    assert len(result.errors) == 1
    assert result.errors[0].startswith("Cannot access field vin: ")
    assert "vin" in result.errors[0]


def test_validation_is_idempotent(invalid_part: Part):
    first = validate_object(invalid_part)
    second = validate_object(invalid_part)

    assert first.errors == second.errors
    assert first is not second


def test_custom_check_is_added_to_chain():
    class NoWhitespaceCheck(BaseCheck):
        @property
        def name(self) -> str:
            return "NoWhitespaceCheck"

        def applies(self, value) -> bool:
            return isinstance(value, str)

        def check(self, member, value, policy) -> list[str]:
            return [f"{member} must not contain spaces"] if " " in value else []

    validator = ObjectValidator()
    validator.add_check(NoWhitespaceCheck())

    result = validator.validate(Part("PART-5", "Oil Filter", 12.99, 50))

    assert result.errors == ["name must not contain spaces"]

    validator.remove_check("NoWhitespaceCheck")
    assert validator.validate(Part("PART-5", "Oil Filter", 12.99, 50)).is_valid


def test_crashing_check_is_reported_without_aborting():
    class ExplodingCheck(BaseCheck):
        @property
        def name(self) -> str:
            return "ExplodingCheck"

        def applies(self, value) -> bool:
            return isinstance(value, str)

        def check(self, member, value, policy) -> list[str]:
            raise ValueError("kaboom")

    validator = ObjectValidator(checks=[ExplodingCheck()])

    @dataclass
    class Note:
        text: str = field(metadata={"validation": ValidationPolicy()})
        author: str = field(metadata={"validation": ValidationPolicy()})

    result = validator.validate(Note(text="a", author="b"))

    assert result.errors == [
        "Check 'ExplodingCheck' failed for text: kaboom",
        "Check 'ExplodingCheck' failed for author: kaboom",
    ]


def test_result_string_lists_errors_and_warnings(invalid_part: Part):
    result = validate_object(invalid_part)
    result.add_warning("price looks unusual")

    text = str(result)

    assert text.startswith("Errors: ['name must be at least 1 characters long'")
    assert text.endswith("Warnings: ['price looks unusual']")


@pytest.mark.parametrize(
    "value,expected",
    [
        (10**400, []),
        (-(10**400), ["count must be at least 0.0"]),
        (Decimal("1e400"), []),
    ],
)
def test_values_beyond_float_range_are_compared_exactly(value, expected):
    @governed_members(count=ValidationPolicy(min_value=0.0))
    class Tally:
        def __init__(self, count):
            self.count = count

    assert validate_object(Tally(value)).errors == expected


def test_empty_check_chain_is_respected(invalid_part: Part):
    validator = ObjectValidator(checks=[])

    assert validator.checks == []
    assert validator.validate(invalid_part).is_valid
    assert validator.validate(Part("PART-6", None, 1.0, 1)).errors == ["name is required but is null"]


def test_crashing_check_is_not_logged():
    class ExplodingCheck(BaseCheck):
        @property
        def name(self) -> str:
            return "ExplodingCheck"

        def applies(self, value) -> bool:
            return True

        def check(self, member, value, policy) -> list[str]:
            raise ValueError("kaboom")

    @governed_members(label=ValidationPolicy())
    class Tag:
        def __init__(self):
            self.label = "x"

    with capture_logs() as logs:
        result = ObjectValidator(checks=[ExplodingCheck()]).validate(Tag())

    assert result.errors == ["Check 'ExplodingCheck' failed for label: kaboom"]
    assert logs == []
