from datetime import date

import pytest
from pydantic import ValidationError

from hotel_bonus.core import validation
from hotel_bonus.core.errors import CheckoutValidationError
from hotel_bonus.core.validation import validate_checkout


def make_payload(**overrides):
    payload = {
        "guest_phone": "89161234567",
        "last_name": "  Иванова ",
        "first_name": "Мария",
        "checkin_date": "05.03.2024",
        "loyalty_level": "2 СЕЗОНА",
        "shelter_booking_id": " SH-10442 ",
        "total_amount": "1500",
        "bonus_spent": "300",
    }
    payload.update(overrides)
    return payload


def test_valid_payload_is_normalized():
    record = validate_checkout(make_payload())

    assert record.phone == "9161234567"
    assert record.last_name == "Иванова"
    assert record.first_name == "Мария"
    assert record.checkin_date == date(2024, 3, 5)
    assert record.loyalty_level == "2 СЕЗОНА"
    assert record.booking_id == "SH-10442"
    assert record.total_amount == 1500.0
    assert record.bonus_spent == 300


def test_optional_fields_default():
    payload = make_payload()
    del payload["loyalty_level"]
    del payload["bonus_spent"]

    record = validate_checkout(payload)

    assert record.loyalty_level is None
    assert record.bonus_spent == 0


def test_sequence_values_take_first_element():
    record = validate_checkout(make_payload(first_name=["Мария", "Анна"], total_amount=["2000"]))
    assert record.first_name == "Мария"
    assert record.total_amount == 2000.0


def test_record_is_immutable():
    record = validate_checkout(make_payload())
    with pytest.raises(ValidationError):
        record.phone = "0000000000"


@pytest.mark.parametrize(
    "amount, ok",
    [(1_000_000, True), ("1000000", True), ("1000000.01", False), (0, False), ("-10", False)],
)
def test_amount_boundaries(amount, ok):
    if ok:
        assert validate_checkout(make_payload(total_amount=amount)).total_amount == 1_000_000.0
    else:
        with pytest.raises(CheckoutValidationError) as exc:
            validate_checkout(make_payload(total_amount=amount))
        assert [i.field for i in exc.value.issues] == ["total_amount"]


def test_all_issues_collected_in_field_order():
    payload = make_payload(
        guest_phone="123",
        first_name="   ",
        checkin_date="2024/03/05",
        total_amount="abc",
    )

    with pytest.raises(CheckoutValidationError) as exc:
        validate_checkout(payload)

    fields = [i.field for i in exc.value.issues]
    assert fields == ["guest_phone", "first_name", "checkin_date", "total_amount"]
    assert exc.value.message == exc.value.issues[0].message
    assert "10 цифр" in exc.value.message


def test_missing_required_fields():
    with pytest.raises(CheckoutValidationError) as exc:
        validate_checkout({})

    fields = {i.field for i in exc.value.issues}
    assert fields == {
        "guest_phone",
        "last_name",
        "first_name",
        "checkin_date",
        "shelter_booking_id",
        "total_amount",
    }


@pytest.mark.parametrize(
    "field, value",
    [
        ("last_name", "Я" * 121),
        ("first_name", "Я" * 121),
        ("shelter_booking_id", "B" * 81),
        ("loyalty_level", "x" * 121),
    ],
)
def test_length_limits(field, value):
    with pytest.raises(CheckoutValidationError) as exc:
        validate_checkout(make_payload(**{field: value}))
    assert exc.value.issues[0].field == field


def test_length_limits_inclusive():
    record = validate_checkout(make_payload(last_name="Я" * 120, shelter_booking_id="B" * 80))
    assert len(record.last_name) == 120
    assert len(record.booking_id) == 80


@pytest.mark.parametrize("body", [None, [], "guest", 42])
def test_non_object_body_rejected(body):
    with pytest.raises(CheckoutValidationError) as exc:
        validate_checkout(body)
    assert exc.value.issues[0].field == "body"


@pytest.mark.parametrize(
    "field, value",
    [
        ("last_name", {"x": 1}),
        ("shelter_booking_id", {"id": 7}),
        ("loyalty_level", {"level": 2}),
        ("checkin_date", {"date": "2024-03-05"}),
        ("guest_phone", [["89161234567"]]),
        ("total_amount", {"sum": 1500}),
    ],
)
def test_object_values_are_field_issues(field, value):
    with pytest.raises(CheckoutValidationError) as exc:
        validate_checkout(make_payload(**{field: value}))
    assert [i.field for i in exc.value.issues] == [field]


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"guest_phone": "²" * 10}, "guest_phone"),
        ({"guest_phone": "٩" * 10}, "guest_phone"),
        ({"checkin_date": "٠٥.٠٣.٢٠٢٤"}, "checkin_date"),
        ({"total_amount": "١٥٠٠"}, "total_amount"),
    ],
)
def test_non_ascii_digits_rejected(overrides, field):
    with pytest.raises(CheckoutValidationError) as exc:
        validate_checkout(make_payload(**overrides))
    assert [i.field for i in exc.value.issues] == [field]


@pytest.mark.parametrize("field", ["total_amount", "bonus_spent"])
def test_huge_integers_are_field_issues(field):
    with pytest.raises(CheckoutValidationError) as exc:
        validate_checkout(make_payload(**{field: 10**400}))
    assert [i.field for i in exc.value.issues] == [field]


def test_schema_rejection_becomes_issue(monkeypatch):
    fields = tuple(
        (wire, attr, (lambda value: "²" * 10) if wire == "guest_phone" else check)
        for wire, attr, check in validation.CHECKOUT_FIELDS
    )
    monkeypatch.setattr(validation, "CHECKOUT_FIELDS", fields)

    with pytest.raises(CheckoutValidationError) as exc:
        validate_checkout(make_payload())
    assert [i.field for i in exc.value.issues] == ["guest_phone"]
