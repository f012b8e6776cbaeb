from uuid import UUID

import pytest

from payment_queries.domain.exceptions import DomainException, InvalidPaymentIdError
from payment_queries.domain.value_objects.payment_id import PaymentId


class TestPaymentIdGenerate:
    def test_generate_creates_valid_payment_id(self) -> None:
        payment_id = PaymentId.generate()

        assert isinstance(payment_id, PaymentId)
        assert isinstance(payment_id.value, UUID)

    def test_generate_creates_unique_ids(self) -> None:
        payment_id_1 = PaymentId.generate()
        payment_id_2 = PaymentId.generate()

        assert payment_id_1 != payment_id_2


class TestPaymentIdFromString:
    def test_from_string_parses_valid_uuid(self) -> None:
        uuid_str = "550e8400-e29b-41d4-a716-446655440000"

        payment_id = PaymentId.from_string(uuid_str)

        assert payment_id.value == UUID(uuid_str)

    def test_from_string_parses_uppercase_uuid(self) -> None:
        payment_id = PaymentId.from_string("550E8400-E29B-41D4-A716-446655440000")

        assert payment_id.value == UUID("550e8400-e29b-41d4-a716-446655440000")

    def test_from_string_raises_for_invalid_uuid(self) -> None:
        with pytest.raises(InvalidPaymentIdError, match="not-a-valid-uuid"):
            PaymentId.from_string("not-a-valid-uuid")

    def test_from_string_raises_for_empty_string(self) -> None:
        with pytest.raises(InvalidPaymentIdError):
            PaymentId.from_string("")

    def test_invalid_payment_id_error_is_domain_and_value_error(self) -> None:
        with pytest.raises(DomainException):
            PaymentId.from_string("nope")
        with pytest.raises(ValueError):
            PaymentId.from_string("nope")


class TestPaymentIdValueSemantics:
    def test_payment_id_is_frozen(self) -> None:
        payment_id = PaymentId.generate()

        with pytest.raises(AttributeError):
            payment_id.value = UUID("550e8400-e29b-41d4-a716-446655440000")  # type: ignore[misc]

    def test_equal_payment_ids_have_same_hash(self) -> None:
        uuid_str = "550e8400-e29b-41d4-a716-446655440000"

        assert hash(PaymentId.from_string(uuid_str)) == hash(PaymentId.from_string(uuid_str))

    def test_str_renders_canonical_uuid(self) -> None:
        payment_id = PaymentId.from_string("550E8400E29B41D4A716446655440000")

        assert str(payment_id) == "550e8400-e29b-41d4-a716-446655440000"
