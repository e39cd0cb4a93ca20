"""Unit tests for the payment factory."""

import pytest

from pybasics.design_patterns.creational.factory import (
    CreditCard,
    DebitCard,
    PayPal,
    PaymentMethod,
    PaymentType,
    main,
    payment_factory,
)


class TestPaymentFactory:
    """Tests for payment_factory."""

    @pytest.mark.parametrize(
        "payment_type, expected_cls, expected_message",
        [
            (PaymentType.CREDIT_CARD, CreditCard, "Paid using Credit Card"),
            (PaymentType.DEBIT_CARD, DebitCard, "Paid using Debit Card"),
            (PaymentType.PAYPAL, PayPal, "Paid using PayPal"),
        ],
    )
    def test_builds_each_type(self, payment_type, expected_cls, expected_message) -> None:
        """Test that each tag yields its payment method."""
        method = payment_factory(payment_type)

        assert isinstance(method, expected_cls)
        assert method.pay(10.0) == expected_message

    def test_unknown_type_raises(self) -> None:
        """Test that an unsupported tag is rejected."""
        with pytest.raises(ValueError, match="not supported"):
            payment_factory("cash")

    def test_contract_cannot_be_instantiated(self) -> None:
        """Test that the abstract base needs a display_name."""
        with pytest.raises(TypeError):
            PaymentMethod()


def test_main_output(capsys) -> None:
    """Test the demo output."""
    main()
    out = capsys.readouterr().out

    assert "Paid using Credit Card" in out
    assert "Paid using PayPal" in out
    assert "Error: Payment type 'cash' not supported." in out
