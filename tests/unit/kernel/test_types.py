"""Unit tests for kernel types."""

from __future__ import annotations

import pytest
from hypothesis import given

from postmark_client.kernel.errors import InvalidEmailAddressError, ValidationError
from postmark_client.kernel.types import EmailAddress, Err, Ok, SecretToken
from postmark_client.testing.strategies import invalid_address_strategy, raw_address_strategy


# ---------------------------------------------------------------------------
# EmailAddress
# ---------------------------------------------------------------------------


class TestEmailAddress:
    def test_valid_address(self) -> None:
        addr = EmailAddress("jimmie@example.com")
        assert str(addr) == "jimmie@example.com"
        assert addr.local_part == "jimmie"
        assert addr.domain == "example.com"

    def test_case_is_preserved(self) -> None:
        assert str(EmailAddress("Jimmie.Lovell@Example.COM")) == "Jimmie.Lovell@Example.COM"

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "jimmieomlovelldomain.com",
            "jimmielovell@domaincom",
            "jimmielovell",
            "@domains.com",
            "a@@b.com",
            "a@b@c.com",
            "jim lovell@domain.com",
            " jim@domain.com",
            "jim@domain.com\n",
            "jim@.com",
            "jim@domain.",
            "jim@domain..com",
        ],
    )
    def test_invalid_addresses_raise(self, raw: str) -> None:
        with pytest.raises(InvalidEmailAddressError):
            EmailAddress(raw)

    def test_invalid_error_is_validation_error(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            EmailAddress("nope")
        assert exc_info.value.code == "invalid_email_address"
        assert exc_info.value.errors[0]["field"] == "email"

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidEmailAddressError):
            EmailAddress(42)  # type: ignore[arg-type]

    def test_parse_returns_ok(self) -> None:
        result = EmailAddress.parse("a@b.io")
        assert isinstance(result, Ok)
        assert result.unwrap() == EmailAddress("a@b.io")

    def test_parse_returns_err(self) -> None:
        result = EmailAddress.parse("not an email")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidEmailAddressError)

    def test_parse_is_deterministic(self) -> None:
        assert EmailAddress.parse("x@y.z") == EmailAddress.parse("x@y.z")

    def test_coerce_accepts_both(self) -> None:
        addr = EmailAddress("a@b.com")
        assert EmailAddress.coerce(addr) is addr
        assert EmailAddress.coerce("a@b.com") == addr

    def test_immutable(self) -> None:
        addr = EmailAddress("a@b.com")
        with pytest.raises((AttributeError, TypeError)):
            addr.value = "c@d.com"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({EmailAddress("a@b.com"), EmailAddress("a@b.com")}) == 1

    @given(raw_address_strategy())
    def test_valid_addresses_round_trip(self, raw: str) -> None:
        result = EmailAddress.parse(raw)
        assert result.is_ok()
        assert str(result.unwrap()) == raw

    @given(invalid_address_strategy())
    def test_invalid_addresses_never_parse(self, raw: str) -> None:
        assert EmailAddress.parse(raw).is_err()


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


class TestResult:
    def test_ok_unwrap(self) -> None:
        assert Ok(3).unwrap() == 3
        assert Ok(3).is_ok() and not Ok(3).is_err()

    def test_err_unwrap_raises_carried_error(self) -> None:
        err = ValueError("boom")
        with pytest.raises(ValueError, match="boom"):
            Err(err).unwrap()

    def test_unwrap_or(self) -> None:
        assert Err(ValueError()).unwrap_or(5) == 5
        assert Ok(1).unwrap_or(5) == 1

    def test_unwrap_err(self) -> None:
        err = ValueError("x")
        assert Err(err).unwrap_err() is err
        with pytest.raises(ValueError):
            Ok(1).unwrap_err()

    def test_map(self) -> None:
        assert Ok(2).map(lambda v: v * 10) == Ok(20)
        err = Err(ValueError())
        assert err.map(lambda v: v) is err


# ---------------------------------------------------------------------------
# SecretToken
# ---------------------------------------------------------------------------


class TestSecretToken:
    def test_repr_and_str_are_redacted(self) -> None:
        token = SecretToken("server-token-123")
        assert "server-token-123" not in repr(token)
        assert "server-token-123" not in str(token)
        assert "server-token-123" not in f"{token}"

    def test_expose_returns_value(self) -> None:
        assert SecretToken("abc").expose() == "abc"

    def test_equality(self) -> None:
        assert SecretToken("abc") == SecretToken("abc")
        assert SecretToken("abc") != SecretToken("abd")

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_rejected(self, value: str) -> None:
        with pytest.raises(ValidationError):
            SecretToken(value)
