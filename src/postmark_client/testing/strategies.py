"""Testing – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package (``pip install "postmark-client[test]"``).
"""
from __future__ import annotations

import string

import hypothesis.strategies as st
from hypothesis.strategies import SearchStrategy

from postmark_client.application.email import OutboundEmailBody
from postmark_client.kernel.types import EmailAddress

_ATOM = string.ascii_letters + string.digits + "!#$%&'*+-/=?^_`{|}~"


def raw_address_strategy() -> SearchStrategy[str]:
    """Strings that pass :class:`EmailAddress` validation."""
    return st.emails()


def email_address_strategy() -> SearchStrategy[EmailAddress]:
    """Hypothesis strategy that generates random :class:`EmailAddress` instances.

    Example::

        @given(email_address_strategy())
        def test_round_trips(addr):
            assert EmailAddress(str(addr)) == addr
    """
    return raw_address_strategy().map(EmailAddress)


def invalid_address_strategy() -> SearchStrategy[str]:
    """Strings with no '@', several '@', or embedded whitespace."""
    atom = st.text(alphabet=_ATOM, min_size=1, max_size=20)
    no_at = st.text(alphabet=_ATOM + ".", max_size=40)
    many_at = st.lists(atom, min_size=3, max_size=5).map("@".join)
    spaced = st.tuples(atom, st.sampled_from(" \t\n\r"), atom, atom).map(
        lambda p: f"{p[0]}{p[1]}{p[2]}@{p[3]}.com"
    )
    return st.one_of(no_at, many_at, spaced)


@st.composite
def outbound_body_strategy(draw: st.DrawFn) -> OutboundEmailBody:
    """Valid bodies with a random recipient, subject and at least one body part."""
    builder = OutboundEmailBody.builder(draw(email_address_strategy()))
    builder.subject(draw(st.text(max_size=50)))
    html = draw(st.one_of(st.none(), st.text(min_size=1, max_size=50)))
    text = draw(st.text(min_size=1, max_size=50)) if html is None else draw(
        st.one_of(st.none(), st.text(min_size=1, max_size=50))
    )
    if html is not None:
        builder.html_body(html)
    if text is not None:
        builder.text_body(text)
    return builder.build().unwrap()


__all__ = [
    "email_address_strategy",
    "invalid_address_strategy",
    "outbound_body_strategy",
    "raw_address_strategy",
]
