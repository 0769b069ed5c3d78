import pytest

from wastebin_api.services import HeaderAuthenticator


def test_matching_headers_allowed():
    assert HeaderAuthenticator("m1", "k1").is_allowed("m1", "k1")


@pytest.mark.parametrize("m, k", [("m1", "k2"), ("m2", "k1"), (None, "k1"), ("m1", None), ("M1", "k1")])
def test_mismatch_denied(m, k):
    assert not HeaderAuthenticator("m1", "k1").is_allowed(m, k)


@pytest.mark.parametrize("expected_m, expected_k", [(None, "k1"), ("m1", None), ("", ""), (None, None)])
def test_fails_closed_when_not_configured(expected_m, expected_k):
    authenticator = HeaderAuthenticator(expected_m, expected_k)

    assert not authenticator.configured
    assert not authenticator.is_allowed(expected_m, expected_k)
