import pytest

from scholar_api.core.auth import pin_matches, verify_admin_pin
from scholar_api.core.errors import AdminAuthError


def test_pin_matches_exact_value():
    assert pin_matches("ALOHA", "ALOHA")


@pytest.mark.parametrize("supplied", ["aloha", "ALOHA ", "", None, 1234])
def test_pin_mismatch(supplied):
    assert not pin_matches(supplied, "ALOHA")


def test_unset_expected_pin_never_matches():
    assert not pin_matches("", "")
    assert not pin_matches("anything", None)


def test_verify_admin_pin_raises_on_mismatch():
    verify_admin_pin("rotated-pin", "rotated-pin")
    with pytest.raises(AdminAuthError):
        verify_admin_pin("ALOHA", "rotated-pin")
