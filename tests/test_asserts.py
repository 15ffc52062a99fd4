import pytest

from robutils.asserts import AssertionException, IllegalStateException

EXPECTED_MESSAGE = "Error Message"


def test_assertion_exception_carries_message():
    with pytest.raises(AssertionException) as info:
        raise AssertionException(EXPECTED_MESSAGE)
    assert str(info.value) == EXPECTED_MESSAGE
    assert info.value.message == EXPECTED_MESSAGE


def test_illegal_state_exception_carries_message():
    with pytest.raises(IllegalStateException) as info:
        raise IllegalStateException(EXPECTED_MESSAGE)
    assert str(info.value) == EXPECTED_MESSAGE
    assert info.value.message == EXPECTED_MESSAGE


def test_default_message_is_empty():
    assert str(AssertionException()) == ""
    assert str(IllegalStateException()) == ""


def test_exceptions_are_distinct():
    illegal = IllegalStateException(EXPECTED_MESSAGE)
    assertion = AssertionException(EXPECTED_MESSAGE)
    assert not isinstance(illegal, AssertionException)
    assert not isinstance(assertion, IllegalStateException)
    assert str(illegal) == str(assertion) == EXPECTED_MESSAGE
    with pytest.raises(IllegalStateException, match=EXPECTED_MESSAGE):
        raise illegal