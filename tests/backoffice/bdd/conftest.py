"""Shared BDD fixtures and step definitions for the Back office domain."""

import pytest
from backoffice.message.message import ContactMessage
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given("a message from the contact form", target_fixture="contact")
def new_message():
    contact = ContactMessage.submit(name="Ana Lopez", email="ana@example.com", message="Do you deliver on Sundays?")
    contact._events.clear()
    return contact


@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the message status is "{status}"'))
def message_status_is(contact, status):
    assert contact.status == status
