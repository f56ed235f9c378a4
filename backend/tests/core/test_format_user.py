"""Response formatting — password stripped, Accept-negotiated projection."""

from user_api.core.domain_types import ResponseShape, User, UserId
from user_api.core.format_user import format_user, negotiate_shape

JOHN = User(id=UserId(1), name="John", email="j@x.com", password="pass123")


def test_full_projection_by_default():
    assert format_user(JOHN) == {"id": 1, "name": "John", "email": "j@x.com"}


def test_simple_projection_drops_email():
    assert format_user(JOHN, "application/vnd.simple+json") == {
        "id": 1, "name": "John",
    }


def test_simple_marker_found_inside_accept_list():
    accept = "application/json, application/vnd.simple+json;q=0.9"
    assert negotiate_shape(accept) is ResponseShape.SIMPLE


def test_unrelated_accept_means_full():
    assert negotiate_shape("application/json") is ResponseShape.FULL
    assert negotiate_shape(None) is ResponseShape.FULL
    assert negotiate_shape("") is ResponseShape.FULL


def test_password_never_projected():
    assert "password" not in format_user(JOHN)
    assert "password" not in format_user(JOHN, "application/vnd.simple+json")
