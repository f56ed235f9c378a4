"""Controller helpers — path id parsing and merging into update input."""

from user_api.api.user_controller import merge_path_id, parse_path_id


def test_parse_path_id_converts_digits():
    assert parse_path_id("12") == 12
    assert parse_path_id("-1") == -1


def test_parse_path_id_passes_through_non_integers():
    assert parse_path_id("abc") == "abc"
    assert parse_path_id("1.5") == "1.5"


def test_merge_path_id_overrides_body_id():
    assert merge_path_id(3, {"id": 9, "name": "X"}) == {"id": 3, "name": "X"}


def test_merge_path_id_without_body():
    assert merge_path_id(3, None) == {"id": 3}


def test_merge_path_id_keeps_non_object_body_for_validation():
    assert merge_path_id(3, ["x"]) == ["x"]
