import pytest

from problem_details.pointer import document_path, escape_token, to_json_pointer


@pytest.mark.parametrize(
    "parts, expected",
    [
        ([], ""),
        (["age"], "/age"),
        (["items", 0, "name"], "/items/0/name"),
        (["a/b"], "/a~1b"),
        (["m~n"], "/m~0n"),
        ([""], "/"),
    ],
    ids=["whole_document", "single_key", "nested_index", "slash", "tilde", "empty_key"],
)
def test_to_json_pointer(parts: list[str | int], expected: str) -> None:
    assert to_json_pointer(parts) == expected


def test_escape_token_escapes_tilde_before_slash() -> None:
    # "~1" must become "~01", not "/"-escaped twice
    assert escape_token("~1") == "~01"


@pytest.mark.parametrize(
    "document, loc, expected",
    [
        ({"age": 0}, ["age"], ["age"]),
        ({"tags": ["ok", 5]}, ["tags", 1], ["tags", 1]),
        ({"value": []}, ["value", "int"], ["value"]),
        ({"pet": {"kind": "cat", "meow": "x"}}, ["pet", "cat", "meow"], ["pet", "meow"]),
        ({"pet": {"kind": "dog"}}, ["pet", "dog", "bark"], ["pet", "bark"]),
        ({}, ["name"], ["name"]),
        ({"scores": {"a": "x"}}, ["scores", "a", "[key]"], ["scores", "a"]),
        ({"items": [1]}, ["items", 3], ["items"]),
        (None, ["name"], []),
    ],
    ids=[
        "present_key",
        "array_index",
        "union_member_tag",
        "discriminator_tag",
        "missing_member_after_tag",
        "missing_top_level_key",
        "trailing_tag_on_scalar",
        "index_out_of_range",
        "no_document",
    ],
)
def test_document_path(document: object, loc: list[str | int], expected: list[str | int]) -> None:
    assert document_path(document, loc) == expected
