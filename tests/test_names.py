import pytest

from flappy_face.services import InvalidRequest, normalize_character, normalize_username
from flappy_face.services.names import FALLBACK_USERNAME, MAX_NAME_LENGTH


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("alice", "alice"),
        ("  Alice Smith ", "alice_smith"),
        ("tab\tand  spaces", "tab_and_spaces"),
        ("Bob!!", "bob"),
        ("dash-and_under", "dash-and_under"),
        ("Zoë", "zo"),
    ],
)
def test_normalize_username(raw, expected):
    assert normalize_username(raw) == expected


def test_username_with_nothing_usable_falls_back_to_placeholder():
    assert normalize_username("!!!") == FALLBACK_USERNAME


@pytest.mark.parametrize("raw", [None, "", "   ", 42])
def test_missing_username_is_rejected(raw):
    with pytest.raises(InvalidRequest, match="username required"):
        normalize_username(raw)


def test_username_is_truncated():
    assert len(normalize_username("a" * 100)) == MAX_NAME_LENGTH


def test_normalize_character_accepts_closed_set_only():
    assert normalize_character(" Bird ", ("bird", "pipe")) == "bird"
    with pytest.raises(InvalidRequest, match="invalid character"):
        normalize_character("dragon", ("bird", "pipe"))
    with pytest.raises(InvalidRequest):
        normalize_character(None, ("bird",))
