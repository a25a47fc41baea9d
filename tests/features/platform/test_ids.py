import pytest

from codeed.platform.exceptions import InvalidIdFormatError
from codeed.platform.utils.ids import new_id, parse_id


def test_new_ids_are_canonical_and_unique():
    ids = [new_id() for _ in range(100)]
    assert len(set(ids)) == 100
    assert all(parse_id(value) == value for value in ids)


def test_parse_id_normalises_case():
    assert parse_id("01890A5D-AC96-774B-BCCE-B302099A8057") == "01890a5d-ac96-774b-bcce-b302099a8057"


@pytest.mark.parametrize("value", ["", "42", "not-an-id", None])
def test_parse_id_rejects_garbage(value):
    with pytest.raises(InvalidIdFormatError):
        parse_id(value, "course")
