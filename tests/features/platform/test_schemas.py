from typing import ClassVar, Optional

from codeed.platform.schemas import UpdateSchema


class NoteUpdate(UpdateSchema):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"attachment"})

    title: Optional[str] = None
    attachment: Optional[str] = None


def test_unsent_fields_are_left_out():
    assert NoteUpdate(title="x").changes() == {"title": "x"}
    assert NoteUpdate().changes() == {}


def test_explicit_null_only_kept_for_nullable_fields():
    assert NoteUpdate(title=None, attachment=None).changes() == {"attachment": None}
