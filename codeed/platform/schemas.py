from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _as_tag_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    tags = []
    for tag in value:
        tag = str(tag).strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


# Tags arrive from the ORM as an association proxy, not a list
TagList = Annotated[list[str], BeforeValidator(_as_tag_list)]


class ReadSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class UpdateSchema(BaseModel):
    """
    Partial update payload. Fields that were not sent are left alone. An
    explicit null is ignored, except for fields in ``nullable_fields`` where
    it clears the stored value.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, Any]:
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None or field in self.nullable_fields
        }
