"""The named-image record shown in the gallery grid."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

DEFAULT_NAME = "Unknown"


class Person(BaseModel):
    """One named reference to an imported image.

    The record never holds image bytes. ``image_reference`` is the filename the
    image library wrote on import and cannot change once the record exists;
    only ``display_name`` is edited afterwards.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    display_name: str = Field(
        default=DEFAULT_NAME,
        alias="name",
        description="User-editable label shown under the thumbnail.",
    )
    image_reference: str = Field(
        alias="image",
        min_length=1,
        frozen=True,
        description="Filename of the imported image inside the data directory.",
    )

    def as_dict(self) -> dict[str, str]:
        return self.model_dump(mode="json", by_alias=True)


# Wire format for the whole collection: a JSON array of {"name", "image"} objects.
PEOPLE_ADAPTER: TypeAdapter[list[Person]] = TypeAdapter(list[Person])
