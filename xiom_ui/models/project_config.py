"""Project configuration models (xiom-ui.json)."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SCHEMA_URL = "https://xiom-ui.dev/schema.json"


class Style(str, Enum):
    DEFAULT = "default"
    NEW_YORK = "new-york"


class TailwindConfig(BaseModel):
    css: str = Field(..., min_length=1, description="Path to the global CSS file")


class Aliases(BaseModel):
    components: str = Field(..., min_length=1, description="Directory components are written to")
    utils: str = Field(..., min_length=1, description="Utils module path, no extension (e.g. src/lib/utils)")

    @field_validator("components", "utils", mode="before")
    @classmethod
    def strip_value(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v


class ProjectConfig(BaseModel):
    """Contents of xiom-ui.json. Created by `init`, read by `add`."""

    model_config = ConfigDict(populate_by_name=True)

    schema_url: str = Field(default=SCHEMA_URL, alias="$schema")
    style: Style = Style.DEFAULT
    tailwind: Optional[TailwindConfig] = None
    aliases: Aliases

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
