"""Registry component models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, ValidationInfo


class ComponentFile(BaseModel):
    """One source file shipped by a component."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Path relative to the components directory")
    content: str = ""


class RegistryEntry(BaseModel):
    """Index entry from GET <registry>."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def description_none_to_empty(cls, v: object) -> object:
        return "" if v is None else v


class RegistryIndex(BaseModel):
    """Body of GET <registry>."""

    components: list[RegistryEntry] = Field(default_factory=list)


class Component(BaseModel):
    """Full component definition from GET <registry>/<name>.

    Wire keys are camelCase (devDependencies, registryDependencies); missing
    or null arrays become empty tuples.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    files: tuple[ComponentFile, ...] = ()
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = Field(default=(), alias="devDependencies")
    registry_dependencies: tuple[str, ...] = Field(default=(), alias="registryDependencies")

    @field_validator(
        "description",
        "files",
        "dependencies",
        "dev_dependencies",
        "registry_dependencies",
        mode="before",
    )
    @classmethod
    def null_to_default(cls, v: object, info: ValidationInfo) -> object:
        if v is None:
            return "" if info.field_name == "description" else ()
        return v
