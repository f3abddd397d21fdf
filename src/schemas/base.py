"""Base model for engine inputs and outputs."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EngineModel(BaseModel):
    """Immutable pydantic model serialized with camelCase keys.

    Accepts both snake_case field names and camelCase aliases on input.
    ``to_json_dict()`` produces the plain-JSON shape handed to the boundary.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_json_dict(self) -> dict:
        """Serialize to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")
