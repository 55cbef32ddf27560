"""Base model for engine records: camelCase on the wire, snake_case in Python."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FlowableModel(BaseModel):
    """Accepts both alias and field names; ignores fields the engine adds."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self, *, exclude_none: bool = True) -> dict:
        """Dump with engine field names, dropping None values unless asked not to."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)
