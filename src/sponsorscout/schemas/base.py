"""Shared Pydantic base for camelCase wire documents."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON (the stored document format)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict using the camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
