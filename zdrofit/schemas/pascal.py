from typing import Any

from humps import pascalize
from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator


class PascalModel(BaseModel):
    """
    Base for payloads exchanged with the portal, which names every field in PascalCase.

    Validating with ``context={"strict": True}`` rejects objects carrying fields
    the model does not declare. Without it, unknown fields are ignored.
    """

    model_config = ConfigDict(alias_generator=pascalize, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def reject_unknown_fields(cls, data: Any, info: ValidationInfo) -> Any:
        if not (info.context and info.context.get("strict")):
            return data
        if not isinstance(data, dict):
            return data
        known = set()
        for name, field in cls.model_fields.items():
            known.add(name)
            if field.alias is not None:
                known.add(field.alias)
        unknown = sorted(k for k in data if k not in known)
        if len(unknown) > 0:
            raise ValueError(f"unexpected fields: {', '.join(unknown)}")
        return data
