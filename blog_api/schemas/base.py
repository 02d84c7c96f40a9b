"""Schema Base: shared pydantic configuration for every API schema.

Invariants:
    - alias_generator=to_camel: creation_date <-> creationDate, user_id <-> userId
    - from_attributes=True: ORM objects validate directly into response schemas
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for all API schemas."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessEnvelope(BaseModel):
    """Mixin merging the success marker into a single-object body."""
    success: bool = True
