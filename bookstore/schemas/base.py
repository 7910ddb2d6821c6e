from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):  # type: ignore[misc]
    """
    Base for every transfer object exchanged over the wire.

    Fields are declared in snake_case and serialized in camelCase. Both
    spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
