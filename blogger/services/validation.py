from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from blogger.errors.resource import ValidationError
from blogger.errors.validation import first_error_message


def validate_payload[SchemaT: BaseModel](schema: type[SchemaT], data: Any) -> SchemaT:
    """
    Validate a raw request body against ``schema``.

    Args:
        schema: Pydantic model describing the body
        data: Decoded JSON body, or an already-built ``schema`` instance

    Returns:
        SchemaT: The validated body

    Raises:
        ValidationError: With the first field error as its message
    """
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(first_error_message(e)) from e
