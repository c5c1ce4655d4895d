from pydantic_core import PydanticCustomError


def not_null(value):
    """Update shapes treat an omitted field as unchanged, but an explicit null
    for a NOT NULL column is a type error."""
    if value is None:
        raise PydanticCustomError("null_type", "Input may not be null")
    return value
