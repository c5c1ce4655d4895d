import uuid


def new_id() -> str:
    """Opaque primary key for a new row."""
    return str(uuid.uuid4())
