import uuid

from uuid_extension import uuid7

from codeed.platform.exceptions import InvalidIdFormatError


def parse_id(value: str, entity: str = "record") -> str:
    """
    Validate an id taken from a path, query or payload and return it in
    canonical form. Raises InvalidIdFormatError for anything that is not a UUID.
    """
    try:
        return str(uuid.UUID(str(value)))
    except (TypeError, ValueError):
        raise InvalidIdFormatError(f"Invalid {entity} id format: {value}")


def new_id() -> str:
    # stored ids use the same canonical form lookups are normalised to
    return parse_id(str(uuid7()))
