"""
Naming helpers for generated members.

Field names are used verbatim: no sanitizing, escaping or case conversion
beyond the accessor prefix.
"""

GETTER_PREFIX = "get"


def capitalize_first(name: str) -> str:
    """
    Uppercase the first character and leave the rest unchanged.

    ``"firstName"`` becomes ``"FirstName"``; empty or blank names are returned
    as they are.
    """
    if not name or not name.strip():
        return name
    return name[0].upper() + name[1:]


def accessor_name(prefix: str, field_name: str) -> str:
    """Build an accessor name such as ``getFirstName``."""
    return f"{prefix}{capitalize_first(field_name)}"


def getter_name(field_name: str) -> str:
    """Name of the getter generated for a field."""
    return accessor_name(GETTER_PREFIX, field_name)
