"""Property path composition: ``company.addresses[2].city.id``."""


def join_property(prefix: str, name: str) -> str:
    """Append a property name to a path prefix, omitting the dot for the root."""
    if not prefix:
        return name
    return f"{prefix}.{name}"


def join_index(prefix: str, index: int) -> str:
    """Append a collection index to a path prefix."""
    return f"{prefix}[{index}]"
