import re

# Identifiers generated by the backend are random (version 4) UUIDs
UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-4[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}$"

_UUID_RE = re.compile(UUID_PATTERN)


def is_uuid(value) -> bool:
    return isinstance(value, str) and _UUID_RE.match(value) is not None
