"""Field lookup over JSON-shaped metadata.

exiftool -json emits an array with one flat object per file.
find_field walks arrays (nested ones included) and checks each object
for the first candidate field.
"""

from collections.abc import Sequence

from archive_man.metadata.models import JsonValue


def find_field(value: JsonValue, fields: Sequence[str]) -> JsonValue | None:
    """Search arrays depth-first for the first present candidate field.

    An object is matched against its own keys only, in priority order;
    values nested inside an object are not searched. Arrays are
    searched element by element. A field whose value is null counts as
    absent.

    Args:
        value: Parsed JSON document.
        fields: Candidate field names, highest priority first.

    Returns:
        The value of the first matching field, or None if none is found.

    Example:
        >>> find_field([{"FileName": "a.jpg", "CreateDate": "2020:01:01"}], ["CreateDate"])
        '2020:01:01'
    """
    if isinstance(value, dict):
        for field in fields:
            found = value.get(field)
            if found is not None:
                return found
        return None

    if isinstance(value, list):
        for element in value:
            found = find_field(element, fields)
            if found is not None:
                return found
    return None
