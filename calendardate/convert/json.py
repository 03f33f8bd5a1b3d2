"""JSON serialization and deserialization for calendar dates.

This module provides two JSON shapes:

    Tagged dict, for polymorphic payloads:
        {"_type": "CalendarDate", "value": "2024-01-15"}

    Plain string, for embedding dates in ordinary documents:
        json.dumps({"date": d}, cls=CalendarDateJSONEncoder)
        -> '{"date": "2024-01-15"}'

Functions:
    to_json: Convert a CalendarDate to a tagged dict.
    from_json: Create a CalendarDate from a tagged dict.

Classes:
    CalendarDateJSONEncoder: json.JSONEncoder writing dates as ISO strings.

Examples:
    >>> from calendardate import CalendarDate
    >>> from calendardate.convert import to_json, from_json

    >>> data = to_json(CalendarDate.create(2024, 1, 15))
    >>> data['_type']
    'CalendarDate'

    >>> from_json(data) == CalendarDate.create(2024, 1, 15)
    True
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from calendardate.errors import ParseError

if TYPE_CHECKING:
    from calendardate.core.date import CalendarDate

TYPE_TAG = "CalendarDate"


def to_json(value: "CalendarDate") -> dict[str, Any]:
    """Convert a CalendarDate to a JSON-serializable dictionary.

    Raises:
        TypeError: If value is not a CalendarDate.

    Examples:
        >>> from calendardate import CalendarDate
        >>> to_json(CalendarDate.create(2024, 1, 15))
        {'_type': 'CalendarDate', 'value': '2024-01-15'}
    """
    from calendardate.core.date import CalendarDate

    if not isinstance(value, CalendarDate):
        raise TypeError(f"expected CalendarDate, got {type(value).__name__}")

    return {
        "_type": TYPE_TAG,
        "value": value.to_iso_format(),
    }


def from_json(data: dict[str, Any]) -> "CalendarDate":
    """Create a CalendarDate from a JSON dictionary.

    Raises:
        ParseError: If the data is missing required fields or has invalid format.
        TypeError: If `_type` is not "CalendarDate".

    Examples:
        >>> from_json({'_type': 'CalendarDate', 'value': '2024-01-15'})
        CalendarDate.create(2024, 1, 15)
    """
    from calendardate.core.date import CalendarDate

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")
    if type_name != TYPE_TAG:
        raise TypeError(f"unknown type: {type_name!r}")

    value = data.get("value")
    if not value:
        raise ParseError("missing 'value' field for CalendarDate")

    return CalendarDate.from_string(value)


class CalendarDateJSONEncoder(json.JSONEncoder):
    """JSON encoder that serializes CalendarDate values as ISO strings.

    Examples:
        >>> import json
        >>> from calendardate import CalendarDate
        >>> json.dumps({"date": CalendarDate(735485)}, cls=CalendarDateJSONEncoder)
        '{"date": "2013-09-09"}'
    """

    def default(self, o: Any) -> Any:
        from calendardate.core.date import CalendarDate

        if isinstance(o, CalendarDate):
            return o.to_iso_format()
        return super().default(o)


__all__ = [
    "to_json",
    "from_json",
    "CalendarDateJSONEncoder",
]
