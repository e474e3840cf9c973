from datetime import date, datetime

from core.errors import InvalidDate
from models.metric import DateRange

_DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: str | None, param: str) -> date:
    """Strict YYYY-MM-DD; unpadded months or days are rejected."""
    if not value:
        raise InvalidDate(param, value)
    try:
        parsed = datetime.strptime(value, _DATE_FORMAT).date()
    except ValueError:
        raise InvalidDate(param, value) from None
    # zero-padded YYYY-MM-DD only
    if parsed.isoformat() != value:
        raise InvalidDate(param, value)
    return parsed


def parse_date_range(start: str | None, end: str | None) -> DateRange:
    """Parse the `from`/`to` query values; raises InvalidDate or InvertedRange."""
    return DateRange(parse_date(start, "from"), parse_date(end, "to"))
