import datetime
import math

DATE_FORMATS = ("%Y-%m-%dT%H:%M:%S", "%Y-%m-%d", "%b %d, %Y")


def calculate_reading_time(text: str, words_per_minute: int = 240) -> int:
    words = text.split()
    return math.ceil(len(words) / words_per_minute) or 1


def parse_date(value) -> datetime.datetime:
    """Parse a frontmatter date into a naive UTC datetime."""
    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, datetime.date):
        parsed = datetime.datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        parsed = _parse_date_string(value.strip())
    else:
        raise ValueError(f"Unsupported date value: {value!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return parsed


def _parse_date_string(value: str) -> datetime.datetime:
    # fromisoformat only understands a trailing "Z" from 3.11 on
    iso_value = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.datetime.fromisoformat(iso_value)
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise ValueError(f"Unparseable date: {value!r}")
