"""URL path converters for the JSON API."""

MAX_ID = 2**63 - 1


class UserIdConverter:
    """Positive integer that fits the 64-bit primary key column; anything larger does not match (404)."""
    regex = "[0-9]{1,19}"

    def to_python(self, value):
        number = int(value)
        if number > MAX_ID:
            raise ValueError(f"{value} exceeds the largest stored id")
        return number

    def to_url(self, value):
        return str(value)
