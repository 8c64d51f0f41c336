import datetime
import re


class DateTools:
    """Convert between dates and their display (dd/MM/yyyy) and storage (ISO) text."""

    DISPLAY_FORMAT = "%d/%m/%Y"
    _DISPLAY_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4}$")
    _ISO_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

    @staticmethod
    def today() -> datetime.date:
        return datetime.date.today()

    @classmethod
    def parse_display(cls, text: str) -> datetime.date | None:
        """Return the date typed as ``dd/MM/yyyy``, today for blank input or ``None``."""
        text = text.strip()
        if not text:
            return cls.today()
        if not cls._DISPLAY_PATTERN.match(text):
            return None
        try:
            return datetime.datetime.strptime(text, cls.DISPLAY_FORMAT).date()
        except ValueError:
            return None

    @classmethod
    def format_display(cls, date: datetime.date) -> str:
        return f"{date.day:02d}/{date.month:02d}/{date.year:04d}"

    @classmethod
    def parse_iso(cls, text: str) -> datetime.date:
        """Parse a stored ``yyyy-MM-dd`` date, raising ``ValueError`` when malformed."""
        text = text.strip()
        if not cls._ISO_PATTERN.match(text):
            raise ValueError(f"invalid ISO date: {text!r}")
        return datetime.date.fromisoformat(text)

    @staticmethod
    def format_iso(date: datetime.date) -> str:
        return date.isoformat()
