class DurationConverter:
    """Utility for converting between ``2h30m15s`` style text and seconds."""

    UNIT_SECONDS = {"h": 3600, "m": 60, "s": 1}

    @staticmethod
    def parse(text: str) -> int | None:
        """Return the number of seconds in ``text`` or ``None`` if invalid.

        The grammar is permissive: units may repeat or appear in any order
        (``"5s2h"`` is 7205 seconds). Every unit letter needs at least one
        digit in front of it and trailing digits without a unit are rejected.
        """
        text = text.strip().lower()
        if not text:
            return None
        seconds = 0
        digits = ""
        for char in text:
            if char in "0123456789":
                digits += char
            elif char in DurationConverter.UNIT_SECONDS:
                if not digits:
                    return None
                seconds += int(digits) * DurationConverter.UNIT_SECONDS[char]
                digits = ""
            else:
                return None
        if digits:
            return None
        return seconds if seconds > 0 else None

    @staticmethod
    def format(seconds: int) -> str:
        hours, rest = divmod(seconds, 3600)
        minutes, secs = divmod(rest, 60)
        if hours > 0:
            return f"{hours}h{minutes}m{secs}s"
        if minutes > 0:
            return f"{minutes}m{secs}s"
        return f"{secs}s"
