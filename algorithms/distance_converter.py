import math
import re


class DistanceConverter:
    """Utility for converting between distance text and meters."""

    M_PER_KM = 1000
    _DECIMAL = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")
    _INTEGER = re.compile(r"^\d+$")

    @staticmethod
    def parse(text: str) -> int | None:
        """Return ``text`` as whole meters or ``None`` if invalid.

        ``"1.5km"`` is 1500, ``"100m"`` is 100 and a bare ``"250"`` is read
        as meters. Kilometers are truncated toward zero.
        """
        text = text.strip().lower()
        if text.endswith("km"):
            value = text[:-2].strip()
            if not DistanceConverter._DECIMAL.match(value):
                return None
            km = float(value)
            if not math.isfinite(km):
                return None
            meters = int(km * DistanceConverter.M_PER_KM)
        else:
            if text.endswith("m"):
                text = text[:-1].strip()
            if not DistanceConverter._INTEGER.match(text):
                return None
            meters = int(text)
        return meters if meters > 0 else None

    @staticmethod
    def format(meters: int) -> str:
        if meters >= DistanceConverter.M_PER_KM:
            return f"{meters / DistanceConverter.M_PER_KM:.1f}km"
        return f"{meters}m"
