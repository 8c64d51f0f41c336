class MathTools:
    """Provides the numeric derivations used for workout comparisons."""

    M_PER_KM: int = 1000

    @staticmethod
    def total_reps(sets: int, reps: int) -> int:
        """Return the total repetitions performed over all sets."""
        return sets * reps

    @staticmethod
    def cardio_volume(duration_seconds: int, sets: int) -> int:
        """Return the total time under effort in seconds."""
        return duration_seconds * sets

    @staticmethod
    def speed_m_per_min(distance_m: int, duration_seconds: int) -> float:
        """Return average speed in meters per minute, or 0.0 without elapsed time."""
        if duration_seconds <= 0:
            return 0.0
        return distance_m / (duration_seconds / 60.0)

    @classmethod
    def format_speed_delta(cls, delta: float) -> str:
        """Format a speed change, switching to km/min from 1000 m/min upward."""
        if delta >= cls.M_PER_KM:
            return f"{delta / cls.M_PER_KM:.2f} km/min"
        return f"{delta:.2f} m/min"
