"""
Display formatting helpers.

Pure functions used to build render snapshots of timers.
"""

EARLY_STAGE_LIMIT = 33
MIDDLE_STAGE_LIMIT = 66


def format_time(seconds: int) -> str:
    """
    Format seconds as minutes and zero-padded seconds.

    Example:
        >>> format_time(299)
        '4:59'
        >>> format_time(59940)
        '999:00'
    """
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def progress_percent(duration: int, time_left: int) -> float:
    """Elapsed share of the duration, 0 to 100."""
    if duration <= 0:
        return 0.0
    elapsed = duration - time_left
    return max(0.0, min(100.0, elapsed / duration * 100))


def progress_stage(percent: float) -> str:
    """
    Bucket a progress percentage into a display stage.

    Returns:
        "early" below 33%, "middle" below 66%, otherwise "final"
    """
    if percent < EARLY_STAGE_LIMIT:
        return "early"
    if percent < MIDDLE_STAGE_LIMIT:
        return "middle"
    return "final"
