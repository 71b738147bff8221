import math


def format_duration(total_seconds: float) -> str:
    """Render a duration the way build logs print it, e.g. ``1 minutes, 15 seconds``.

    Units are never singularised so the output stays stable for log scrapers.
    """
    hours = math.floor(total_seconds / 60.0 / 60.0)
    minutes = math.floor(total_seconds / 60.0 - hours * 60.0)
    seconds = math.floor(total_seconds - hours * 60.0 * 60.0 - minutes * 60.0 + 0.5)

    duration = f"{seconds} seconds"
    if minutes > 0 or hours > 0:
        duration = f"{minutes} minutes, {duration}"
    if hours > 0:
        duration = f"{hours} hours, {duration}"

    return duration
