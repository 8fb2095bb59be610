# clockspeed/utils/format.py


def format_clock_speed(value: float) -> str:
    """
    Multiplier -> percentage for display, e.g. 2.0 -> "200.0%".
    """
    return f"{value * 100:.1f}%"
