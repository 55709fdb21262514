"""
Rendering of numbers on output and log lines.
"""


def format_number(value: float) -> str:
    """Render a value the way every output line shows it (e.g. 5.0, 0.1, 1e+16)"""
    return repr(float(value))
