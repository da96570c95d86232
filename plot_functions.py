"""
Functions and sampling for the function plotter.

The three curves are fixed closed-form expressions written with numpy so
they accept scalars as well as arrays.
"""
import math
from dataclasses import dataclass

import numpy as np

# Defaults used when an input field cannot be parsed
DEFAULT_XMIN = -10.0
DEFAULT_XMAX = 10.0
DEFAULT_YMIN = -10.0
DEFAULT_YMAX = 10.0
DEFAULT_STEP = 0.1


def f1(x):
    """f1(x) = sin(x) + x² - x/3"""
    return np.sin(x) + x * x - x / 3.0


def f2(x):
    """f2(x) = cos(x)·x + √|x|"""
    return np.cos(x) * x + np.sqrt(np.abs(x))


def f3(x):
    """f3(x) = tan(x/2) + x/5 - x²/10"""
    return np.tan(x / 2.0) + x / 5.0 - (x * x) / 10.0


# (name, label, callable), in plotting order
FUNCTIONS = [
    ('f1', 'f1(x) = sin(x) + x² - x/3', f1),
    ('f2', 'f2(x) = cos(x)·x + √|x|', f2),
    ('f3', 'f3(x) = tan(x/2) + x/5 - x²/10', f3),
]


@dataclass(frozen=True)
class SampleSet:
    """One function evaluated over an interval, ordered by x."""
    name: str
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self):
        self.x.flags.writeable = False
        self.y.flags.writeable = False

    def __len__(self):
        return len(self.x)


def parse_number(text, default):
    """Parse a field value, falling back to ``default`` for anything that is not a finite number."""
    text = text.strip()
    # float() would accept "1_000" and non-ASCII digits, a plain numeric field does not
    if not text.isascii() or "_" in text:
        return default
    try:
        value = float(text)
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return value


def effective_step(step):
    if step <= 0:
        return DEFAULT_STEP
    return step


def sample_range(xmin, xmax, step):
    """
    x values from xmin while x <= xmax.

    x is advanced by repeated addition, so accumulated rounding decides
    whether a sample lands on (or just short of) xmax.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    xs = []
    x = xmin
    while x <= xmax:
        xs.append(x)
        next_x = x + step
        # step is below the float resolution at x
        if next_x == x:
            break
        x = next_x
    return np.array(xs, dtype=float)


def sample_function(name, func, xmin, xmax, step):
    x = sample_range(xmin, xmax, step)
    y = np.asarray(func(x), dtype=float)
    return SampleSet(name, x, y)
