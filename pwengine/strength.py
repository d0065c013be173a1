"""
Strength scorer: rate a password with a fixed battery of seven checks.

The score is the share of passing checks on a 0-100 scale, kept as a float
so a caller can draw a proportional bar. The label comes from fixed
thresholds on that score.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Callable


class StrengthLabel(str, enum.Enum):
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"


# Scores strictly below a threshold get that label; anything else is STRONG.
LABEL_THRESHOLDS = (
    (30.0, StrengthLabel.WEAK),
    (60.0, StrengthLabel.FAIR),
    (80.0, StrengthLabel.GOOD),
)

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^A-Za-z0-9]")

STRENGTH_CHECKS: tuple[tuple[str, Callable[[str], bool]], ...] = (
    ("min_length_8", lambda pwd: len(pwd) >= 8),
    ("min_length_12", lambda pwd: len(pwd) >= 12),
    ("has_lowercase", lambda pwd: _LOWER_RE.search(pwd) is not None),
    ("has_uppercase", lambda pwd: _UPPER_RE.search(pwd) is not None),
    ("has_digit", lambda pwd: _DIGIT_RE.search(pwd) is not None),
    ("has_symbol", lambda pwd: _SYMBOL_RE.search(pwd) is not None),
    ("min_length_16", lambda pwd: len(pwd) >= 16),
)


@dataclass(frozen=True)
class StrengthScore:
    value: float
    label: StrengthLabel
    # Names of the checks that passed, in STRENGTH_CHECKS order.
    passed: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.value:.1f} ({self.label.value})"


def label_for(value: float) -> StrengthLabel:
    for threshold, label in LABEL_THRESHOLDS:
        if value < threshold:
            return label
    return StrengthLabel.STRONG


def score(password: str) -> StrengthScore:
    passed = tuple(name for name, check in STRENGTH_CHECKS if check(password))
    value = min(len(passed) / len(STRENGTH_CHECKS), 1.0) * 100
    return StrengthScore(value=value, label=label_for(value), passed=passed)
