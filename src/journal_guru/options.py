"""Preset choices offered by the composer form.

Each option pairs the value that is submitted (and embedded verbatim in the
instruction) with the label shown to the user.
"""
from typing import List, Tuple

OTHER = "Other"

Option = Tuple[str, str]

AGE_RANGES: List[Option] = [
    ("15-25", "15-25"),
    ("26-35", "26-35"),
    ("36-45", "36-45"),
    ("46-55", "46-55"),
    ("over 55", "Over 55"),
]

ISSUES: List[Option] = [
    ("Being More Present", "Being More Present"),
    ("recent health diagnosis", "Recent Health Diagnosis"),
    ("new job", "New Job"),
    (OTHER, "Other (specify below)"),
]

# "budism" is the value the form has always submitted; keep it stable.
LENSES: List[Option] = [
    ("christian", "Christian"),
    ("stoic", "Stoic"),
    ("budism", "Buddhism"),
    ("rastafarianism", "Rastafarianism"),
    (OTHER, "Other (specify below)"),
]

PROMPT_COUNTS: List[Option] = [
    ("1", "1"),
    ("3-5", "3-5"),
    ("10", "10"),
    ("15", "15"),
]


def values(options: List[Option]) -> List[str]:
    return [value for value, _ in options]


def label_for(options: List[Option], value: str) -> str:
    for opt_value, label in options:
        if opt_value == value:
            return label
    return value
