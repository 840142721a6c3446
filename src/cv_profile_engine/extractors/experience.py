"""Experience periods and total years."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import UTC, datetime

from cv_profile_core.constants import PRESENT_MARKERS
from cv_profile_core.models.profile import Experience

PERIOD_PATTERN = re.compile(
    r"\d{4}[\s\-]*(?:\d{4}|" + "|".join(re.escape(m) for m in PRESENT_MARKERS) + r")",
    re.IGNORECASE,
)
YEAR_PATTERN = re.compile(r"\d{4}")


def extract_experience(text: str, current_year: int | None = None) -> Experience:
    """Find year ranges and sum their durations.

    Open-ended periods ("2020 - present") end at the current calendar year.
    Overlapping periods are each counted in full.
    """
    periods = tuple(m.group(0) for m in PERIOD_PATTERN.finditer(text))
    return Experience(
        experience_periods=periods,
        experience_years=calculate_experience_years(periods, current_year),
    )


def calculate_experience_years(periods: Iterable[str], current_year: int | None = None) -> int:
    """Sum max(0, end - start) over periods; a lone year ends at current_year."""
    if current_year is None:
        current_year = datetime.now(UTC).year

    total = 0
    for period in periods:
        years = [int(y) for y in YEAR_PATTERN.findall(period)]
        if not years:
            continue
        end = years[1] if len(years) > 1 else current_year
        total += max(0, end - years[0])
    return total
