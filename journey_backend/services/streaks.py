"""
streaks.py — Journal streaks
Recomputed from the full entry history on every call; nothing is persisted.
"""

from datetime import date, timedelta
from typing import Iterable

ONE_DAY = timedelta(days=1)


def calculate_streaks(entry_dates: Iterable[date], today: date) -> tuple[int, int]:
    """Return (current_streak, longest_streak) for a user's entry dates.

    The current streak counts back from today, with a 1-day grace: a user who
    hasn't logged TODAY yet keeps the run that ended yesterday. The longest
    streak gets no such grace, it is the longest run anywhere in the history.
    """
    dates = sorted(set(entry_dates), reverse=True)
    if not dates:
        return 0, 0

    current = 0
    expected = today
    yesterday = today - ONE_DAY
    for d in dates:
        if d == expected:
            current += 1
            expected = d - ONE_DAY
        elif d < expected:
            if current == 0 and d == yesterday:
                current = 1
                expected = d - ONE_DAY
            else:
                # Missing day
                break
        # Entries dated after `expected` (future-dated) are skipped

    longest = 0
    run = 1
    for newer, older in zip(dates, dates[1:]):
        if newer - ONE_DAY == older:
            run += 1
        else:
            longest = max(longest, run)
            run = 1
    longest = max(longest, run)

    return current, longest
