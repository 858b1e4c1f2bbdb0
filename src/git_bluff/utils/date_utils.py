"""Date window resolution for the command-line date options.

Turns the ``--date`` / ``--from`` / ``--to`` combination into a
:class:`~git_bluff.models.DateWindow`. These are pure functions; the
caller supplies "today" so results are reproducible in tests.
"""

from datetime import date
from typing import Optional

from ..models import DateWindow


class DateOptionError(ValueError):
    """Raised for contradictory or out-of-order date options."""


def resolve_date_window(
    today: date,
    on_date: Optional[date] = None,
    from_date: Optional[date] = None,
    to_date: Optional[date] = None,
) -> DateWindow:
    """Build the inclusive window the extractor filters on.

    Rules:
      - ``on_date`` cannot be combined with ``from_date``/``to_date``.
      - ``to_date`` requires ``from_date``.
      - ``from_date`` alone runs up to ``today``.
      - No option at all means ``today`` only.

    Raises:
        DateOptionError: On contradictory options or when the start is after the end.
    """
    if on_date is not None and (from_date is not None or to_date is not None):
        raise DateOptionError("--date cannot be used with --from/--to")
    if to_date is not None and from_date is None:
        raise DateOptionError("--to must be used with --from")

    if from_date is not None:
        end = to_date if to_date is not None else today
        if from_date > end:
            raise DateOptionError(f"--from {from_date} is after the end of the range ({end})")
        return DateWindow(start=from_date, end=end)

    return DateWindow.single_day(on_date if on_date is not None else today)
