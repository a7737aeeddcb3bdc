"""RunFilter — the history view's filter criteria."""

from datetime import date, datetime, time, tzinfo

from pydantic import BaseModel

_END_OF_DAY = time(23, 59, 59, 999_000)


def _epoch_ms(moment: datetime) -> int:
    return round(moment.timestamp() * 1000)


class RunFilter(BaseModel, frozen=True):
    """Criteria combined with logical AND; an unset field matches every run.

    Both date bounds are inclusive calendar days: `start_date` from its first
    millisecond, `end_date` through its last.
    """

    model: str | None = None
    dataset_id: str | None = None
    start_date: date | None = None
    end_date: date | None = None

    def start_bound_ms(self, tz: tzinfo) -> int | None:
        if self.start_date is None:
            return None
        return _epoch_ms(datetime.combine(self.start_date, time.min, tzinfo=tz))

    def end_bound_ms(self, tz: tzinfo) -> int | None:
        if self.end_date is None:
            return None
        return _epoch_ms(datetime.combine(self.end_date, _END_OF_DAY, tzinfo=tz))
