# どこで: `src/yeargrid/core/calendar.py`。
# 何を: 年内の日数・経過日数・進捗率・月末ラベルと、固定タイムゾーンでの「今日」を提供する。
# なぜ: 描画側が日付演算を持たず、日数だけを受け取って合成できるようにするため。

from __future__ import annotations

import datetime as dt

import pytz

DEFAULT_TIMEZONE = "Asia/Kolkata"
MONTH_LETTERS = "JFMAMJJASOND"

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _as_date(value: dt.date) -> dt.date:
    """datetime を日付部分だけに落として返す。"""

    if isinstance(value, dt.datetime):
        return value.date()
    return value


def is_leap_year(year: int) -> bool:
    y = int(year)
    return (y % 4 == 0 and y % 100 != 0) or y % 400 == 0


def total_days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def month_lengths(year: int) -> tuple[int, ...]:
    """各月の日数（2 月は閏年で 29）を返す。"""

    if is_leap_year(year):
        return (31, 29) + _MONTH_LENGTHS[2:]
    return _MONTH_LENGTHS


def day_of_year(date: dt.date) -> int:
    """1 月 1 日を 1 とする通日を返す。"""

    d = _as_date(date)
    return d.timetuple().tm_yday


def completed_days(date: dt.date) -> int:
    """当日より前に経過した日数（当日は含まない）を返す。"""

    return day_of_year(date) - 1


def year_progress(
    date: dt.date,
    *,
    basis: str = "completedDays",
    decimal_places: int = 1,
) -> str:
    """年の進捗率 [%] を固定小数点文字列で返す。

    Parameters
    ----------
    date : datetime.date
        対象日。
    basis : {"dayOfYear", "completedDays"}
        分子に通日を使うか、経過日数を使うか。
    decimal_places : {1, 2}
        小数桁数。

    Returns
    -------
    str
        例: `"4.6"`、`"99.73"`。

    Raises
    ------
    ValueError
        basis / decimal_places が未対応の場合。
    """

    d = _as_date(date)
    if basis == "dayOfYear":
        numerator = day_of_year(d)
    elif basis == "completedDays":
        numerator = completed_days(d)
    else:
        raise ValueError(f"未対応の basis です: {basis!r}")

    places = int(decimal_places)
    if places not in (1, 2):
        raise ValueError(f"decimal_places は 1 または 2 である必要がある: got={decimal_places!r}")

    percent = numerator / total_days_in_year(d.year) * 100.0
    return f"{percent:.{places}f}"


def month_end_labels(year: int) -> dict[int, str]:
    """月末日の通日 → 月頭文字（J, F, M, ...）の対応を返す。"""

    labels: dict[int, str] = {}
    cumulative = 0
    for letter, length in zip(MONTH_LETTERS, month_lengths(year)):
        cumulative += length
        labels[cumulative] = letter
    return labels


def today(timezone: str = DEFAULT_TIMEZONE, *, now: dt.datetime | None = None) -> dt.date:
    """指定タイムゾーンでの今日の日付を返す。

    Notes
    -----
    `now` を与えた場合はその時刻を変換する（naive は UTC とみなす）。
    """

    tz = pytz.timezone(str(timezone))
    if now is None:
        return dt.datetime.now(tz).date()
    if now.tzinfo is None:
        now = pytz.utc.localize(now)
    return now.astimezone(tz).date()


__all__ = [
    "DEFAULT_TIMEZONE",
    "MONTH_LETTERS",
    "completed_days",
    "day_of_year",
    "is_leap_year",
    "month_end_labels",
    "month_lengths",
    "today",
    "total_days_in_year",
    "year_progress",
]
