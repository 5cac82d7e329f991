from types import MappingProxyType

from datephrase.types import Direction, Interval


# --------------------------
# Name tables, keyed by the first three letters
# --------------------------
# Spelled out rather than taken from calendar.day_name, which follows the process locale
DAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

WEEKDAYS = MappingProxyType({name[:3]: i for i, name in enumerate(DAY_NAMES)})  # monday=0
MONTHS = MappingProxyType({name[:3]: i for i, name in enumerate(MONTH_NAMES, start=1)})

UNITS = MappingProxyType(
    {
        "s": Interval.seconds(1),
        "sec": Interval.seconds(1),
        "m": Interval.seconds(60),
        "min": Interval.seconds(60),
        "h": Interval.seconds(60 * 60),
        "hou": Interval.seconds(60 * 60),
        "d": Interval.days(1),
        "day": Interval.days(1),
        "w": Interval.days(7),
        "wee": Interval.days(7),
        "mon": Interval.months(1),
        "y": Interval.months(12),
        "yea": Interval.months(12),
    }
)

MODIFIERS = MappingProxyType({"this": Direction.HERE, "next": Direction.NEXT, "last": Direction.LAST})

# Words that stand for a whole relative date on their own
NAMED_DAYS = MappingProxyType(
    {
        "now": Interval.days(0),
        "today": Interval.days(0),
        "yesterday": Interval.days(-1),
        "tomorrow": Interval.days(1),
    }
)


def week_day(word: str) -> int | None:
    """Only the first three letters count, so 'fri' and 'Friday' both give 4. 'month' is never Monday."""
    if len(word) < 3 or word.startswith("mont"):
        return None
    return WEEKDAYS.get(word[:3].lower())


def month_name(word: str) -> int | None:
    if len(word) < 3:
        return None
    return MONTHS.get(word[:3].lower())


def time_unit(word: str) -> Interval | None:
    word = word.lower()
    return UNITS.get(word if len(word) <= 3 else word[:3])
