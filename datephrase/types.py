from enum import Enum

from pydantic import BaseModel, ConfigDict

from datephrase.errors import AmbiguousForm


class Dialect(str, Enum):
    """Form of English to speak: it decides 'dd/mm' vs 'mm/dd' and what 'next friday' means."""

    UK = "uk"
    US = "us"


class Direction(str, Enum):
    """The 'this' / 'next' / 'last' modifier in front of a named date or a unit."""

    HERE = "this"
    NEXT = "next"
    LAST = "last"


class IntervalUnit(str, Enum):
    SECONDS = "seconds"
    DAYS = "days"
    MONTHS = "months"


class Interval(BaseModel):
    """
    A generic amount of time, in either seconds, days, or months.

    Days do not always have the same number of seconds and months do not always have the same
    number of days, so the three kinds are never converted into each other. Adding a month to
    '5 May' gives '5 June'; adding a month to '30 Jan' gives '28 Feb' or '29 Feb'.
    """

    model_config = ConfigDict(frozen=True)

    unit: IntervalUnit
    amount: int

    @classmethod
    def seconds(cls, amount: int) -> "Interval":
        return cls(unit=IntervalUnit.SECONDS, amount=amount)

    @classmethod
    def days(cls, amount: int) -> "Interval":
        return cls(unit=IntervalUnit.DAYS, amount=amount)

    @classmethod
    def months(cls, amount: int) -> "Interval":
        return cls(unit=IntervalUnit.MONTHS, amount=amount)

    def __mul__(self, factor: int) -> "Interval":
        return Interval(unit=self.unit, amount=self.amount * factor)

    def __add__(self, other: "Interval") -> "Interval":
        if other.unit is not self.unit:
            raise AmbiguousForm(f"cannot combine {self.unit.value} with {other.unit.value} in one interval")
        return Interval(unit=self.unit, amount=self.amount + other.amount)

    def __str__(self) -> str:
        return f"{self.amount} {self.unit.value}"
