import importlib
from typing import Any


def omni_import(path: str):
    """
    Import a module, class, function, or attribute given its absolute path.

    Parameters:
        path (str): The absolute path in the form 'package.module.ClassName'
                    or even deeper nested objects.

    Returns:
        Any: The imported module or attribute.

    Raises:
        ImportError: If no valid module or attribute is found.
    """
    parts = path.split(".")

    # Try progressively shorter module paths until one can be imported
    for i in range(len(parts), 0, -1):
        module_path = ".".join(parts[:i])
        try:
            module = importlib.import_module(module_path)
        except ModuleNotFoundError:
            continue
        else:
            # If there are remaining parts, traverse them as attributes.
            obj = module
            for attr in parts[i:]:
                try:
                    obj = getattr(obj, attr)
                except AttributeError as e:
                    raise ImportError(
                        f"Module '{module_path}' was found, but it does not contain attribute '{attr}'."
                    ) from e
            return obj

    raise ImportError(f"Could not import anything from '{path}'.")


class BaseCalendar:
    """
    What the parser needs from a date/time library.

    The grammar never touches an instant directly: it reads and builds instants only through
    these methods, so any library can be plugged in by writing one subclass. Every subclass
    must agree on the observable behaviour:

    - `weekday` counts from Monday = 0.
    - `add_seconds` adds elapsed time; `add_days` keeps the wall-clock time of day.
    - `add_months` clamps the day to the end of the target month (30 Jan + 1 month = 28/29 Feb).
    - construction and arithmetic failures raise `BackendConstructionFailed`.
    """

    name: str = "base"

    @classmethod
    def supports(cls, instant: Any) -> bool:
        """Whether `instant` is a value of this library."""
        raise NotImplementedError

    @classmethod
    def from_instant(cls, instant: Any) -> "BaseCalendar":
        """Calendar that builds instants in the same timezone as `instant`."""
        raise NotImplementedError

    def now(self) -> Any:
        raise NotImplementedError

    def components(self, instant: Any) -> tuple[int, int, int, int, int, int]:
        """(year, month, day, hour, minute, second) on the instant's wall clock."""
        raise NotImplementedError

    def weekday(self, instant: Any) -> int:
        raise NotImplementedError

    def utc_offset(self, instant: Any) -> int:
        """Offset from UTC in seconds; 0 for instants without a timezone."""
        raise NotImplementedError

    def from_components(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> Any:
        raise NotImplementedError

    def add_seconds(self, instant: Any, seconds: int) -> Any:
        raise NotImplementedError

    def add_days(self, instant: Any, days: int) -> Any:
        raise NotImplementedError

    def add_months(self, instant: Any, months: int) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
