import argparse
import functools
import inspect
import types
from enum import Enum
from typing import Any, Union, get_args, get_origin

from pydantic.fields import FieldInfo
from pydantic_core import PydanticUndefined


def cli(fn):
    """Turn a function taking one pydantic model into a command line entry point.

    Every model field becomes a `--field` option; help text comes from the field description.

        @cli
        def main(config: Config) -> int:
            ...

        sys.exit(main())            # reads sys.argv
        main(["--text", "friday"])  # or an explicit argument list
    """
    config_cls = next(iter(inspect.signature(fn).parameters.values())).annotation

    @functools.wraps(fn)
    def wrapper(argv: list[str] | None = None):
        parser = argparse.ArgumentParser(description=fn.__doc__)
        for name, field in config_cls.model_fields.items():
            parser.add_argument(f"--{name}", **_field_options(field))
        namespace = parser.parse_args(argv)
        return fn(config_cls.model_validate(vars(namespace)))

    return wrapper


def _field_default(field: FieldInfo) -> Any:
    if field.default is not PydanticUndefined:
        return field.default
    if field.default_factory is not None:
        return field.default_factory()
    return None


def _field_options(field: FieldInfo) -> dict:
    options = _argument_options(field.annotation, _field_default(field))
    if field.description:
        options["help"] = field.description
    if field.is_required():
        options["required"] = True
    return options


def _argument_options(annotation, default, *, optional: bool = False) -> dict:
    """argparse keyword arguments for one annotation. Pydantic does the final conversion."""
    origin, args = get_origin(annotation), get_args(annotation)

    # T | None, Optional[T]
    if origin in (Union, types.UnionType):
        inner = [arg for arg in args if arg is not type(None)]
        if len(inner) == 1:
            return _argument_options(inner[0], default, optional=True)

    if origin is list:
        return {"default": default, "type": args[0] if args else str, "nargs": "*" if optional else "+"}
    if annotation is bool:
        return {"default": default, "action": argparse.BooleanOptionalAction}
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        # Offer the values; pydantic turns the chosen value back into the member
        return {
            "default": default.value if isinstance(default, Enum) else default,
            "type": str,
            "choices": [member.value for member in annotation],
        }
    return {"default": default, "type": annotation if annotation in (int, float) else str}
