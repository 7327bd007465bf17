"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

from argparse import ArgumentParser, Namespace
from dataclasses import MISSING, Field, dataclass, fields, is_dataclass
from typing import Any, TypeVar, cast, get_args, get_origin

from .compatibility import LiteralString


class BaseOption:
    @staticmethod
    def field_name() -> str:
        return "argument"


@dataclass
class BooleanOption(BaseOption):
    true_text: LiteralString
    false_text: LiteralString


def boolean_option(true_text: LiteralString, false_text: LiteralString) -> dict[str, Any]:
    "Identifies a command-line argument as a boolean (on/off) flag."

    return {BaseOption.field_name(): BooleanOption(true_text, false_text)}


@dataclass
class ListOption(BaseOption):
    text: LiteralString
    metavar: str


def list_option(text: LiteralString, metavar: str) -> dict[str, Any]:
    "Identifies a command-line argument as an option that takes one or more values."

    return {BaseOption.field_name(): ListOption(text, metavar)}


T = TypeVar("T")


def _get_metadata(field: Field[Any], tp: type[T]) -> T | None:
    attrs = field.metadata.get(BaseOption.field_name())
    if attrs is None:
        return None
    elif isinstance(attrs, tp):
        return attrs
    else:
        raise TypeError(f"expected: {tp.__name__}; got: {type(attrs).__name__}")


def _add_boolean_field(parser: ArgumentParser, field: Field[Any]) -> None:
    bool_opt = _get_metadata(field, BooleanOption)
    if bool_opt is None:
        return

    arg_name = field.name.replace("_", "-")
    true_text = bool_opt.true_text
    if field.default is True:
        true_text += " (default)"
    parser.add_argument(
        f"--{arg_name}",
        dest=field.name,
        action="store_true",
        default=field.default,
        help=true_text,
    )
    false_text = bool_opt.false_text
    if field.default is False:
        false_text += " (default)"
    parser.add_argument(
        f"--no-{arg_name}",
        dest=field.name,
        action="store_false",
        help=false_text,
    )


def _add_list_field(parser: ArgumentParser, field: Field[Any]) -> None:
    list_opt = _get_metadata(field, ListOption)
    if list_opt is None:
        return

    arg_name = field.name.replace("_", "-")
    parser.add_argument(
        f"--{arg_name}",
        dest=field.name,
        nargs="+",
        action="extend",
        default=None,
        help=list_opt.text,
        metavar=list_opt.metavar,
    )


def add_arguments(parser: ArgumentParser, options_type: type[Any]) -> None:
    """
    Adds arguments to a command-line argument parser.

    Boolean fields become a pair of `--flag` and `--no-flag` arguments, tuple fields become arguments that accept
    one or more values and may be repeated. Fields without argument metadata are skipped.

    :param parser: A command-line argument parser.
    :param options_type: A data-class type that encapsulates configuration options.
    """

    if not is_dataclass(options_type):
        raise TypeError(f"expected: data-class as argument source; got: {options_type.__name__}")

    for field in fields(options_type):
        if field.type is bool:
            _add_boolean_field(parser, field)
        elif get_origin(field.type) is tuple and get_args(field.type) == (str, ...):
            _add_list_field(parser, field)
        elif _get_metadata(field, BaseOption) is not None:
            raise TypeError(f"expected: known argument type; got: {field.type}")


def get_options(args: Namespace, options_type: type[T]) -> T:
    """
    Extracts configuration options from command-line arguments acquired by an argument parser.

    :param args: Arguments acquired by a command-line argument parser.
    :param options_type: A data-class type that encapsulates configuration options.
    :returns: Configuration options as a data-class instance.
    """

    if not is_dataclass(options_type):
        raise TypeError(f"expected: data-class as argument target; got: {type(options_type).__name__}")

    params: dict[str, Any] = {}
    for field in fields(options_type):
        value = getattr(args, field.name, MISSING)
        if value is MISSING or value is None:
            continue
        if isinstance(value, list):
            value = tuple(cast(list[Any], value))
        params[field.name] = value
    return cast(type[T], options_type)(**params)
