"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Union

from .clio import boolean_option, list_option
from .environment import ArgumentError


@dataclass(frozen=True)
class ComparisonOptions:
    """
    Options that determine which differences between two markup trees are significant.

    :param collapse_whitespace: When true, trims and collapses whitespace in text nodes and comments to a single space.
        When false, all whitespace is preserved as it is.
    :param ignore_attr_order: When true, attributes are sorted by name before comparison, and attributes are paired
        by name. When false, attributes are compared by position, and comparison stops on the first mismatch.
    :param ignore_attr_content: Attributes whose value contains any of these strings on both sides are ignored.
    :param ignore_attrs: CSS selectors that identify elements whose attributes are ignored. A selector must mention the
        attribute to be excluded, e.g. `a[href]` excludes the `href` attribute of `<a>` elements.
    :param ignore_attrs_by_name: Attributes whose name contains any of these strings are ignored.
    :param ignore_comments: When true, comments are treated as if they were absent.
    :param ignore_nodes: CSS selectors that identify nodes to treat as if they were absent.
    :param ignore_text_nodes: When true, all text nodes are ignored. Blank text nodes are always ignored.
    :param ignore_children: When true, children of elements are never compared.
    :param force_children: When true, children of elements are compared even if the elements themselves differ in their
        attributes.
    :param verbose: When true, all differences are collected. When false, comparison stops at the first difference.
    """

    collapse_whitespace: bool = field(
        default=True,
        metadata=boolean_option(
            "Trim and collapse whitespace in text and comments.",
            "Compare text and comments with whitespace preserved.",
        ),
    )
    ignore_attr_order: bool = field(
        default=True,
        metadata=boolean_option(
            "Pair attributes by name irrespective of their order.",
            "Pair attributes by position, and stop at the first mismatch.",
        ),
    )
    ignore_attr_content: tuple[str, ...] = field(
        default=(),
        metadata=list_option("Ignore attributes whose value contains any of these strings on both sides.", "TEXT"),
    )
    ignore_attrs: tuple[str, ...] = field(
        default=(),
        metadata=list_option("Ignore attributes selected by CSS rules that name the attribute, e.g. 'a[href]'.", "CSS"),
    )
    ignore_attrs_by_name: tuple[str, ...] = field(
        default=(),
        metadata=list_option("Ignore attributes whose name contains any of these strings.", "TEXT"),
    )
    ignore_comments: bool = field(
        default=True,
        metadata=boolean_option(
            "Treat comments as if they were absent.",
            "Compare comments to their counterparts.",
        ),
    )
    ignore_nodes: tuple[str, ...] = field(
        default=(),
        metadata=list_option("Treat nodes selected by CSS rules as if they were absent.", "CSS"),
    )
    ignore_text_nodes: bool = field(
        default=False,
        metadata=boolean_option(
            "Ignore all text nodes.",
            "Compare text nodes to their counterparts (blank text is always ignored).",
        ),
    )
    ignore_children: bool = field(
        default=False,
        metadata=boolean_option(
            "Never compare children of elements.",
            "Compare children of elements.",
        ),
    )
    force_children: bool = field(
        default=False,
        metadata=boolean_option(
            "Compare children even if their parent elements already differ.",
            "Skip children of elements whose attributes differ.",
        ),
    )
    verbose: bool = field(
        default=False,
        metadata=boolean_option(
            "List all differences found.",
            "Stop at the first difference.",
        ),
    )

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if f.type is bool:
                if not isinstance(value, bool):
                    raise ArgumentError(f"expected: boolean for option `{f.name}`; got: {type(value).__name__}")
            elif isinstance(value, str):
                # a single string would otherwise be split into characters
                object.__setattr__(self, f.name, (value,))
            else:
                try:
                    items = tuple(value)
                except TypeError:
                    raise ArgumentError(f"expected: list of strings for option `{f.name}`; got: {type(value).__name__}") from None
                for item in items:
                    if not isinstance(item, str):
                        raise ArgumentError(f"expected: list of strings for option `{f.name}`; got item: {type(item).__name__}")
                object.__setattr__(self, f.name, items)


DEFAULT_OPTIONS = ComparisonOptions()

OptionsLike = Union[ComparisonOptions, Mapping[str, Any], None]


def _option_names() -> set[str]:
    return {f.name for f in dataclasses.fields(ComparisonOptions)}


def merge_options(options: OptionsLike = None, **overrides: Any) -> ComparisonOptions:
    """
    Merges user-supplied options over the defaults.

    :param options: Options as a data-class instance, a mapping of option names to values, or `None` for defaults.
    :param overrides: Individual options that take precedence over those in `options`.
    :returns: A new options object; neither the defaults nor the arguments are modified.
    :raises ArgumentError: Raised when an option name is not recognized.
    """

    if options is None:
        base = DEFAULT_OPTIONS
    elif isinstance(options, ComparisonOptions):
        base = options
    else:
        base = DEFAULT_OPTIONS
        overrides = {**options, **overrides}

    if not overrides:
        return base

    unknown = sorted(set(overrides) - _option_names())
    if unknown:
        raise ArgumentError(f"unrecognized comparison option(s): {', '.join(unknown)}")

    return dataclasses.replace(base, **overrides)


def child_options_for(options: ComparisonOptions, child_options: Optional[OptionsLike]) -> ComparisonOptions:
    """
    Determines the options to apply to descendants of the two nodes being compared.

    The verbosity of the root options always governs the entire traversal.
    """

    if child_options is None:
        return options
    return dataclasses.replace(merge_options(child_options), verbose=options.verbose)


def describe(options: ComparisonOptions) -> str:
    "A compact textual summary of options that differ from the defaults."

    changed: Iterable[str] = (
        f"{f.name}={getattr(options, f.name)!r}"
        for f in dataclasses.fields(options)
        if getattr(options, f.name) != getattr(DEFAULT_OPTIONS, f.name)
    )
    return ", ".join(changed) or "defaults"
