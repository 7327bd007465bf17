"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""


class ArgumentError(ValueError):
    "Raised when wrong arguments are passed to a function call."


class NodeTypeError(TypeError):
    "Raised when an object passed for comparison is neither a markup node nor a collection of markup nodes."


class ParseError(RuntimeError):
    "Raised when markup text cannot be parsed into an element tree."
