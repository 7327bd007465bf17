"""
Compare XML and HTML markup trees for equivalence.

Determines whether two documents, elements or node sets parsed with lxml are equivalent, optionally ignoring whitespace,
attribute order, comments, text, and attributes or nodes selected with CSS rules.
"""

from .difference import Difference
from .environment import ArgumentError, NodeTypeError, ParseError
from .equivalence import Comparison, compare, equivalent
from .options import ComparisonOptions
from .status import Status

__version__ = "0.1.0"

__all__ = [
    "ArgumentError",
    "Comparison",
    "ComparisonOptions",
    "Difference",
    "NodeTypeError",
    "ParseError",
    "Status",
    "__version__",
    "compare",
    "equivalent",
]

__author__ = "Levente Hunyadi"
__copyright__ = "Copyright 2022-2026, Levente Hunyadi"
__license__ = "MIT"
__maintainer__ = "Levente Hunyadi"
__status__ = "Production"
