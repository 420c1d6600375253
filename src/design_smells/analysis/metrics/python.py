"""Python calculators: LOC, CC, NOA, NOM and NOAM.

Python components use the same structural model. Body tags are
tree-sitter-python node types, accessors may also be declared with
``@property`` / ``@<name>.setter`` decorators, and dunder members are
excluded from the size counts.
"""

from __future__ import annotations

import re

from loguru import logger

from ...core.models import MethodInfo
from .base import Language, MetricCalculator, MetricName
from .size import LinesOfCode

PYTHON_DECISION_TYPES = frozenset(
    {
        "if_statement",
        "elif_clause",
        "for_statement",
        "while_statement",
        "except_clause",
        "conditional_expression",
        "boolean_operator",
        "case_clause",
        "for_in_clause",
        "if_clause",
    }
)

_SETTER_DECORATOR = re.compile(r"^@\w+\.setter$")


def is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__") and len(name) > 4


def is_property_accessor(method: MethodInfo) -> bool:
    """Accessor by extractor flag or by property decorator."""
    if method.is_accessor:
        return True
    for annotation in method.annotations:
        text = annotation.strip()
        if text == "@property" or _SETTER_DECORATOR.match(text):
            return True
    return False


class PythonLinesOfCode(LinesOfCode):
    language = Language.PYTHON


class PythonCyclomaticComplexity(MetricCalculator):
    """Sum over methods of 1 + decision points."""

    metric = MetricName.CC
    language = Language.PYTHON

    def compute(self, components, root=None, store=None) -> float:
        total = 0
        for method in components.methods:
            complexity = 1 + sum(
                1 for tag in method.method_body if tag in PYTHON_DECISION_TYPES
            )
            logger.debug(f"[{self.name}] {method.name}: {complexity}")
            total += complexity
        return total


class PythonNumberOfAttributes(MetricCalculator):
    """Attributes that are not name-mangled (``__x``)."""

    metric = MetricName.NOA
    language = Language.PYTHON

    def compute(self, components, root=None, store=None) -> float:
        return sum(1 for f in components.fields if not f.name.startswith("__"))


class PythonNumberOfMethods(MetricCalculator):
    """Methods other than constructors and dunder methods."""

    metric = MetricName.NOM
    language = Language.PYTHON

    def compute(self, components, root=None, store=None) -> float:
        return sum(
            1
            for m in components.methods
            if not m.is_constructor and not is_dunder(m.name)
        )


class PythonNumberOfAccessorMethods(MetricCalculator):
    """Accessor methods, including property getters and setters."""

    metric = MetricName.NOAM
    language = Language.PYTHON

    def compute(self, components, root=None, store=None) -> float:
        return sum(1 for m in components.methods if is_property_accessor(m))
