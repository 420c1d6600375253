"""Object-oriented design metric calculators.

Example:
    from design_smells.analysis.metrics import MetricName, Language, get_calculator

    calculator = get_calculator(MetricName.WMC, Language.JAVA)
    wmc = calculator.calculate(None, store, "/src/Account.java")
"""

from .base import (
    ClassComponents,
    Language,
    MetricCalculator,
    MetricName,
    collect_components,
    node_span,
)
from .cohesion import TightClassCohesion
from .complexity import AverageMethodWeight, WeightedMethodCount, method_weight
from .coupling import (
    AccessToForeignData,
    CouplingBetweenObjects,
    DataAbstractionCoupling,
    ForeignDataProviders,
)
from .inheritance import (
    DepthOfInheritanceTree,
    NumberOfAddedServices,
    ProportionOfNewAddedServices,
)
from .interface import WeightOfAClass
from .registry import (
    CALCULATORS,
    create_metric,
    get_calculator,
    metrics_for_language,
    parse_language,
    parse_metric,
)
from .size import (
    LinesOfCode,
    NumberOfAbstractMethods,
    NumberOfAccessorMethods,
    NumberOfAttributes,
    NumberOfMethods,
    NumberOfProtectedMethods,
    NumberOfPublicAttributes,
)

__all__ = [
    "ClassComponents",
    "Language",
    "MetricCalculator",
    "MetricName",
    "collect_components",
    "node_span",
    "method_weight",
    "LinesOfCode",
    "WeightedMethodCount",
    "AverageMethodWeight",
    "WeightOfAClass",
    "TightClassCohesion",
    "DataAbstractionCoupling",
    "ForeignDataProviders",
    "AccessToForeignData",
    "CouplingBetweenObjects",
    "DepthOfInheritanceTree",
    "NumberOfAddedServices",
    "ProportionOfNewAddedServices",
    "NumberOfAttributes",
    "NumberOfMethods",
    "NumberOfPublicAttributes",
    "NumberOfAbstractMethods",
    "NumberOfProtectedMethods",
    "NumberOfAccessorMethods",
    "CALCULATORS",
    "create_metric",
    "get_calculator",
    "metrics_for_language",
    "parse_language",
    "parse_metric",
]
