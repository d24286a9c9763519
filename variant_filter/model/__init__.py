"""Records and results handled by the filter engine.

Key components:
- FilterResult: Immutable (filter type, PASS/FAIL) outcome
- Filterable: Base class carrying a record's filter history
- Variant: An annotated allele
- Gene: A gene owning its variants and prioritiser scores
"""

from variant_filter.model.filter_result import FilterResult, FilterStatus, FilterType
from variant_filter.model.filterable import Filterable
from variant_filter.model.gene import Gene
from variant_filter.model.phenotype import Model, Organism
from variant_filter.model.priority import PriorityResult, PriorityType
from variant_filter.model.variant import Variant

__all__ = [
    "FilterResult",
    "FilterStatus",
    "FilterType",
    "Filterable",
    "Gene",
    "Model",
    "Organism",
    "PriorityResult",
    "PriorityType",
    "Variant",
]
