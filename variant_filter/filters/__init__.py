"""Filters deciding whether records pass.

Each filter is a small, pure decision rule producing a PASS or FAIL result
for a single record. Filters are chained together and handed to a runner,
which is responsible for applying them and recording the results.

Key components:
- Filter: Abstract base class for all filters
- VariantFilter, GeneFilter: Bases for the two kinds of record
- FilterChain: Ordered list of filters
- FilterFactory: Factory for creating filters and chains
"""

from variant_filter.filters.base import (
    Filter,
    FilterChain,
    FilterKind,
    FilterLike,
    GeneFilter,
    VariantFilter,
)
from variant_filter.filters.factory import FilterFactory
from variant_filter.filters.priority_score import PriorityScoreFilter
from variant_filter.filters.variant_filters import (
    FrequencyFilter,
    PathogenicityFilter,
    QualityFilter,
)
from variant_filter.utils.exceptions import FilterException

__all__ = [
    "Filter",
    "FilterChain",
    "FilterException",
    "FilterFactory",
    "FilterKind",
    "FilterLike",
    "FrequencyFilter",
    "GeneFilter",
    "PathogenicityFilter",
    "PriorityScoreFilter",
    "QualityFilter",
    "VariantFilter",
]
