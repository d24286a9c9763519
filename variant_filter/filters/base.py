from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, List, Optional, Protocol, Set

from variant_filter.model.filter_result import FilterResult, FilterType
from variant_filter.model.filterable import Filterable
from variant_filter.model.gene import Gene
from variant_filter.model.variant import Variant
from variant_filter.utils.exceptions import FilterException


class FilterKind(Enum):
    """Which kind of record a filter decides on."""

    VARIANT = "variant"
    GENE = "gene"


class FilterLike(Protocol):
    """Protocol for objects with filter method compatibility.

    This protocol defines the interface for anything that behaves like a filter,
    which makes it compatible with both actual Filter implementations and test
    mocks that implement the same interface.
    """

    @property
    def filter_type(self) -> FilterType:
        ...

    @property
    def kind(self) -> FilterKind:
        ...

    def run_filter(self, record: Filterable) -> FilterResult:
        """Decide whether a record passes according to implementation-specific rules."""
        ...


class Filter(ABC):
    """Abstract base class for all filters.

    A filter is a pure decision rule: it reads the annotated state of a single
    record and returns a FilterResult. It never attaches the result to the
    record, nor touches any other record; that is left to the runner.
    """

    @property
    @abstractmethod
    def filter_type(self) -> FilterType:
        pass

    @property
    @abstractmethod
    def kind(self) -> FilterKind:
        pass

    @abstractmethod
    def run_filter(self, record: Filterable) -> FilterResult:
        """Decide whether the record passes this filter.

        Args:
            record: The record to evaluate.

        Returns:
            A PASS or FAIL result for this filter's type. Records lacking the
            data the filter needs fail.
        """
        pass

    def pass_result(self) -> FilterResult:
        return FilterResult.passed(self.filter_type)

    def fail_result(self) -> FilterResult:
        return FilterResult.failed(self.filter_type)


class VariantFilter(Filter):
    """Base class for filters deciding on individual variants."""

    @property
    def kind(self) -> FilterKind:
        return FilterKind.VARIANT

    def run_filter(self, record: Filterable) -> FilterResult:
        if not isinstance(record, Variant):
            raise FilterException(
                f"{type(self).__name__} cannot evaluate {type(record).__name__} records"
            )
        return self.run_variant_filter(record)

    @abstractmethod
    def run_variant_filter(self, variant: Variant) -> FilterResult:
        pass


class GeneFilter(Filter):
    """Base class for filters deciding on whole genes.

    The runner copies a gene filter's result onto every variant of the gene.
    """

    @property
    def kind(self) -> FilterKind:
        return FilterKind.GENE

    def run_filter(self, record: Filterable) -> FilterResult:
        if not isinstance(record, Gene):
            raise FilterException(
                f"{type(self).__name__} cannot evaluate {type(record).__name__} records"
            )
        return self.run_gene_filter(record)

    @abstractmethod
    def run_gene_filter(self, gene: Gene) -> FilterResult:
        pass


class FilterChain:
    """An ordered sequence of filters.

    The order in which filters are added is the order a runner applies them
    in. It only changes how much work a short-circuiting runner does, never
    which records pass.
    """

    def __init__(self, filters: Optional[List[FilterLike]] = None):
        """Initialize a new filter chain.

        Args:
            filters: A list of filters to be applied in sequence. If None, an empty
                    list will be used.
        """
        self.filters = list(filters or [])

    def add_filter(self, record_filter: FilterLike) -> None:
        """Add a filter to the end of the chain.

        Args:
            record_filter: The filter to add to the chain.
        """
        self.filters.append(record_filter)

    def of_kind(self, kind: FilterKind) -> List[FilterLike]:
        """The filters of one kind, in chain order."""
        return [record_filter for record_filter in self.filters if record_filter.kind is kind]

    @property
    def filter_types(self) -> Set[FilterType]:
        return {record_filter.filter_type for record_filter in self.filters}

    def __iter__(self) -> Iterator[FilterLike]:
        return iter(self.filters)

    def __len__(self) -> int:
        return len(self.filters)

    def __repr__(self) -> str:
        return f"FilterChain({self.filters!r})"
