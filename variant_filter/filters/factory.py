from typing import Any, ClassVar, Dict, List, Type

from variant_filter.filters.base import Filter, FilterChain, FilterLike
from variant_filter.filters.priority_score import PriorityScoreFilter
from variant_filter.filters.variant_filters import (
    FrequencyFilter,
    PathogenicityFilter,
    QualityFilter,
)
from variant_filter.utils.exceptions import FilterException, UnsupportedTypeError
from variant_filter.utils.logger import logger


class FilterFactory:
    """Factory for creating filter components.

    This factory provides a registry of filter implementations by name, so a
    filter chain can be built from configuration, and a helper to assemble
    chains from filters constructed in code.
    """

    REGISTRY: ClassVar[Dict[str, Type[Filter]]] = {
        "quality": QualityFilter,
        "frequency": FrequencyFilter,
        "pathogenicity": PathogenicityFilter,
        "priority_score": PriorityScoreFilter,
    }

    @classmethod
    def register_filter(cls, name: str, filter_class: Type[Filter]) -> None:
        """
        Register a filter implementation.

        Args:
            name (str): The name to register the filter under.
            filter_class (Type[Filter]): The filter class to register.
        """
        cls.REGISTRY[name.lower()] = filter_class

    @classmethod
    def create(cls, filter_name: str, **params: Any) -> Filter:
        """
        Create a filter by registered name.

        Args:
            filter_name (str): The registered name of the filter.
            **params: Keyword arguments passed to the filter's constructor.

        Returns:
            Filter: The configured filter.

        Raises:
            UnsupportedTypeError: If no filter is registered under that name.
            FilterException: If the filter rejects its parameters.
        """
        normalized_name = filter_name.lower()
        logger.debug(f"Creating filter of type: {normalized_name} with {params}")

        if normalized_name not in cls.REGISTRY:
            supported = list(cls.REGISTRY.keys())
            logger.error(
                f"Unsupported filter type: {filter_name}. Supported types: {supported}"
            )
            raise UnsupportedTypeError(
                f"Unsupported filter type: {filter_name}. Supported types: {supported}"
            )

        filter_class = cls.REGISTRY[normalized_name]
        try:
            return filter_class(**params)
        except TypeError as e:
            raise FilterException(
                f"Invalid parameters for filter {filter_name}: {e}"
            ) from e

    @staticmethod
    def create_filter_chain(filters: List[FilterLike]) -> FilterChain:
        """Create a new filter chain with the provided filters.

        Args:
            filters: A list of filters to include in the chain. Filters will be
                    applied in the order they appear in the list.

        Returns:
            A configured FilterChain containing the provided filters.
        """
        return FilterChain(filters)
