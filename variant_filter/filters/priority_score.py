from typing import Union

from variant_filter.filters.base import GeneFilter
from variant_filter.model.filter_result import FilterResult, FilterType
from variant_filter.model.gene import Gene
from variant_filter.model.priority import PriorityType
from variant_filter.utils.exceptions import FilterException


class PriorityScoreFilter(GeneFilter):
    """Fails genes scoring below a threshold for one prioritiser."""

    def __init__(
        self,
        priority_type: Union[PriorityType, str],
        min_priority_score: float,
    ) -> None:
        if isinstance(priority_type, str):
            try:
                priority_type = PriorityType.from_name(priority_type)
            except ValueError as e:
                raise FilterException(str(e)) from e
        if min_priority_score < 0:
            raise FilterException(
                f"min_priority_score must not be negative, got {min_priority_score}"
            )
        self.priority_type = priority_type
        self.min_priority_score = float(min_priority_score)

    @property
    def filter_type(self) -> FilterType:
        return FilterType.PRIORITY_SCORE_FILTER

    def run_gene_filter(self, gene: Gene) -> FilterResult:
        """
        Genes without a result from the configured prioritiser fail, as do
        genes scoring below the threshold. The threshold itself passes.
        """
        priority_result = gene.get_priority_result(self.priority_type)
        if priority_result is None:
            return self.fail_result()
        if priority_result.score >= self.min_priority_score:
            return self.pass_result()
        return self.fail_result()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PriorityScoreFilter):
            return NotImplemented
        return (
            self.priority_type is other.priority_type
            and self.min_priority_score == other.min_priority_score
        )

    def __hash__(self) -> int:
        return hash((self.priority_type, self.min_priority_score))

    def __repr__(self) -> str:
        return (
            f"PriorityScoreFilter(priority_type={self.priority_type.name}, "
            f"min_priority_score={self.min_priority_score})"
        )
