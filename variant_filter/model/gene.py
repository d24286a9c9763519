from typing import Dict, Iterable, List, Optional

from variant_filter.model.filterable import Filterable
from variant_filter.model.priority import PriorityResult, PriorityType
from variant_filter.model.variant import Variant


class Gene(Filterable):
    """
    A gene with the variants called within it and its prioritiser scores.

    The gene owns its variants. Attaching a result to the gene records it on
    the gene only; copying gene-level decisions onto the variants is done by
    the filter runner.
    """

    def __init__(
        self,
        gene_symbol: str,
        entrez_gene_id: int = 0,
        variants: Optional[Iterable[Variant]] = None,
    ) -> None:
        super().__init__()
        self.gene_symbol = gene_symbol
        self.entrez_gene_id = entrez_gene_id
        self._variants: List[Variant] = []
        self._priority_results: Dict[PriorityType, PriorityResult] = {}
        for variant in variants or []:
            self.add_variant(variant)

    def add_variant(self, variant: Variant) -> None:
        self._variants.append(variant)

    @property
    def variants(self) -> List[Variant]:
        return list(self._variants)

    def add_priority_result(self, priority_result: PriorityResult) -> None:
        self._priority_results[priority_result.priority_type] = priority_result

    def get_priority_result(self, priority_type: PriorityType) -> Optional[PriorityResult]:
        return self._priority_results.get(priority_type)

    @property
    def priority_results(self) -> Dict[PriorityType, PriorityResult]:
        return dict(self._priority_results)

    @property
    def priority_score(self) -> float:
        """Product of all prioritiser scores, 1.0 when the gene is unscored."""
        score = 1.0
        for priority_result in self._priority_results.values():
            score *= priority_result.score
        return score

    def __repr__(self) -> str:
        return (
            f"Gene({self.gene_symbol!r}, variants={len(self._variants)}, "
            f"passed={self.passed_filters})"
        )
