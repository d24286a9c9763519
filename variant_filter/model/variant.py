from typing import Optional

from variant_filter.model.filterable import Filterable


class Variant(Filterable):
    """
    An annotated allele at a genomic position.

    The annotation stage supplies the scores filters read. Absent values are
    kept as None so filters can tell "not annotated" apart from zero.
    """

    def __init__(
        self,
        chromosome: str,
        position: int,
        ref: str,
        alt: str,
        gene_symbol: str = "",
        quality: float = 0.0,
        frequency: Optional[float] = None,
        pathogenicity: Optional[float] = None,
    ) -> None:
        super().__init__()
        self.chromosome = chromosome
        self.position = position
        self.ref = ref
        self.alt = alt
        self.gene_symbol = gene_symbol
        self.quality = quality
        self.frequency = frequency
        self.pathogenicity = pathogenicity

    @property
    def key(self) -> str:
        return f"{self.chromosome}-{self.position}-{self.ref}-{self.alt}"

    def __repr__(self) -> str:
        return f"Variant({self.key}, gene={self.gene_symbol!r}, passed={self.passed_filters})"
