from typing import Optional, Set

from variant_filter.model.phenotype import Model, Organism
from variant_filter.utils.exceptions import InvalidRunParameterError
from variant_filter.utils.logger import logger

VALID_RUN_PARAMETERS = ("human", "mouse", "fish", "ppi")


class HiPhiveOptions:
    """
    Run options for the HiPhive cross-species prioritiser.

    By default every organism and the protein-protein interaction matrix are
    used. Giving both a disease id and a candidate gene symbol switches on
    benchmarking mode, in which models are checked against that known
    disease-gene pair.

    run_parameters restricts the run to a comma separated combination of
    'human', 'mouse', 'fish' and 'ppi', e.g. 'human,fish,ppi'. Anything else
    is rejected when the options are created.
    """

    def __init__(
        self,
        disease_id: Optional[str] = "",
        candidate_gene_symbol: Optional[str] = "",
        run_parameters: str = "",
    ) -> None:
        self.disease_id = disease_id
        self.candidate_gene_symbol = candidate_gene_symbol
        self.benchmarking_enabled = bool(disease_id) and bool(candidate_gene_symbol)

        self.run_ppi = True
        self.run_human = True
        self.run_mouse = True
        self.run_fish = True

        if run_parameters:
            self._set_run_parameters(run_parameters)

    def _set_run_parameters(self, run_parameters: str) -> None:
        self.run_ppi = False
        self.run_human = False
        self.run_mouse = False
        self.run_fish = False
        for token in run_parameters.split(","):
            param = token.strip()
            if param not in VALID_RUN_PARAMETERS:
                logger.error(f"Invalid HiPhive run parameter: '{param}'")
                raise InvalidRunParameterError(f"'{param}' is not a valid parameter.")
            setattr(self, f"run_{param}", True)

    @property
    def organisms_to_run(self) -> Set[Organism]:
        organisms = set()
        if self.run_human:
            organisms.add(Organism.HUMAN)
        if self.run_mouse:
            organisms.add(Organism.MOUSE)
        if self.run_fish:
            organisms.add(Organism.FISH)
        return organisms

    def is_benchmark_hit(self, model: Model) -> bool:
        return self._matches_disease(model) and self._matches_candidate_gene_symbol(model)

    def _matches_candidate_gene_symbol(self, model: Model) -> bool:
        if model.human_gene_symbol is None:
            return self.candidate_gene_symbol is None
        return model.human_gene_symbol == self.candidate_gene_symbol

    def _matches_disease(self, model: Model) -> bool:
        # human model ids are the disease id plus the entrez gene id, e.g. OMIM:101600_2263
        if model.model_id is None:
            return self.disease_id is None
        return model.model_id.split("_")[0] == self.disease_id

    def _key(self) -> tuple:
        return (
            self.disease_id,
            self.candidate_gene_symbol,
            self.benchmarking_enabled,
            self.run_ppi,
            self.run_human,
            self.run_mouse,
            self.run_fish,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HiPhiveOptions):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"HiPhiveOptions(disease_id={self.disease_id!r}, "
            f"candidate_gene_symbol={self.candidate_gene_symbol!r}, "
            f"benchmarking_enabled={self.benchmarking_enabled}, "
            f"run_ppi={self.run_ppi}, run_human={self.run_human}, "
            f"run_mouse={self.run_mouse}, run_fish={self.run_fish})"
        )
