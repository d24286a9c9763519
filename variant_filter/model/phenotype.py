from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Organism(Enum):
    HUMAN = "human"
    MOUSE = "mouse"
    FISH = "fish"


@dataclass(frozen=True)
class Model:
    """
    A disease or organism model matched against the patient's phenotype.

    For human disease models the id is the disease id joined to the Entrez
    gene id with an underscore, e.g. ``OMIM:101600_2263``, so that one
    disease associated with several genes yields distinct models.
    """

    model_id: Optional[str]
    human_gene_symbol: Optional[str]
    entrez_gene_id: int = 0
    organism: Organism = Organism.HUMAN
