from typing import Any, Dict, Iterable, List
import json

from variant_filter.model.filterable import Filterable
from variant_filter.model.gene import Gene
from variant_filter.model.priority import PriorityResult, PriorityType
from variant_filter.model.variant import Variant
from variant_filter.utils.exceptions import SerializationError
from variant_filter.utils.logger import logger


class Serializer:
    """
    Utility class for turning filtered records into JSON-compatible reports.

    Every record is written with its full filter history, in the order the
    results were attached, so failed records can be audited as well as
    passed ones.
    """

    def serialize(self, record: Filterable) -> Dict[str, Any]:
        """
        Serialize a gene or variant to a JSON-compatible dict.

        Args:
            record (Filterable): The record to serialize.

        Returns:
            Dict[str, Any]: The record's identity, overall status and history.

        Raises:
            SerializationError: If the record is of an unknown type.
        """
        if isinstance(record, Gene):
            return self._serialize_gene(record)
        if isinstance(record, Variant):
            return self._serialize_variant(record)
        raise SerializationError(f"Cannot serialize {type(record).__name__}")

    def serialize_all(self, records: Iterable[Filterable]) -> List[Dict[str, Any]]:
        return [self.serialize(record) for record in records]

    def to_json(self, records: Iterable[Filterable]) -> str:
        try:
            return json.dumps(self.serialize_all(records), indent=2)
        except (TypeError, ValueError) as e:
            logger.error(f"Serialization exception: {e}")
            raise SerializationError(f"Unable to write report: {e}") from e

    @staticmethod
    def _history(record: Filterable) -> List[Dict[str, str]]:
        return [
            {"filter": result.filter_type.value, "status": result.status.value}
            for result in record.filter_results
        ]

    def _serialize_variant(self, variant: Variant) -> Dict[str, Any]:
        return {
            "chromosome": variant.chromosome,
            "position": variant.position,
            "ref": variant.ref,
            "alt": variant.alt,
            "gene_symbol": variant.gene_symbol,
            "quality": variant.quality,
            "frequency": variant.frequency,
            "pathogenicity": variant.pathogenicity,
            "passed_filters": variant.passed_filters,
            "filter_results": self._history(variant),
        }

    def _serialize_gene(self, gene: Gene) -> Dict[str, Any]:
        return {
            "gene_symbol": gene.gene_symbol,
            "entrez_gene_id": gene.entrez_gene_id,
            "priority_scores": {
                priority_type.value: result.score
                for priority_type, result in gene.priority_results.items()
            },
            "passed_filters": gene.passed_filters,
            "filter_results": self._history(gene),
            "variants": [self._serialize_variant(variant) for variant in gene.variants],
        }


def load_genes(data: Any) -> List[Gene]:
    """
    Build genes and their variants from annotation output.

    Accepts the shape written by Serializer, ignoring any filter history, so
    a report can be filtered again::

        [{"gene_symbol": "FGFR2", "entrez_gene_id": 2263,
          "priority_scores": {"hiphive": 0.8},
          "variants": [{"chromosome": "10", "position": 123256215,
                        "ref": "T", "alt": "G", "quality": 100.0}]}]

    Raises:
        SerializationError: If the data is not in that shape.
    """
    if not isinstance(data, list):
        raise SerializationError(f"Expected a list of genes, got {type(data).__name__}")
    try:
        return [_load_gene(entry) for entry in data]
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise SerializationError(f"Malformed gene record: {e}") from e


def _load_gene(entry: Dict[str, Any]) -> Gene:
    gene_symbol = entry["gene_symbol"]
    gene = Gene(gene_symbol, entrez_gene_id=int(entry.get("entrez_gene_id", 0)))
    for name, score in entry.get("priority_scores", {}).items():
        gene.add_priority_result(
            PriorityResult(PriorityType.from_name(name), gene_symbol, float(score))
        )
    for variant in entry.get("variants", []):
        gene.add_variant(_load_variant(variant, gene_symbol))
    return gene


def _optional_float(value: Any) -> Any:
    return None if value is None else float(value)


def _load_variant(entry: Dict[str, Any], gene_symbol: str) -> Variant:
    return Variant(
        chromosome=str(entry["chromosome"]),
        position=int(entry["position"]),
        ref=entry["ref"],
        alt=entry["alt"],
        gene_symbol=entry.get("gene_symbol", gene_symbol),
        quality=float(entry.get("quality", 0.0)),
        frequency=_optional_float(entry.get("frequency")),
        pathogenicity=_optional_float(entry.get("pathogenicity")),
    )
