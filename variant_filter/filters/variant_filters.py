from variant_filter.filters.base import VariantFilter
from variant_filter.model.filter_result import FilterResult, FilterType
from variant_filter.model.variant import Variant
from variant_filter.utils.exceptions import FilterException


class QualityFilter(VariantFilter):
    """Passes variants whose call quality is at least min_quality."""

    def __init__(self, min_quality: float) -> None:
        if min_quality < 0:
            raise FilterException(f"min_quality must not be negative, got {min_quality}")
        self.min_quality = float(min_quality)

    @property
    def filter_type(self) -> FilterType:
        return FilterType.QUALITY_FILTER

    def run_variant_filter(self, variant: Variant) -> FilterResult:
        if variant.quality >= self.min_quality:
            return self.pass_result()
        return self.fail_result()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QualityFilter):
            return NotImplemented
        return self.min_quality == other.min_quality

    def __hash__(self) -> int:
        return hash(self.min_quality)

    def __repr__(self) -> str:
        return f"QualityFilter(min_quality={self.min_quality})"


class FrequencyFilter(VariantFilter):
    """
    Passes variants no more common than max_frequency.

    Frequencies are percentages of the largest population sampled. A variant
    with no recorded frequency has not been seen in any population and
    passes.
    """

    def __init__(self, max_frequency: float) -> None:
        if not 0 <= max_frequency <= 100:
            raise FilterException(
                f"max_frequency must be a percentage between 0 and 100, got {max_frequency}"
            )
        self.max_frequency = float(max_frequency)

    @property
    def filter_type(self) -> FilterType:
        return FilterType.FREQUENCY_FILTER

    def run_variant_filter(self, variant: Variant) -> FilterResult:
        if variant.frequency is None or variant.frequency <= self.max_frequency:
            return self.pass_result()
        return self.fail_result()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyFilter):
            return NotImplemented
        return self.max_frequency == other.max_frequency

    def __hash__(self) -> int:
        return hash(self.max_frequency)

    def __repr__(self) -> str:
        return f"FrequencyFilter(max_frequency={self.max_frequency})"


class PathogenicityFilter(VariantFilter):
    """Passes variants predicted at least min_score pathogenic. Unscored variants fail."""

    def __init__(self, min_score: float) -> None:
        if not 0 <= min_score <= 1:
            raise FilterException(f"min_score must be between 0 and 1, got {min_score}")
        self.min_score = float(min_score)

    @property
    def filter_type(self) -> FilterType:
        return FilterType.PATHOGENICITY_FILTER

    def run_variant_filter(self, variant: Variant) -> FilterResult:
        if variant.pathogenicity is None:
            return self.fail_result()
        if variant.pathogenicity >= self.min_score:
            return self.pass_result()
        return self.fail_result()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathogenicityFilter):
            return NotImplemented
        return self.min_score == other.min_score

    def __hash__(self) -> int:
        return hash(self.min_score)

    def __repr__(self) -> str:
        return f"PathogenicityFilter(min_score={self.min_score})"
