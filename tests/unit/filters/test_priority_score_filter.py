import pytest

from variant_filter.filters.base import FilterKind
from variant_filter.filters.priority_score import PriorityScoreFilter
from variant_filter.model.filter_result import FilterResult, FilterType
from variant_filter.model.gene import Gene
from variant_filter.model.priority import PriorityResult, PriorityType
from variant_filter.model.variant import Variant
from variant_filter.utils.exceptions import FilterException

PASS = FilterResult.passed(FilterType.PRIORITY_SCORE_FILTER)
FAIL = FilterResult.failed(FilterType.PRIORITY_SCORE_FILTER)


def scored_gene(symbol, score, priority_type=PriorityType.HIPHIVE_PRIORITY):
    gene = Gene(symbol, variants=[Variant("1", 100, "A", "T", gene_symbol=symbol)])
    gene.add_priority_result(PriorityResult(priority_type, symbol, score))
    return gene


class TestPriorityScoreFilter:
    """Test cases for PriorityScoreFilter"""

    @pytest.fixture
    def priority_filter(self):
        """Fixture to provide a filter with a 0.5 HiPhive threshold."""
        return PriorityScoreFilter(PriorityType.HIPHIVE_PRIORITY, 0.5)

    def test_filter_type_and_kind(self, priority_filter):
        """Test the type and kind of the filter."""
        assert priority_filter.filter_type is FilterType.PRIORITY_SCORE_FILTER
        assert priority_filter.kind is FilterKind.GENE

    def test_passes_gene_above_threshold(self, priority_filter):
        """Test a gene scoring above the threshold passes."""
        assert priority_filter.run_filter(scored_gene("GENEA", 0.8)) == PASS

    def test_passes_gene_at_threshold(self, priority_filter):
        """Test that the threshold is inclusive."""
        assert priority_filter.run_filter(scored_gene("GENEA", 0.5)) == PASS

    def test_fails_gene_below_threshold(self, priority_filter):
        """Test a gene scoring below the threshold fails."""
        assert priority_filter.run_filter(scored_gene("GENEB", 0.3)) == FAIL

    def test_fails_unscored_gene(self, priority_filter):
        """Test a gene without any prioritiser result fails."""
        assert priority_filter.run_filter(Gene("GENEC")) == FAIL

    def test_fails_gene_scored_by_other_prioritiser(self, priority_filter):
        """Test that only the configured prioritiser's score is considered."""
        gene = scored_gene("GENED", 0.9, priority_type=PriorityType.OMIM_PRIORITY)

        assert priority_filter.run_filter(gene) == FAIL

    def test_does_not_touch_variants(self, priority_filter):
        """Test that the filter leaves attaching results to the runner."""
        gene = scored_gene("GENEB", 0.3)

        priority_filter.run_filter(gene)

        assert gene.filter_results == ()
        assert gene.variants[0].filter_results == ()

    def test_priority_type_by_name(self):
        """Test that the priority type can be given by name."""
        assert PriorityScoreFilter("hiphive", 0.5) == PriorityScoreFilter(
            PriorityType.HIPHIVE_PRIORITY, 0.5
        )

    def test_unknown_priority_type_name(self):
        """Test that an unknown priority type name is rejected."""
        with pytest.raises(FilterException):
            PriorityScoreFilter("nonsense", 0.5)

    def test_negative_threshold(self):
        """Test that a negative threshold is rejected."""
        with pytest.raises(FilterException):
            PriorityScoreFilter(PriorityType.HIPHIVE_PRIORITY, -0.1)

    def test_equality(self, priority_filter):
        """Test value equality and hashing."""
        same = PriorityScoreFilter(PriorityType.HIPHIVE_PRIORITY, 0.5)
        other_type = PriorityScoreFilter(PriorityType.PHIVE_PRIORITY, 0.5)
        other_score = PriorityScoreFilter(PriorityType.HIPHIVE_PRIORITY, 0.6)

        assert priority_filter == same
        assert hash(priority_filter) == hash(same)
        assert priority_filter != other_type
        assert priority_filter != other_score

    def test_repr(self, priority_filter):
        """Test the string form of the filter."""
        assert repr(priority_filter) == (
            "PriorityScoreFilter(priority_type=HIPHIVE_PRIORITY, min_priority_score=0.5)"
        )
