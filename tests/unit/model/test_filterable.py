import pytest

from variant_filter.model.filter_result import FilterResult, FilterType
from variant_filter.model.gene import Gene
from variant_filter.model.priority import PriorityResult, PriorityType
from variant_filter.model.variant import Variant

QUALITY_PASS = FilterResult.passed(FilterType.QUALITY_FILTER)
QUALITY_FAIL = FilterResult.failed(FilterType.QUALITY_FILTER)
FREQUENCY_PASS = FilterResult.passed(FilterType.FREQUENCY_FILTER)
FREQUENCY_FAIL = FilterResult.failed(FilterType.FREQUENCY_FILTER)


@pytest.fixture
def variant():
    """Fixture to provide an unfiltered variant."""
    return Variant("10", 123256215, "T", "G", gene_symbol="FGFR2", quality=100.0)


class TestFilterable:
    """Test cases for the filter history held on records"""

    def test_new_record_has_passed(self, variant):
        """Test that a record with no results counts as passed."""
        assert variant.passed_filters is True
        assert variant.filter_results == ()

    def test_add_pass_result(self, variant):
        """Test that a PASS keeps the record passed."""
        assert variant.add_filter_result(QUALITY_PASS) is True

        assert variant.passed_filters is True
        assert variant.filter_results == (QUALITY_PASS,)

    def test_add_fail_result(self, variant):
        """Test that a FAIL fails the record."""
        assert variant.add_filter_result(QUALITY_FAIL) is False

        assert variant.passed_filters is False

    def test_failure_is_sticky(self, variant):
        """Test that later PASS results do not undo a FAIL."""
        variant.add_filter_result(QUALITY_FAIL)
        variant.add_filter_result(FREQUENCY_PASS)
        variant.add_filter_result(QUALITY_PASS)

        assert variant.passed_filters is False

    def test_history_keeps_insertion_order_and_duplicates(self, variant):
        """Test that results are appended, never replaced or deduplicated."""
        variant.add_filter_result(QUALITY_PASS)
        variant.add_filter_result(FREQUENCY_FAIL)
        variant.add_filter_result(QUALITY_PASS)

        assert variant.filter_results == (QUALITY_PASS, FREQUENCY_FAIL, QUALITY_PASS)

    def test_filter_results_view_is_read_only(self, variant):
        """Test that callers cannot change the history through the view."""
        variant.add_filter_result(QUALITY_PASS)

        results = variant.filter_results
        assert isinstance(results, tuple)
        assert variant.filter_results == (QUALITY_PASS,)

    def test_passed_and_failed_filter_types(self, variant):
        """Test the per-type lookups."""
        variant.add_filter_result(QUALITY_PASS)
        variant.add_filter_result(FREQUENCY_FAIL)

        assert variant.passed_filter_types == {FilterType.QUALITY_FILTER}
        assert variant.failed_filter_types == {FilterType.FREQUENCY_FILTER}
        assert variant.passed_filter(FilterType.QUALITY_FILTER)
        assert not variant.passed_filter(FilterType.FREQUENCY_FILTER)
        assert variant.failed_filter(FilterType.FREQUENCY_FILTER)
        assert not variant.failed_filter(FilterType.PATHOGENICITY_FILTER)

    def test_type_with_pass_and_fail_counts_as_failed(self, variant):
        """Test that a FAIL for a type outweighs an earlier PASS of the same type."""
        variant.add_filter_result(QUALITY_PASS)
        variant.add_filter_result(QUALITY_FAIL)

        assert not variant.passed_filter(FilterType.QUALITY_FILTER)
        assert variant.failed_filter(FilterType.QUALITY_FILTER)


class TestVariant:
    """Test cases for Variant"""

    def test_key(self, variant):
        """Test the identity key of a variant."""
        assert variant.key == "10-123256215-T-G"

    def test_unannotated_scores_are_none(self, variant):
        """Test that missing annotations are kept as None rather than zero."""
        assert variant.frequency is None
        assert variant.pathogenicity is None


class TestGene:
    """Test cases for Gene"""

    def test_gene_owns_variants(self, variant):
        """Test that variants added to a gene are returned in order."""
        other = Variant("10", 123256216, "A", "C", gene_symbol="FGFR2")
        gene = Gene("FGFR2", 2263, variants=[variant])
        gene.add_variant(other)

        assert gene.variants == [variant, other]

    def test_gene_filter_result_stays_on_gene(self, variant):
        """Test that attaching a result to a gene does not touch its variants."""
        gene = Gene("FGFR2", 2263, variants=[variant])

        gene.add_filter_result(FilterResult.failed(FilterType.PRIORITY_SCORE_FILTER))

        assert gene.passed_filters is False
        assert variant.filter_results == ()

    def test_priority_results(self):
        """Test storing and looking up prioritiser results."""
        gene = Gene("FGFR2", 2263)
        hiphive = PriorityResult(PriorityType.HIPHIVE_PRIORITY, "FGFR2", 0.8)
        omim = PriorityResult(PriorityType.OMIM_PRIORITY, "FGFR2", 0.5)

        gene.add_priority_result(hiphive)
        gene.add_priority_result(omim)

        assert gene.get_priority_result(PriorityType.HIPHIVE_PRIORITY) == hiphive
        assert gene.get_priority_result(PriorityType.PHIVE_PRIORITY) is None
        assert gene.priority_score == pytest.approx(0.4)

    def test_unscored_gene_priority_score(self):
        """Test the combined score of a gene without prioritiser results."""
        assert Gene("FGFR2").priority_score == 1.0

    def test_priority_type_from_name(self):
        """Test looking up priority types by name or value."""
        assert PriorityType.from_name("HIPHIVE_PRIORITY") is PriorityType.HIPHIVE_PRIORITY
        assert PriorityType.from_name(" hiphive ") is PriorityType.HIPHIVE_PRIORITY
        with pytest.raises(ValueError):
            PriorityType.from_name("nonsense")
