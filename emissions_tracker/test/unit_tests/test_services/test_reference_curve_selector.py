"""
Service tests for reference curve lookup.
"""
from emissions_tracker.services.selectors.reference_curve_selector import (
    ReferenceCurveQuery,
    ReferenceCurveRepository,
)
from emissions_tracker.test.factory.snapshot import ReferenceCoefficientRowFactory
from emissions_tracker.utils.constants import ReferenceCategory

PP = ReferenceCategory.POSEIDON_PRINCIPLES
EEDI = ReferenceCategory.EEDI


def test_find_matching_returns_every_bracket_and_trajectory():
    """Test size and trajectory do not narrow the candidates."""
    small = ReferenceCoefficientRowFactory(vessel_type_id=7, size="0-99999", traj="min")
    small_max = ReferenceCoefficientRowFactory(vessel_type_id=7, size="0-99999", traj="max")
    large = ReferenceCoefficientRowFactory(vessel_type_id=7, size="100000+", traj="min")
    other_type = ReferenceCoefficientRowFactory(vessel_type_id=3)
    repo = ReferenceCurveRepository([small, small_max, large, other_type])

    result = repo.find_matching(ReferenceCurveQuery(vessel_type_id=7, category=PP))

    assert result == frozenset({small, small_max, large})


def test_find_matching_filters_category():
    pp_row = ReferenceCoefficientRowFactory(vessel_type_id=7, category=PP)
    eedi_row = ReferenceCoefficientRowFactory(vessel_type_id=7, category=EEDI)
    repo = ReferenceCurveRepository([pp_row, eedi_row])

    assert repo.find_matching(ReferenceCurveQuery(7, PP)) == frozenset({pp_row})
    assert repo.find_matching(ReferenceCurveQuery(7, EEDI)) == frozenset({eedi_row})


def test_find_matching_no_rows_is_empty():
    """A vessel type with only EEDI rows has no PP candidates."""
    repo = ReferenceCurveRepository(
        [ReferenceCoefficientRowFactory(vessel_type_id=9, category=EEDI)]
    )

    assert repo.find_matching(ReferenceCurveQuery(9, PP)) == frozenset()


def test_empty_repository():
    repo = ReferenceCurveRepository([])

    assert len(repo) == 0
    assert repo.find_matching(ReferenceCurveQuery(7, PP)) == frozenset()


def test_query_matches_exactly():
    row = ReferenceCoefficientRowFactory(vessel_type_id=7, category=PP)

    assert ReferenceCurveQuery(7, PP).matches(row)
    assert not ReferenceCurveQuery(70, PP).matches(row)
    assert not ReferenceCurveQuery(7, "pp").matches(row)
