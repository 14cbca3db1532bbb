"""
Tests for value objects, outcome variants and outcome metadata.
"""
import pytest

from venue_resolver.models import CatalogEntry, ScoredCandidate
from venue_resolver.resolution import (
    Ambiguous,
    CustomLocation,
    OnlineExplicit,
    ResolutionMetadata,
    ResolutionSource,
    Resolved,
    Unresolved,
    fold_outcome,
)


def _describe(outcome):
    return fold_outcome(
        outcome,
        on_resolved=lambda o: f"resolved:{o.venue_id}",
        on_ambiguous=lambda o: f"ambiguous:{len(o.candidates)}",
        on_unresolved=lambda o: f"unresolved:{o.input_name}",
        on_online_explicit=lambda o: "online",
        on_custom_location=lambda o: "custom",
    )


class TestOutcomeValidation:
    """Tests for invariants enforced by the outcome types."""

    def test_scored_candidate_rejects_out_of_range(self):
        """Test that scores outside [0, 1] are rejected."""
        with pytest.raises(ValueError):
            ScoredCandidate(id="1", name="Blue Door", score=1.2)
        with pytest.raises(ValueError):
            ScoredCandidate(id="1", name="Blue Door", score=-0.1)

    def test_resolved_rejects_out_of_range_confidence(self):
        """Test that confidence outside [0, 1] is rejected."""
        with pytest.raises(ValueError):
            Resolved(venue_id="1", venue_name="Blue Door", confidence=1.5, source=ResolutionSource.FUZZY)

    def test_ambiguous_requires_descending_scores(self):
        """Test that unsorted candidates are rejected."""
        with pytest.raises(ValueError):
            Ambiguous(
                candidates=(
                    ScoredCandidate(id="1", name="A", score=0.5),
                    ScoredCandidate(id="2", name="B", score=0.9),
                ),
                input_name="a",
            )

    def test_ambiguous_candidate_names(self):
        """Test candidate_names convenience accessor."""
        outcome = Ambiguous(
            candidates=[ScoredCandidate.from_entry(CatalogEntry(id="1", name="Blue Door"), 0.9)],
            input_name="blue",
        )

        assert outcome.candidate_names == ("Blue Door",)
        assert isinstance(outcome.candidates, tuple)

    def test_status_tags(self):
        """Test that every variant carries its status tag."""
        assert Unresolved(input_name=None).status == "unresolved"
        assert OnlineExplicit().status == "online_explicit"
        assert CustomLocation().status == "custom_location"

    def test_source_values(self):
        """Test the wire values of resolution sources."""
        assert [source.value for source in ResolutionSource] == ["trusted-id", "exact", "alias", "fuzzy"]


class TestFoldOutcome:
    """Tests for exhaustive outcome dispatch."""

    def test_dispatches_each_variant(self):
        """Test that each variant reaches its own handler."""
        resolved = Resolved(venue_id="7", venue_name="Blue Door", confidence=1.0, source=ResolutionSource.EXACT)
        ambiguous = Ambiguous(candidates=(), input_name="x")

        assert _describe(resolved) == "resolved:7"
        assert _describe(ambiguous) == "ambiguous:0"
        assert _describe(Unresolved(input_name="Zebra")) == "unresolved:Zebra"
        assert _describe(OnlineExplicit()) == "online"
        assert _describe(CustomLocation()) == "custom"

    def test_unknown_outcome_raises(self):
        """Test that non-outcome values are rejected."""
        with pytest.raises(TypeError):
            _describe("resolved")

    def test_all_handlers_required(self):
        """Test that omitting a handler is an error."""
        with pytest.raises(TypeError):
            fold_outcome(OnlineExplicit(), on_resolved=lambda o: None)


class TestResolutionMetadata:
    """Tests for the loggable outcome summary."""

    def test_resolved_summary(self):
        """Test that resolved outcomes log source, confidence and id."""
        outcome = Resolved(venue_id="1", venue_name="Long Table Brewhouse", confidence=0.93, source=ResolutionSource.ALIAS)

        assert ResolutionMetadata.from_outcome(outcome).to_dict() == {
            "status": "resolved",
            "source": "alias",
            "confidence": 0.93,
            "venue_id": "1",
        }

    def test_ambiguous_summary(self):
        """Test that ambiguous outcomes log candidate count and input name."""
        outcome = Ambiguous(
            candidates=(ScoredCandidate(id="1", name="A", score=1.0), ScoredCandidate(id="2", name="A!", score=1.0)),
            input_name="a",
        )

        assert ResolutionMetadata.from_outcome(outcome).to_dict() == {
            "status": "ambiguous",
            "candidate_count": 2,
            "input_name": "a",
        }

    def test_unresolved_without_name(self):
        """Test that a missing input name is omitted."""
        assert ResolutionMetadata.from_outcome(Unresolved(input_name=None)).to_dict() == {
            "status": "unresolved",
        }

    def test_no_venue_summary(self):
        """Test that online and custom outcomes log only their status."""
        assert ResolutionMetadata.from_outcome(OnlineExplicit()).to_dict() == {"status": "online_explicit"}
        assert ResolutionMetadata.from_outcome(CustomLocation()).to_dict() == {"status": "custom_location"}
