"""
Tests for readiness evaluation.
"""

from koordinater.core.readiness import Readiness, ReadinessStatus, evaluate_readiness


class TestEvaluateReadiness:
    """Tests for evaluate_readiness."""

    def test_no_map(self) -> None:
        """Test missing map view."""
        readiness = evaluate_readiness(has_map=False, enabled_wkids=[3006])
        assert readiness == Readiness(status=ReadinessStatus.NO_MAP, message_key="noView")
        assert not readiness.is_ready

    def test_no_map_from_empty_widget_ids(self) -> None:
        """Test empty widget id list counts as no map."""
        assert evaluate_readiness(map_widget_ids=[], has_formats=True).status == ReadinessStatus.NO_MAP
        assert evaluate_readiness().status == ReadinessStatus.NO_MAP

    def test_no_formats(self) -> None:
        """Test missing coordinate formats."""
        readiness = evaluate_readiness(map_widget_ids=["map_1"], enabled_wkids=[])
        assert readiness.status == ReadinessStatus.NO_FORMATS
        assert readiness.message_key == "noFormats"

    def test_ready(self) -> None:
        """Test ready state has no message."""
        readiness = evaluate_readiness(map_widget_ids=["map_1"], enabled_wkids=[3006])
        assert readiness.is_ready
        assert readiness.message_key is None

    def test_explicit_flags_win(self) -> None:
        """Test explicit flags override sequences."""
        assert evaluate_readiness(has_map=True, map_widget_ids=[], has_formats=True).is_ready
        assert (
            evaluate_readiness(has_map=True, has_formats=False, enabled_wkids=[3006]).status
            == ReadinessStatus.NO_FORMATS
        )

    def test_to_dict(self) -> None:
        """Test dictionary representation."""
        assert evaluate_readiness(has_map=False).to_dict() == {
            "status": "no-map",
            "message_key": "noView",
        }
