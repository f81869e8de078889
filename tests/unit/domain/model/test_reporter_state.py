"""Tests for domain/model/state.py."""

from consolediag.domain.model.state import SUCCESS_ERROR_NUMBER, ReporterState


class TestReporterState:
    """Tests for ReporterState."""

    def test_initial_value_is_success(self) -> None:
        state = ReporterState()
        assert state.last_error_number == SUCCESS_ERROR_NUMBER == 0
        assert state.succeeded is True

    def test_record_error(self) -> None:
        state = ReporterState()
        state.record_error(500)
        assert state.last_error_number == 500
        assert state.succeeded is False

    def test_last_error_wins_when_smaller(self) -> None:
        state = ReporterState()
        state.record_error(500)
        state.record_error(7)
        assert state.last_error_number == 7

    def test_last_error_wins_when_larger(self) -> None:
        state = ReporterState()
        state.record_error(7)
        state.record_error(500)
        assert state.last_error_number == 500
