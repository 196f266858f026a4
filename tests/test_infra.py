"""Tests for the rerun/map-reload helpers with Streamlit patched out."""

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from places_map.ui import infra


class FakeSessionState(dict):
    """Dict with attribute access, like st.session_state."""

    def __getattr__(self, name: str) -> object:
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name: str, value: object) -> None:
        self[name] = value


@pytest.fixture
def fake_st() -> Iterator[MagicMock]:
    st = MagicMock()
    st.session_state = FakeSessionState()
    with patch.object(infra, "st", st):
        yield st


class TestBumpMapVersion:
    def test_starts_from_zero(self, fake_st: MagicMock) -> None:
        assert infra.bump_map_version(reason="test") == 1
        assert fake_st.session_state.map_version == 1

    def test_increments_existing_version(self, fake_st: MagicMock) -> None:
        fake_st.session_state.map_version = 4
        assert infra.bump_map_version(reason="test") == 5

    def test_logs_reason(self, fake_st: MagicMock, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="places_map.ui.infra"):
            infra.bump_map_version(reason="done adding")
        assert "[MAP] map_version -> 1 (done adding)" in caplog.text


class TestReloadMap:
    def test_runs_before_then_bumps_then_reruns(self, fake_st: MagicMock) -> None:
        calls: list[str] = []

        def before() -> None:
            calls.append(f"before v{fake_st.session_state.get('map_version', 0)}")

        fake_st.rerun.side_effect = lambda: calls.append(f"rerun v{fake_st.session_state.map_version}")

        infra.reload_map(before=before, reason="close details")

        assert calls == ["before v0", "rerun v1"]

    def test_without_callback(self, fake_st: MagicMock) -> None:
        infra.reload_map()
        assert fake_st.session_state.map_version == 1
        fake_st.rerun.assert_called_once_with()

    def test_trigger_rerun_keeps_map_version(self, fake_st: MagicMock) -> None:
        """Plain reruns keep the map component (and the user's pan/zoom)."""
        infra.trigger_rerun()
        fake_st.rerun.assert_called_once_with()
        assert "map_version" not in fake_st.session_state
