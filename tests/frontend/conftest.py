"""
Frontend test fixtures and mocks.

Mocks HTTP responses for isolated testing.
"""
import pytest
from unittest.mock import MagicMock


@pytest.fixture
def make_response():
    """
    Factory for fake ``requests`` responses.

    Usage:
        resp = make_response(200, {"message": "ok"})
    """
    def _make(status_code: int, payload=None, text: str | None = None):
        resp = MagicMock()
        resp.status_code = status_code
        if text is not None:
            resp.text = text
            resp.json.side_effect = ValueError("not json")
        elif payload is None:
            resp.text = ""
        else:
            resp.text = "json"
            resp.json.return_value = payload
        return resp
    return _make


@pytest.fixture
def api_client():
    """APIClient pointed at a fake backend."""
    from frontend.utils.api import APIClient
    return APIClient("http://backend:8000/")


class MockSessionState(dict):
    """Mock st.session_state that behaves like both dict and attribute access."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"'SessionState' has no attribute '{name}'")

    def __setattr__(self, name, value):
        self[name] = value


@pytest.fixture
def mock_streamlit(monkeypatch):
    """
    Patch the streamlit module with a mock and put frontend/ on sys.path.

    Forms are not submitted unless a test sets
    ``mock_streamlit.form_submit_button.return_value = True``.
    """
    import sys
    from pathlib import Path
    from unittest.mock import patch

    monkeypatch.syspath_prepend(str(Path(__file__).parent.parent.parent / "frontend"))

    st = MagicMock()
    st.session_state = MockSessionState()
    st.form_submit_button.return_value = False
    st.button.return_value = False

    # numpy cannot be re-imported in one process; load it before sys.modules
    # is snapshotted so patch.dict does not drop it between tests.
    import pandas  # noqa: F401

    with patch.dict("sys.modules", {"streamlit": st}):
        for name in ["views", "views.control_panel", "views.login", "utils", "utils.api", "config"]:
            sys.modules.pop(name, None)
        yield st


@pytest.fixture
def control_panel_view(mock_streamlit):
    """Freshly imported control panel view with its API client mocked."""
    import importlib

    view = importlib.import_module("views.control_panel")
    view.api = MagicMock()
    view.pd = MagicMock()
    return view
