import pytest

from enki.config import STYLE_ENV


@pytest.fixture(autouse=True)
def clear_style_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ENKI_STYLE from leaking into report assertions."""

    monkeypatch.delenv(STYLE_ENV, raising=False)
