"""Unit test environment: no ambient mode flag, settings file or CI markers."""

import pytest

from golden_match.domain.constants import CI_INDICATORS, GOLDEN_ENV, SETTINGS_ENV


@pytest.fixture(autouse=True)
def clean_golden_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(GOLDEN_ENV, raising=False)
    monkeypatch.delenv(SETTINGS_ENV, raising=False)
    for indicator in CI_INDICATORS:
        monkeypatch.delenv(indicator, raising=False)
