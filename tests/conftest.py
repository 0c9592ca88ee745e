import pytest


@pytest.fixture(autouse=True)
def _clean_chip_env(monkeypatch):
    for name in ("CHIP_INITIAL_COLOR", "CHIP_FINAL_COLOR", "CHIP_SOLVER", "CHIP_GUARD_CYCLES", "CHIP_MAX_DEPTH"):
        monkeypatch.delenv(name, raising=False)
