import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

SETTINGS_ENV_KEYS = (
    "TRADE_SIZE_LOG_TO_FILE",
    "TRADE_SIZE_LOG_DIR",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    for key in SETTINGS_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    settings_file = tmp_path / "trade_size_settings.json"
    monkeypatch.setenv("TRADE_SIZE_SETTINGS_FILE", str(settings_file))
    yield settings_file
