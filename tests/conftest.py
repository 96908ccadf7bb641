import sys
from pathlib import Path

import pytest

# Permet d'importer confprobe depuis la racine du dépôt
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from confprobe.io_utils.logger import reset_logger


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("CONFPROBE_CONFIG", "CONFPROBE_LOG_FILE", "CONFPROBE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def write_config(tmp_path: Path):
    def _write(content, name: str = "new_config.conf") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path
    return _write
