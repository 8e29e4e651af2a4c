import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolated_realm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's REALM_* settings out of the test run."""
    for key in list(os.environ):
        if key.startswith("REALM_"):
            monkeypatch.delenv(key, raising=False)


def _is_e2e_test(request: pytest.FixtureRequest) -> bool:
    return "tests/e2e/" in str(request.node.fspath).replace("\\", "/")


@pytest.fixture(autouse=True)
def e2e_quiet_world(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if not _is_e2e_test(request):
        return

    monkeypatch.setenv("REALM_ENCOUNTER_CHANCE", "0")
    monkeypatch.setenv("REALM_WORLD_EVENT_CHANCE", "0")
