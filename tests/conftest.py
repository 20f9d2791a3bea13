import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")

from app.infrastructure.di.container import Container  # noqa: E402


@pytest.fixture(autouse=True)
def reset_container():
    yield
    Container.reset()
