import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

_ROOT_DIR = Path(__file__).resolve().parents[1]
if str(_ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(_ROOT_DIR))

DATASET_PATH = Path(__file__).resolve().parent / "data" / "dataset.xml"
VALID_TOKEN = "valid token"

os.environ.setdefault("SEARCH_SERVER_ACCESS_TOKEN", VALID_TOKEN)
os.environ.setdefault("DATASET_PATH", str(DATASET_PATH))
os.environ.setdefault("SEARCH_SERVICE_URL", "http://search-service.local/search")
os.environ.setdefault("SEARCH_ACCESS_TOKEN", VALID_TOKEN)

from usersearch.dataset.loader import load_dataset  # noqa: E402
from usersearch.main import app  # noqa: E402


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    return {"AccessToken": VALID_TOKEN}


@pytest.fixture()
def dataset_users():
    return load_dataset(DATASET_PATH)
