import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TIMEOUT = 1.0
DEFAULT_DATASET_PATH = "dataset.xml"


def _require(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"{name} must be set")
    return value


@dataclass(slots=True)
class ClientSettings:
    url: str
    access_token: str
    timeout: float = DEFAULT_TIMEOUT


@dataclass(slots=True)
class ServerSettings:
    access_token: str
    dataset_path: Path = Path(DEFAULT_DATASET_PATH)


def load_client_settings() -> ClientSettings:
    return ClientSettings(
        url=_require("SEARCH_SERVICE_URL"),
        access_token=_require("SEARCH_ACCESS_TOKEN"),
        timeout=float(os.getenv("SEARCH_TIMEOUT", DEFAULT_TIMEOUT)),
    )


def load_server_settings() -> ServerSettings:
    return ServerSettings(
        access_token=_require("SEARCH_SERVER_ACCESS_TOKEN"),
        dataset_path=Path(os.getenv("DATASET_PATH", DEFAULT_DATASET_PATH)),
    )
