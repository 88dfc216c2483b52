import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from ..errors import DatasetError
from ..schemas import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatasetUser:
    id: int
    first_name: str
    last_name: str
    age: int
    about: str
    gender: str

    @property
    def name(self) -> str:
        return self.first_name + " " + self.last_name

    def to_user(self) -> User:
        return User(id=self.id, name=self.name, age=self.age, about=self.about, gender=self.gender)


def _text(row: ET.Element, tag: str) -> str:
    return row.findtext(tag) or ""


def _int(row: ET.Element, tag: str) -> int:
    raw = _text(row, tag).strip()
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError as exc:
        raise DatasetError(f"row field {tag!r} is not an integer: {raw!r}") from exc


def parse_dataset(data: Union[str, bytes]) -> List[DatasetUser]:
    """Parse a ``<root><row>...</row></root>`` document into dataset users."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise DatasetError(f"cant parse dataset: {exc}") from exc

    return [
        DatasetUser(
            id=_int(row, "id"),
            first_name=_text(row, "first_name"),
            last_name=_text(row, "last_name"),
            age=_int(row, "age"),
            about=_text(row, "about"),
            gender=_text(row, "gender"),
        )
        for row in root.iter("row")
    ]


def load_dataset(path: Union[str, Path]) -> List[DatasetUser]:
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise DatasetError(f"cant read dataset {path}: {exc}") from exc

    users = parse_dataset(data)
    logger.info("loaded %d users from %s", len(users), path)
    return users
