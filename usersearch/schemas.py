from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


MAX_LIMIT = 25


class OrderBy(IntEnum):
    ASC = -1
    AS_IS = 0
    DESC = 1


class OrderField(str, Enum):
    ID = "ID"
    NAME = "Name"
    AGE = "Age"


class RemoteErrorCode(str, Enum):
    BAD_ORDER_FIELD = "ErrorBadOrderField"
    BAD_ORDER_BY = "ErrorBadOrderBy"
    BAD_LIMIT = "ErrorBadLimit"
    BAD_OFFSET = "ErrorBadOffset"


class User(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore", strict=True)

    id: int = Field(0, alias="Id")
    name: str = Field("", alias="Name")
    age: int = Field(0, alias="Age")
    about: str = Field("", alias="About")
    gender: str = Field("", alias="Gender")


class ErrorResponse(BaseModel):
    error: str = ""


@dataclass(frozen=True)
class SearchRequest:
    limit: int = 0
    offset: int = 0  # applied after sorting
    query: str = ""  # substring of Name or About
    order_field: str = ""
    order_by: int = OrderBy.AS_IS


class SearchResponse(BaseModel):
    users: List[User]
    next_page: bool = False


class RootResponse(BaseModel):
    msg: str


class HealthResponse(BaseModel):
    status: str
