"""
Pydantic schemas shared by the search server and its client.
"""

from enum import IntEnum
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class OrderBy(IntEnum):
    """Sort direction, sent on the wire as its integer code."""

    DESC = -1
    AS_IS = 0
    ASC = 1


class User(BaseModel):
    """A single search result as it travels on the wire."""

    id: int
    name: str
    age: int
    about: str
    gender: str


class UserRecord(BaseModel):
    """A dataset row as held by the server."""

    model_config = ConfigDict(frozen=True)

    id: int
    first_name: str
    last_name: str
    age: int = Field(..., ge=0)
    about: str = ""
    gender: str = ""

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_user(self) -> User:
        return User(
            id=self.id,
            name=self.name,
            age=self.age,
            about=self.about,
            gender=self.gender,
        )


class SearchRequest(BaseModel):
    """Search request built by the caller of SearchClient."""

    model_config = ConfigDict(frozen=True)

    query: str = Field("", description="Substring matched against about, first and last name")
    order_field: str = Field("", description="Id, Name or Age; empty means Name")
    order_by: OrderBy = Field(OrderBy.AS_IS, description="Sort direction")
    limit: int = Field(0, description="Maximum number of users to return")
    offset: int = Field(0, description="Number of users to skip")


class SearchResponse(BaseModel):
    """Search response handed back to the caller."""

    users: List[User] = Field(default_factory=list, description="Users in server order")
    next_page: bool = Field(False, description="More users exist after this page")


class SearchErrorResponse(BaseModel):
    """Error payload returned alongside 4xx/5xx statuses."""

    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(..., alias="Error", description="Human-readable reason")


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="Application version")
    records: int = Field(..., ge=0, description="Number of loaded records")
