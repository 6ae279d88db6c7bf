"""
Pydantic schemas for request and response validation.
"""

from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class OrderField(str, Enum):
    """Sortable record fields. The empty value sorts by name."""

    DEFAULT = ""
    ID = "Id"
    NAME = "Name"
    AGE = "Age"


class OrderBy(int, Enum):
    """Sort direction."""

    DESC = -1
    AS_IS = 0
    ASC = 1


class User(BaseModel):
    """Person record as exposed on the wire."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = Field(..., alias="Id", description="Stable record identifier")
    name: str = Field(..., alias="Name", description="First and last name")
    age: int = Field(..., alias="Age")
    about: str = Field(..., alias="About", description="Free-text biography")
    gender: str = Field(..., alias="Gender")


class SearchRequest(BaseModel):
    """Search request as built by a client caller."""

    limit: int = Field(0, description="Maximum number of records")
    offset: int = Field(0, description="Number of records to skip")
    query: str = Field("", description="Substring matched against name and about")
    order_field: str = Field("", description="Id, Name, Age or empty for Name")
    order_by: int = Field(0, description="-1 descending, 0 as is, 1 ascending")


class SearchParams(BaseModel):
    """Search request after server-side validation."""

    limit: int
    offset: int
    query: str = ""
    order_field: OrderField = OrderField.DEFAULT
    order_by: OrderBy = OrderBy.AS_IS


class SearchResponse(BaseModel):
    """Search response schema."""

    users: List[User] = Field(default_factory=list, description="Returned window")
    has_more: bool = Field(False, description="More records exist past the window")


class SearchErrorResponse(BaseModel):
    """Error envelope carried by every non-success response."""

    error: str = ""


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="Application version")
