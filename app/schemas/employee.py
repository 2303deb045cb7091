from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

Department = Literal["HR", "IT", "Finance", "Marketing", "Sales"]
EmploymentType = Literal["Full-time", "Part-time", "Contract"]
EmployeeStatus = Literal["Active", "Inactive"]


class _CamelModel(BaseModel):
    # JSON uses camelCase (fullName, dateOfJoining, ...), python uses snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeCreate(_CamelModel):
    full_name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=1, max_length=320)
    phone_number: str = Field(min_length=1, max_length=50)
    department: Department
    designation: str = Field(min_length=1, max_length=200)
    salary: float = Field(ge=0, strict=True, allow_inf_nan=False)
    date_of_joining: date
    employment_type: EmploymentType
    status: EmployeeStatus = "Active"


class EmployeeUpdate(_CamelModel):
    full_name: str | None = Field(default=None, min_length=1, max_length=200)
    email: str | None = Field(default=None, min_length=1, max_length=320)
    phone_number: str | None = Field(default=None, min_length=1, max_length=50)
    department: Department | None = None
    designation: str | None = Field(default=None, min_length=1, max_length=200)
    salary: float | None = Field(default=None, ge=0, strict=True, allow_inf_nan=False)
    date_of_joining: date | None = None
    employment_type: EmploymentType | None = None
    status: EmployeeStatus | None = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v):
        """Omitting a field keeps it; sending null for it is an error."""
        if v is None:
            raise PydanticCustomError("required", "Field cannot be null")
        return v

    def changes(self) -> dict:
        """Only the fields the client actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class EmployeeOut(_CamelModel):
    id: str
    full_name: str
    email: str
    phone_number: str
    department: str
    designation: str
    salary: float
    date_of_joining: date
    employment_type: str
    status: str
    created_at: datetime
    updated_at: datetime


class DeleteEmployeeOut(BaseModel):
    message: str
