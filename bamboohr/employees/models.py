from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class BambooHRModel(BaseModel):
    """Base for response models.

    JSON keys are matched against field aliases case-insensitively: the
    directory endpoint answers in camelCase (``workEmail``) while the detail
    endpoint echoes the requested tokens (``WorkEmail``).
    """

    model_config = {
        "populate_by_name": True,
        "frozen": True,
        "extra": "ignore",
        "coerce_numbers_to_str": True,
    }

    @model_validator(mode="before")
    @classmethod
    def _match_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        aliases = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            aliases[alias.lower()] = alias
        normalized = {}
        for key, value in data.items():
            if isinstance(key, str):
                key = aliases.get(key.lower(), key)
            normalized.setdefault(key, value)
        return normalized


class Employee(BambooHRModel):
    # "" when the service omits it, as it can for directory rows
    id: str = Field(default="", alias="ID")
    display_name: str | None = Field(default=None, alias="DisplayName")
    first_name: str | None = Field(default=None, alias="FirstName")
    last_name: str | None = Field(default=None, alias="LastName")
    preferred_name: str | None = Field(default=None, alias="PreferredName")
    gender: str | None = Field(default=None, alias="Gender")
    job_title: str | None = Field(default=None, alias="JobTitle")
    work_phone: str | None = Field(default=None, alias="WorkPhone")
    mobile_phone: str | None = Field(default=None, alias="MobilePhone")
    work_email: str | None = Field(default=None, alias="WorkEmail")
    department: str | None = Field(default=None, alias="Department")
    location: str | None = Field(default=None, alias="Location")
    division: str | None = Field(default=None, alias="Division")
    linked_in: str | None = Field(default=None, alias="LinkedIn")
    work_phone_extension: str | None = Field(default=None, alias="WorkPhoneExtension")
    # None means "not returned", which is distinct from False / 0
    photo_uploaded: bool | None = Field(default=None, alias="PhotoUploaded")
    photo_url: str | None = Field(default=None, alias="PhotoURL")
    can_upload_photo: int | None = Field(default=None, alias="CanUploadPhoto")
    hire_date: str | None = Field(default=None, alias="HireDate")
    reporting_to: str | None = Field(default=None, alias="Reporting to")


class EmployeeDirectoryResponse(BambooHRModel):
    employees: list[Employee] = Field(default_factory=list, alias="Employees")

    @field_validator("employees", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value
