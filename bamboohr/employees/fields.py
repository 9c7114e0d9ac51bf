from enum import Enum


class EmployeeField(str, Enum):
    """Fields that can be requested from the employee detail endpoint."""

    DISPLAY_NAME = "DisplayName"
    FIRST_NAME = "FirstName"
    LAST_NAME = "LastName"
    PREFERRED_NAME = "PreferredName"
    GENDER = "Gender"
    JOB_TITLE = "JobTitle"
    WORK_PHONE = "WorkPhone"
    MOBILE_PHONE = "MobilePhone"
    WORK_EMAIL = "WorkEmail"
    DEPARTMENT = "Department"
    LOCATION = "Location"
    DIVISION = "Division"
    LINKED_IN = "LinkedIn"
    WORK_PHONE_EXTENSION = "WorkPhoneExtension"
    PHOTO_UPLOADED = "PhotoUploaded"
    PHOTO_URL = "PhotoURL"
    CAN_UPLOAD_PHOTO = "CanUploadPhoto"
    HIRE_DATE = "HireDate"
    REPORTING_TO = "Reporting to"

    def __str__(self) -> str:
        return self.value


class EmployeeFields(tuple):
    """Ordered, immutable sequence of field tokens.

    Plain strings are accepted alongside ``EmployeeField`` members so callers
    can request fields the enumeration does not cover.
    """

    def __new__(cls, fields=()):
        return super().__new__(cls, fields)

    def join(self, sep: str) -> str:
        """Concatenate the field tokens with ``sep`` between consecutive tokens."""
        if len(self) == 0:
            return ""
        if len(self) == 1:
            return _token(self[0])
        return sep.join(_token(f) for f in self)


def _token(field: EmployeeField | str) -> str:
    return field.value if isinstance(field, EmployeeField) else str(field)


# Requested by get_employee when the caller names no fields.
# REPORTING_TO is not part of the default set.
DEFAULT_EMPLOYEE_FIELDS = EmployeeFields((
    EmployeeField.DISPLAY_NAME,
    EmployeeField.FIRST_NAME,
    EmployeeField.LAST_NAME,
    EmployeeField.PREFERRED_NAME,
    EmployeeField.GENDER,
    EmployeeField.JOB_TITLE,
    EmployeeField.WORK_PHONE,
    EmployeeField.MOBILE_PHONE,
    EmployeeField.WORK_EMAIL,
    EmployeeField.DEPARTMENT,
    EmployeeField.LOCATION,
    EmployeeField.DIVISION,
    EmployeeField.LINKED_IN,
    EmployeeField.WORK_PHONE_EXTENSION,
    EmployeeField.PHOTO_UPLOADED,
    EmployeeField.PHOTO_URL,
    EmployeeField.CAN_UPLOAD_PHOTO,
    EmployeeField.HIRE_DATE,
))
