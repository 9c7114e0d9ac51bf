"""Async client for the BambooHR employee API."""
from bamboohr.core.exceptions import (
    BambooHRError,
    ConfigurationError,
    DecodeError,
    EmployeeNotFoundError,
    NotFoundError,
    RequestConstructionError,
    TransportError,
)
from bamboohr.employees import (
    DEFAULT_EMPLOYEE_FIELDS,
    Employee,
    EmployeeClient,
    EmployeeField,
    EmployeeFields,
)
from bamboohr.http import HTTPXRequestExecutor

__all__ = [
    "BambooHRError",
    "ConfigurationError",
    "DEFAULT_EMPLOYEE_FIELDS",
    "DecodeError",
    "Employee",
    "EmployeeClient",
    "EmployeeField",
    "EmployeeFields",
    "EmployeeNotFoundError",
    "HTTPXRequestExecutor",
    "NotFoundError",
    "RequestConstructionError",
    "TransportError",
]
