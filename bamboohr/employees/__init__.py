from bamboohr.employees.client import EmployeeClient, EmployeeClientProtocol, FakeEmployeeClient
from bamboohr.employees.fields import DEFAULT_EMPLOYEE_FIELDS, EmployeeField, EmployeeFields
from bamboohr.employees.models import Employee, EmployeeDirectoryResponse

__all__ = [
    "DEFAULT_EMPLOYEE_FIELDS",
    "Employee",
    "EmployeeClient",
    "EmployeeClientProtocol",
    "EmployeeDirectoryResponse",
    "EmployeeField",
    "EmployeeFields",
    "FakeEmployeeClient",
]
