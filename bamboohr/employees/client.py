import asyncio
import logging
from typing import Protocol, runtime_checkable

from bamboohr.core.config import Settings, settings
from bamboohr.core.exceptions import EmployeeNotFoundError, TransportError
from bamboohr.employees.fields import DEFAULT_EMPLOYEE_FIELDS, EmployeeField, EmployeeFields
from bamboohr.employees.models import Employee, EmployeeDirectoryResponse
from bamboohr.http.executor import HTTPXRequestExecutor, RequestExecutorProtocol
from bamboohr.http.request import HTTPRequest

logger = logging.getLogger(__name__)


@runtime_checkable
class EmployeeClientProtocol(Protocol):
    async def get_employee_directory(self, *, timeout: float | None = None) -> list[Employee]: ...
    async def get_employee_id_by_email(self, email: str, *, timeout: float | None = None) -> str: ...
    async def get_employee_by_email(
        self, email: str, *fields: EmployeeField | str, timeout: float | None = None,
    ) -> Employee: ...
    async def get_employee(
        self, employee_id: str, *fields: EmployeeField | str, timeout: float | None = None,
    ) -> Employee: ...


class EmployeeClient:
    """Reads the employee directory and individual employee records.

    Every operation accepts ``timeout``, a deadline in seconds covering all
    round trips the operation makes. Exceeding it raises ``TimeoutError``;
    cancelling the awaiting task cancels the in-flight request.
    """

    def __init__(self, base_url: str, executor: RequestExecutorProtocol):
        self.base_url = base_url.rstrip("/")
        self._executor = executor

    @classmethod
    def from_settings(
        cls,
        config: Settings | None = None,
        executor: RequestExecutorProtocol | None = None,
    ) -> "EmployeeClient":
        config = config or settings
        config.validate_connection()
        return cls(config.resolved_base_url, executor or HTTPXRequestExecutor.from_settings(config))

    async def get_employee_directory(self, *, timeout: float | None = None) -> list[Employee]:
        async with asyncio.timeout(timeout):
            return await self._fetch_directory()

    async def get_employee_id_by_email(self, email: str, *, timeout: float | None = None) -> str:
        """Return the id of the first directory entry with this work email, or "" if none."""
        async with asyncio.timeout(timeout):
            directory = await self._fetch_directory()
        match = _find_by_work_email(directory, email)
        return match.id if match else ""

    async def get_employee_by_email(
        self, email: str, *fields: EmployeeField | str, timeout: float | None = None,
    ) -> Employee:
        """Look the email up in the directory, then fetch that employee. Two requests."""
        async with asyncio.timeout(timeout):
            match = _find_by_work_email(await self._fetch_directory(), email)
            if match is None or not match.id:
                raise EmployeeNotFoundError(email)
            return await self._fetch_employee(match.id, fields)

    async def get_employee(
        self, employee_id: str, *fields: EmployeeField | str, timeout: float | None = None,
    ) -> Employee:
        """Fetch one employee. All default fields are requested if none are given."""
        async with asyncio.timeout(timeout):
            return await self._fetch_employee(employee_id, fields)

    @property
    def _url_prefix(self) -> str:
        # Escaped for use inside an HTTPRequest URL template
        return self.base_url.replace("{", "{{").replace("}", "}}")

    async def _fetch_directory(self) -> list[Employee]:
        request = HTTPRequest(url=f"{self._url_prefix}/employees/directory")
        request.build_url()
        logger.debug("Fetching BambooHR employee directory")
        response = await self._executor.execute(request, EmployeeDirectoryResponse)
        logger.debug("BambooHR directory returned %d employees", len(response.employees))
        return response.employees

    async def _fetch_employee(self, employee_id: str, fields: tuple) -> Employee:
        requested = EmployeeFields(fields) if fields else DEFAULT_EMPLOYEE_FIELDS
        request = HTTPRequest(
            url=f"{self._url_prefix}/employees/{{employee_id}}",
            path_params={"employee_id": employee_id},
            query_params={"fields": requested.join(",")},
        )
        request.build_url()
        logger.debug("Fetching BambooHR employee %s (%d fields)", employee_id, len(requested))
        return await self._executor.execute(request, Employee)


def _find_by_work_email(directory: list[Employee], email: str) -> Employee | None:
    for employee in directory:
        if employee.work_email == email:
            return employee
    return None


class FakeEmployeeClient:
    """Test fake serving employees from memory."""

    def __init__(self, employees: list[Employee] | None = None):
        self.employees = employees or []

    async def get_employee_directory(self, *, timeout: float | None = None) -> list[Employee]:
        return list(self.employees)

    async def get_employee_id_by_email(self, email: str, *, timeout: float | None = None) -> str:
        match = _find_by_work_email(self.employees, email)
        return match.id if match else ""

    async def get_employee_by_email(
        self, email: str, *fields: EmployeeField | str, timeout: float | None = None,
    ) -> Employee:
        match = _find_by_work_email(self.employees, email)
        if match is None or not match.id:
            raise EmployeeNotFoundError(email)
        return match

    async def get_employee(
        self, employee_id: str, *fields: EmployeeField | str, timeout: float | None = None,
    ) -> Employee:
        for employee in self.employees:
            if employee.id == employee_id:
                return employee
        # Mirrors the 404 the API answers for unknown ids
        raise TransportError(f"Employee {employee_id} not found", status_code=404)
