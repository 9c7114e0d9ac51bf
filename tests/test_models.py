"""Tests for decoding BambooHR employee payloads."""
import pytest
from pydantic import ValidationError

from bamboohr.employees.models import Employee, EmployeeDirectoryResponse


class TestEmployee:
    def test_absent_optionals_are_none(self):
        emp = Employee.model_validate({"ID": "1"})
        assert emp.photo_uploaded is None
        assert emp.can_upload_photo is None
        assert emp.work_email is None

    def test_explicit_false_and_zero_are_kept(self):
        emp = Employee.model_validate({"ID": "1", "PhotoUploaded": False, "CanUploadPhoto": 0})
        assert emp.photo_uploaded is False
        assert emp.can_upload_photo == 0

    def test_null_is_absent(self):
        emp = Employee.model_validate({"ID": "1", "PhotoUploaded": None, "CanUploadPhoto": None})
        assert emp.photo_uploaded is None
        assert emp.can_upload_photo is None

    def test_requested_tokens_as_keys(self):
        emp = Employee.model_validate({
            "ID": "42",
            "DisplayName": "Ada Lovelace",
            "WorkEmail": "ada@example.com",
            "LinkedIn": "https://linkedin.com/in/ada",
            "PhotoURL": "https://example.com/ada.jpg",
            "WorkPhoneExtension": "123",
            "Reporting to": "Charles Babbage",
        })
        assert emp.display_name == "Ada Lovelace"
        assert emp.work_email == "ada@example.com"
        assert emp.linked_in == "https://linkedin.com/in/ada"
        assert emp.photo_url == "https://example.com/ada.jpg"
        assert emp.work_phone_extension == "123"
        assert emp.reporting_to == "Charles Babbage"

    def test_camel_case_keys(self):
        emp = Employee.model_validate({
            "id": "5",
            "workEmail": "bob@example.com",
            "photoUploaded": True,
            "canUploadPhoto": 1,
        })
        assert emp.id == "5"
        assert emp.work_email == "bob@example.com"
        assert emp.photo_uploaded is True
        assert emp.can_upload_photo == 1

    def test_numeric_id_becomes_string(self):
        assert Employee.model_validate({"id": 123}).id == "123"

    def test_unknown_keys_ignored(self):
        emp = Employee.model_validate({"ID": "1", "supervisor": "Someone"})
        assert not hasattr(emp, "supervisor")

    def test_missing_id_is_empty(self):
        emp = Employee.model_validate({"WorkEmail": "a@x.com"})
        assert emp.id == ""
        assert emp.work_email == "a@x.com"

    def test_directory_row_without_id_does_not_fail_listing(self):
        resp = EmployeeDirectoryResponse.model_validate(
            {"employees": [{"workEmail": "ghost@x.com"}, {"id": "7", "workEmail": "a@x.com"}]}
        )
        assert [e.id for e in resp.employees] == ["", "7"]

    def test_built_from_attribute_names(self):
        emp = Employee(id="1", work_email="a@x.com")
        assert emp.work_email == "a@x.com"

    def test_frozen(self):
        emp = Employee(id="1")
        with pytest.raises(ValidationError):
            emp.work_email = "changed@example.com"


class TestEmployeeDirectoryResponse:
    def test_decodes_employees(self):
        resp = EmployeeDirectoryResponse.model_validate(
            {"Employees": [{"ID": "7", "WorkEmail": "a@x.com"}]}
        )
        assert len(resp.employees) == 1
        assert resp.employees[0].id == "7"

    def test_live_directory_shape(self):
        resp = EmployeeDirectoryResponse.model_validate({
            "fields": [{"id": "displayName", "type": "text", "name": "Display name"}],
            "employees": [{"id": "7", "displayName": "Ada", "workEmail": "a@x.com"}],
        })
        assert resp.employees[0].display_name == "Ada"

    def test_missing_array_is_empty(self):
        assert EmployeeDirectoryResponse.model_validate({}).employees == []

    def test_null_array_is_empty(self):
        assert EmployeeDirectoryResponse.model_validate({"Employees": None}).employees == []

    def test_wrong_shape_rejected(self):
        with pytest.raises(ValidationError):
            EmployeeDirectoryResponse.model_validate({"Employees": "nope"})
