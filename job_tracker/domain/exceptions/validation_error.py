"""
Validation-related domain exceptions.
"""


class ValidationError(Exception):
    """Base exception for validation errors."""

    pass


class RequiredFieldError(ValidationError):
    """Raised when required field is missing."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is missing")


class MissingUpdateFieldsError(ValidationError):
    """Raised when an update request lacks job number, field or value."""

    def __init__(self):
        super().__init__("Missing required fields: jobNumber, field, or value")


class InvalidFieldValueError(ValidationError):
    """Raised when a field value cannot be accepted."""

    def __init__(self, field_name: str, reason: str):
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Invalid value for '{field_name}': {reason}")


class UnknownFieldError(ValidationError):
    """Raised when a field name has no sheet column."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__("Invalid field name")


class DuplicateJobNumberError(ValidationError):
    """Raised when a job number is already present in the sheet."""

    def __init__(self, job_number: str):
        self.job_number = job_number
        super().__init__("Job number already exists. Please use a unique job number.")
