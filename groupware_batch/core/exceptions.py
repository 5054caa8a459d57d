"""
Domain exceptions raised by the batch services
"""


class BatchError(Exception):
    """Base class for batch processing errors"""


class RegistryLookupError(BatchError, KeyError):
    """A code was not found in one of the reference registries"""

    def __init__(self, registry: str, code):
        self.registry = registry
        self.code = code
        super().__init__(f"Unknown {registry} code: {code!r}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidYearMonthError(BatchError, ValueError):
    """Target month argument is not in YYYY-MM form"""


class GrantTableError(BatchError):
    """Paid leave grant table is missing or inconsistent for an employee"""


class EmployeeDataError(BatchError):
    """Employee row lacks a value the batch needs (hire date, grant date, ...)"""
