# backend/database/errors.py


class DatabaseConnectionError(ConnectionError):
    """The connection pool could not be established."""


class InsertFailedError(RuntimeError):
    """An insert statement returned no identifier."""

    def __init__(self, template_name: str):
        self.template_name = template_name
        super().__init__(f"Insert failed: {template_name} returned no rows")
