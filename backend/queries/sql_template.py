# backend/queries/sql_template.py
"""
Named SQL templates.

A template is a function that receives a mapping of named values and returns
a SQLAlchemy statement with bound parameters. Values never reach the SQL text;
``render_literal`` exists only to make log lines readable.
"""

import re
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import ClauseElement

Template = Callable[[Dict[str, Any]], ClauseElement]

_BIND_PARAM = re.compile(r"(?<![:\w]):(\w+)")


def now() -> datetime:
    """Request-time timestamp stamped on inserts and updates (naive UTC)."""
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


def sql_value(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return "'" + value.isoformat() + "'"
    return "'" + str(value).replace("'", "''") + "'"


def render_literal(statement: Union[str, ClauseElement], params: Optional[Mapping[str, Any]] = None) -> str:
    """Statement text with bound values substituted, for diagnostics only."""
    values: Dict[str, Any] = {}
    if isinstance(statement, str):
        sql = statement
    else:
        try:
            compiled = statement.compile(compile_kwargs={"render_postcompile": True})
        except SQLAlchemyError:
            return str(statement)
        sql = str(compiled)
        values.update(compiled.params)
    values.update(params or {})

    def _sub(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name not in values:
            return match.group(0)
        return sql_value(values[name])

    return _BIND_PARAM.sub(_sub, sql)


class UnknownColumnError(ValueError):
    def __init__(self, columns: Iterable[str]):
        self.columns: List[str] = sorted(columns)
        super().__init__(f"Unknown field(s): {', '.join(self.columns)}")


def build_update_values(fields: Mapping[str, Any], allowed_columns: Iterable[str]) -> Dict[str, Any]:
    """Validate a partial-update field map against a column allow-list."""
    allowed = set(allowed_columns)
    unknown = [key for key in fields if key not in allowed]
    if unknown:
        raise UnknownColumnError(unknown)
    return dict(fields)


class SqlTemplates:
    def __init__(self):
        self._templates: Dict[str, Template] = {}

    def template(self, name: str) -> Callable[[Template], Template]:
        def register(fn: Template) -> Template:
            if name in self._templates:
                raise ValueError(f"SQL template already registered: {name}")
            self._templates[name] = fn
            return fn
        return register

    def render(self, name: str, values: Optional[Mapping[str, Any]] = None) -> ClauseElement:
        try:
            fn = self._templates[name]
        except KeyError:
            raise KeyError(f"Unknown SQL template: {name}") from None
        return fn(dict(values or {}))

    def names(self) -> List[str]:
        return sorted(self._templates)


sql_templates = SqlTemplates()


@sql_templates.template("Ping")
def ping(values: Dict[str, Any]) -> ClauseElement:
    return text("SELECT 1 AS ok")
