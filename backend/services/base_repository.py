# backend/services/base_repository.py
from typing import Any, Dict, List, Mapping, Optional

from database.errors import InsertFailedError
from database.executor import QueryExecutor, QueryResult
from queries import sql_templates


class BaseRepository:
    """Shared result-shape conventions for the entity repositories."""

    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    def run(self, template: str, values: Optional[Mapping[str, Any]] = None) -> QueryResult:
        return self.executor.execute(sql_templates.render(template, values))

    def insert(self, template: str, values: Mapping[str, Any]) -> int:
        result = self.run(template, values)
        if not result.rows:
            raise InsertFailedError(template)
        return next(iter(result.rows[0].values()))

    def first(self, template: str, values: Optional[Mapping[str, Any]] = None) -> Optional[Dict[str, Any]]:
        return self.run(template, values).first

    def all(self, template: str, values: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        return self.run(template, values).rows
