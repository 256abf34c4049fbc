"""数据库访问层."""

from adminhome.db.binding import (
    BoundDatabase,
    DatabaseBinding,
    UnboundDatabase,
    create_database_binding,
    dispose_database_binding,
)
from adminhome.db.service import (
    DatabaseService,
    DatabaseUnavailableError,
    QueryMeta,
    QueryResult,
)

__all__ = [
    "BoundDatabase",
    "DatabaseBinding",
    "DatabaseService",
    "DatabaseUnavailableError",
    "QueryMeta",
    "QueryResult",
    "UnboundDatabase",
    "create_database_binding",
    "dispose_database_binding",
]
