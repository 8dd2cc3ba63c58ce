"""Type systems, transports and value conversions from database sources to Arrow destinations."""

__version__ = "0.1.0"

__all__ = [
    "typesystem",
    "dummy_arrow",
    "oracle_arrow",
    "sqlite_arrow",
    "mssql_arrow",
    "postgres_arrow",
    "mysql_arrow",
]