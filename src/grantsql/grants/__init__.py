"""Object locators and grant executables: the statement-building core."""

from grantsql.grants._types import GranteeKind, ObjectKind
from grantsql.grants.executable import Grantee, GrantExecutable
from grantsql.grants.locator import (
    ObjectLocator,
    account_grant,
    database_grant,
    external_table_grant,
    file_format_grant,
    function_grant,
    integration_grant,
    locate,
    materialized_view_grant,
    procedure_grant,
    resource_monitor_grant,
    schema_grant,
    sequence_grant,
    stage_grant,
    stream_grant,
    table_grant,
    view_grant,
    warehouse_grant,
)

__all__ = [
    "GrantExecutable",
    "Grantee",
    "GranteeKind",
    "ObjectKind",
    "ObjectLocator",
    "account_grant",
    "database_grant",
    "external_table_grant",
    "file_format_grant",
    "function_grant",
    "integration_grant",
    "locate",
    "materialized_view_grant",
    "procedure_grant",
    "resource_monitor_grant",
    "schema_grant",
    "sequence_grant",
    "stage_grant",
    "stream_grant",
    "table_grant",
    "view_grant",
    "warehouse_grant",
]
