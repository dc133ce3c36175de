"""grantsql: Snowflake GRANT/REVOKE/SHOW statement builder."""

from grantsql.grants import (
    GranteeKind,
    GrantExecutable,
    ObjectKind,
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
