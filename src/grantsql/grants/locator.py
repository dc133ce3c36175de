"""Object locators: kind keyword plus canonical quoted qualified name."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from grantsql.grants._types import GRANT_KEYWORD_KIND, GranteeKind, ObjectKind
from grantsql.grants.executable import Grantee, GrantExecutable, on_clause


def quote_identifier(name: str) -> str:
    return f'"{name}"'


def qualify(*parts: str, argument_types: Sequence[str] | None = None) -> str:
    """Quote each part and join with dots.

    When ``argument_types`` is given (functions and procedures), the raw type
    names are appended in parentheses, comma-space joined and unquoted.
    """
    qualified = ".".join(quote_identifier(p) for p in parts)
    if argument_types is not None:
        qualified += f"({', '.join(argument_types)})"
    return qualified


@dataclass(frozen=True)
class ObjectLocator:
    name: str
    qualified_name: str
    kind: ObjectKind

    @property
    def keyword(self) -> str:
        return self.kind.value

    @property
    def grant_keyword(self) -> str:
        """Keyword used by GRANT/REVOKE, which differs from ``keyword`` for materialized views."""
        return GRANT_KEYWORD_KIND.get(self.kind, self.kind).value

    def show(self) -> str:
        """SQL listing all privileges granted on this object."""
        return f"SHOW GRANTS ON {on_clause(self.keyword, self.qualified_name)}"

    def role(self, name: str) -> GrantExecutable:
        return GrantExecutable(target=self, grantee=Grantee(name, GranteeKind.ROLE))

    def share(self, name: str) -> GrantExecutable:
        return GrantExecutable(target=self, grantee=Grantee(name, GranteeKind.SHARE))


def account_grant() -> ObjectLocator:
    return ObjectLocator(name="", qualified_name="", kind=ObjectKind.ACCOUNT)


def _single(kind: ObjectKind, name: str) -> ObjectLocator:
    return ObjectLocator(name=name, qualified_name=qualify(name), kind=kind)


def _schema_object(kind: ObjectKind, db: str, schema: str, name: str) -> ObjectLocator:
    return ObjectLocator(name=name, qualified_name=qualify(db, schema, name), kind=kind)


def _routine(
    kind: ObjectKind, db: str, schema: str, name: str, argument_types: Sequence[str]
) -> ObjectLocator:
    return ObjectLocator(
        name=name,
        qualified_name=qualify(db, schema, name, argument_types=argument_types),
        kind=kind,
    )


def database_grant(name: str) -> ObjectLocator:
    return _single(ObjectKind.DATABASE, name)


def warehouse_grant(name: str) -> ObjectLocator:
    return _single(ObjectKind.WAREHOUSE, name)


def resource_monitor_grant(name: str) -> ObjectLocator:
    return _single(ObjectKind.RESOURCE_MONITOR, name)


def integration_grant(name: str) -> ObjectLocator:
    return _single(ObjectKind.INTEGRATION, name)


def schema_grant(db: str, schema: str) -> ObjectLocator:
    return ObjectLocator(name=schema, qualified_name=qualify(db, schema), kind=ObjectKind.SCHEMA)


def stage_grant(db: str, schema: str, stage: str) -> ObjectLocator:
    return _schema_object(ObjectKind.STAGE, db, schema, stage)


def view_grant(db: str, schema: str, view: str) -> ObjectLocator:
    return _schema_object(ObjectKind.VIEW, db, schema, view)


def materialized_view_grant(db: str, schema: str, view: str) -> ObjectLocator:
    return _schema_object(ObjectKind.MATERIALIZED_VIEW, db, schema, view)


def table_grant(db: str, schema: str, table: str) -> ObjectLocator:
    return _schema_object(ObjectKind.TABLE, db, schema, table)


def external_table_grant(db: str, schema: str, external_table: str) -> ObjectLocator:
    return _schema_object(ObjectKind.EXTERNAL_TABLE, db, schema, external_table)


def file_format_grant(db: str, schema: str, file_format: str) -> ObjectLocator:
    return _schema_object(ObjectKind.FILE_FORMAT, db, schema, file_format)


def sequence_grant(db: str, schema: str, sequence: str) -> ObjectLocator:
    return _schema_object(ObjectKind.SEQUENCE, db, schema, sequence)


def stream_grant(db: str, schema: str, stream: str) -> ObjectLocator:
    return _schema_object(ObjectKind.STREAM, db, schema, stream)


def function_grant(
    db: str, schema: str, function: str, argument_types: Sequence[str] = ()
) -> ObjectLocator:
    return _routine(ObjectKind.FUNCTION, db, schema, function, argument_types)


def procedure_grant(
    db: str, schema: str, procedure: str, argument_types: Sequence[str] = ()
) -> ObjectLocator:
    return _routine(ObjectKind.PROCEDURE, db, schema, procedure, argument_types)


_CONSTRUCTORS: dict[ObjectKind, Callable[..., ObjectLocator]] = {
    ObjectKind.ACCOUNT: account_grant,
    ObjectKind.RESOURCE_MONITOR: resource_monitor_grant,
    ObjectKind.INTEGRATION: integration_grant,
    ObjectKind.DATABASE: database_grant,
    ObjectKind.WAREHOUSE: warehouse_grant,
    ObjectKind.SCHEMA: schema_grant,
    ObjectKind.STAGE: stage_grant,
    ObjectKind.VIEW: view_grant,
    ObjectKind.MATERIALIZED_VIEW: materialized_view_grant,
    ObjectKind.TABLE: table_grant,
    ObjectKind.EXTERNAL_TABLE: external_table_grant,
    ObjectKind.FILE_FORMAT: file_format_grant,
    ObjectKind.FUNCTION: function_grant,
    ObjectKind.PROCEDURE: procedure_grant,
    ObjectKind.SEQUENCE: sequence_grant,
    ObjectKind.STREAM: stream_grant,
}


def locate(
    kind: ObjectKind, *parts: str, argument_types: Sequence[str] = ()
) -> ObjectLocator:
    """Build the locator for ``kind`` from its identifier parts.

    Raises ValueError if the number of parts does not match the kind.
    Argument types are only used by functions and procedures.
    """
    if len(parts) != kind.arity:
        raise ValueError(
            f"{kind.slug} takes {kind.arity} name part(s), got {len(parts)}"
        )
    constructor = _CONSTRUCTORS[kind]
    if kind.takes_arguments:
        return constructor(*parts, argument_types)
    return constructor(*parts)
