"""Object and grantee kinds. Enum values are the literal SQL keywords."""

from __future__ import annotations

import enum
from types import MappingProxyType


class ObjectKind(enum.Enum):
    ACCOUNT = "ACCOUNT"
    RESOURCE_MONITOR = "RESOURCE MONITOR"
    INTEGRATION = "INTEGRATION"
    DATABASE = "DATABASE"
    SCHEMA = "SCHEMA"
    STAGE = "STAGE"
    VIEW = "VIEW"
    MATERIALIZED_VIEW = "MATERIALIZED VIEW"
    TABLE = "TABLE"
    WAREHOUSE = "WAREHOUSE"
    EXTERNAL_TABLE = "EXTERNAL TABLE"
    FILE_FORMAT = "FILE FORMAT"
    FUNCTION = "FUNCTION"
    PROCEDURE = "PROCEDURE"
    SEQUENCE = "SEQUENCE"
    STREAM = "STREAM"

    @property
    def slug(self) -> str:
        """CLI/config spelling, e.g. ``materialized-view``."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_slug(cls, slug: str) -> ObjectKind:
        try:
            return cls[slug.upper().replace("-", "_")]
        except KeyError:
            valid = ", ".join(k.slug for k in cls)
            raise ValueError(f"Unknown object kind '{slug}'. Valid: {valid}") from None

    @property
    def arity(self) -> int:
        """Number of identifier parts that locate an object of this kind."""
        return NAME_PARTS[self]

    @property
    def takes_arguments(self) -> bool:
        return self in (ObjectKind.FUNCTION, ObjectKind.PROCEDURE)


class GranteeKind(enum.Enum):
    ROLE = "ROLE"
    SHARE = "SHARE"
    USER = "USER"  # role membership grants only; never produced by a locator


NAME_PARTS: MappingProxyType[ObjectKind, int] = MappingProxyType({
    ObjectKind.ACCOUNT: 0,
    ObjectKind.RESOURCE_MONITOR: 1,
    ObjectKind.INTEGRATION: 1,
    ObjectKind.DATABASE: 1,
    ObjectKind.WAREHOUSE: 1,
    ObjectKind.SCHEMA: 2,
    ObjectKind.STAGE: 3,
    ObjectKind.VIEW: 3,
    ObjectKind.MATERIALIZED_VIEW: 3,
    ObjectKind.TABLE: 3,
    ObjectKind.EXTERNAL_TABLE: 3,
    ObjectKind.FILE_FORMAT: 3,
    ObjectKind.FUNCTION: 3,
    ObjectKind.PROCEDURE: 3,
    ObjectKind.SEQUENCE: 3,
    ObjectKind.STREAM: 3,
})

# Privileges on materialized views are granted with the plain VIEW keyword.
GRANT_KEYWORD_KIND: MappingProxyType[ObjectKind, ObjectKind] = MappingProxyType({
    ObjectKind.MATERIALIZED_VIEW: ObjectKind.VIEW,
})
