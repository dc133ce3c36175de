"""Test object and grantee kind enumerations."""

import pytest

from grantsql.grants import GranteeKind, ObjectKind
from grantsql.grants._types import GRANT_KEYWORD_KIND, NAME_PARTS


def test_every_kind_has_an_arity():
    assert set(NAME_PARTS) == set(ObjectKind)


@pytest.mark.parametrize(
    "slug,kind",
    [
        ("account", ObjectKind.ACCOUNT),
        ("materialized-view", ObjectKind.MATERIALIZED_VIEW),
        ("resource-monitor", ObjectKind.RESOURCE_MONITOR),
        ("file-format", ObjectKind.FILE_FORMAT),
        ("Table", ObjectKind.TABLE),
    ],
)
def test_from_slug(slug, kind):
    assert ObjectKind.from_slug(slug) == kind


def test_slug_round_trips():
    for kind in ObjectKind:
        assert ObjectKind.from_slug(kind.slug) == kind


def test_unknown_slug():
    with pytest.raises(ValueError, match="Unknown object kind 'tabel'"):
        ObjectKind.from_slug("tabel")


def test_keywords_are_sql():
    assert ObjectKind.EXTERNAL_TABLE.value == "EXTERNAL TABLE"
    assert GranteeKind.SHARE.value == "SHARE"


def test_takes_arguments():
    assert ObjectKind.FUNCTION.takes_arguments
    assert ObjectKind.PROCEDURE.takes_arguments
    assert not ObjectKind.TABLE.takes_arguments


def test_keyword_tables_are_read_only():
    with pytest.raises(TypeError):
        GRANT_KEYWORD_KIND[ObjectKind.TABLE] = ObjectKind.VIEW
