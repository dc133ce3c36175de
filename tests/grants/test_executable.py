"""Test GRANT / REVOKE / SHOW GRANTS OF rendering."""

import pytest

from grantsql.grants import (
    Grantee,
    GranteeKind,
    account_grant,
    function_grant,
    materialized_view_grant,
    schema_grant,
    table_grant,
    warehouse_grant,
)


def test_grant_select_to_role():
    sql = table_grant("DB", "SCH", "T").role("ANALYST").grant("SELECT", False)
    assert sql == 'GRANT SELECT ON TABLE "DB"."SCH"."T" TO ROLE "ANALYST"'


def test_grant_default_has_no_grant_option():
    sql = table_grant("DB", "SCH", "T").role("ANALYST").grant("SELECT")
    assert "WITH GRANT OPTION" not in sql


def test_grant_with_grant_option():
    sql = table_grant("DB", "SCH", "T").role("ANALYST").grant("SELECT", True)
    assert sql == 'GRANT SELECT ON TABLE "DB"."SCH"."T" TO ROLE "ANALYST" WITH GRANT OPTION'
    assert sql.endswith("WITH GRANT OPTION")


def test_ownership_copies_current_grants():
    sql = schema_grant("DB", "SCH").role("ADMIN").grant("OWNERSHIP", False)
    assert sql == 'GRANT OWNERSHIP ON SCHEMA "DB"."SCH" TO ROLE "ADMIN" COPY CURRENT GRANTS'


def test_ownership_ignores_grant_option():
    executable = schema_grant("DB", "SCH").role("ADMIN")
    assert executable.grant("OWNERSHIP", True) == executable.grant("OWNERSHIP", False)
    assert "WITH GRANT OPTION" not in executable.grant("OWNERSHIP", True)


def test_ownership_match_is_case_sensitive():
    sql = schema_grant("DB", "SCH").role("ADMIN").grant("ownership", True)
    assert sql == 'GRANT ownership ON SCHEMA "DB"."SCH" TO ROLE "ADMIN" WITH GRANT OPTION'


@pytest.mark.parametrize("privilege", ["SELECT", "OWNERSHIP", "ALL PRIVILEGES"])
def test_revoke_has_no_option_clauses(privilege):
    executable = table_grant("DB", "SCH", "T").role("ANALYST")
    executable.grant(privilege, True)
    sql = executable.revoke(privilege)
    assert sql == f'REVOKE {privilege} ON TABLE "DB"."SCH"."T" FROM ROLE "ANALYST"'
    assert "GRANT OPTION" not in sql
    assert "COPY CURRENT GRANTS" not in sql


def test_share_grantee():
    sql = table_grant("DB", "SCH", "T").share("PARTNER").grant("SELECT")
    assert sql == 'GRANT SELECT ON TABLE "DB"."SCH"."T" TO SHARE "PARTNER"'


def test_show_grants_of_share():
    assert warehouse_grant("WH1").share("PARTNER").show() == 'SHOW GRANTS OF SHARE "PARTNER"'


def test_show_grants_of_role():
    assert table_grant("DB", "S", "T").role("ANALYST").show() == 'SHOW GRANTS OF ROLE "ANALYST"'


def test_materialized_view_uses_view_keyword():
    locator = materialized_view_grant("DB", "SCH", "MV")
    assert "MATERIALIZED VIEW" in locator.show()

    grant = locator.role("X").grant("SELECT", False)
    assert grant == 'GRANT SELECT ON VIEW "DB"."SCH"."MV" TO ROLE "X"'
    assert "MATERIALIZED VIEW" not in grant

    revoke = locator.share("P").revoke("SELECT")
    assert revoke == 'REVOKE SELECT ON VIEW "DB"."SCH"."MV" FROM SHARE "P"'


def test_account_grant_has_no_dangling_space():
    executable = account_grant().role("SYSADMIN")
    assert executable.grant("CREATE DATABASE") == 'GRANT CREATE DATABASE ON ACCOUNT TO ROLE "SYSADMIN"'
    assert executable.revoke("MONITOR USAGE") == 'REVOKE MONITOR USAGE ON ACCOUNT FROM ROLE "SYSADMIN"'


def test_function_grant():
    sql = function_grant("DB", "S", "F", ["NUMBER", "VARCHAR"]).role("R").grant("USAGE")
    assert sql == 'GRANT USAGE ON FUNCTION "DB"."S"."F"(NUMBER, VARCHAR) TO ROLE "R"'


def test_executable_is_reusable_across_privileges():
    executable = warehouse_grant("WH1").role("R")
    assert executable.grant("USAGE") == 'GRANT USAGE ON WAREHOUSE "WH1" TO ROLE "R"'
    assert executable.grant("OPERATE") == 'GRANT OPERATE ON WAREHOUSE "WH1" TO ROLE "R"'


def test_executable_records_target_and_grantee():
    locator = table_grant("DB", "SCH", "T")
    executable = locator.share("PARTNER")
    assert executable.target == locator
    assert executable.grantee == Grantee("PARTNER", GranteeKind.SHARE)


def test_privilege_inserted_verbatim():
    sql = table_grant("DB", "S", "T").role("R").grant("select, insert")
    assert sql == 'GRANT select, insert ON TABLE "DB"."S"."T" TO ROLE "R"'
