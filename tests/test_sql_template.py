from datetime import date, datetime

import pytest
from sqlalchemy import text

from queries import sql_templates
from queries.sql_template import SqlTemplates, UnknownColumnError, build_update_values, render_literal, sql_value


def test_sql_value_literal_rules():
    assert sql_value(None) == "NULL"
    assert sql_value(True) == "1"
    assert sql_value(False) == "0"
    assert sql_value(42) == "42"
    assert sql_value(3.5) == "3.5"
    assert sql_value("O'Brien") == "'O''Brien'"
    assert sql_value(date(2024, 1, 2)) == "'2024-01-02'"
    assert sql_value(datetime(2024, 1, 2, 9, 30)) == "'2024-01-02T09:30:00'"


def test_render_literal_substitutes_named_values():
    stmt = text("SELECT * FROM Users WHERE email = :email AND phoneNumber = :phone")
    rendered = render_literal(stmt, {"email": "a'b@x.com", "phone": None})
    assert rendered == "SELECT * FROM Users WHERE email = 'a''b@x.com' AND phoneNumber = NULL"


def test_render_literal_leaves_time_literals_alone():
    rendered = render_literal("SELECT '10:30' AS t, :n AS n", {"n": 5})
    assert rendered == "SELECT '10:30' AS t, 5 AS n"


def test_build_update_values_rejects_unknown_columns():
    assert build_update_values({"notes": "x"}, ("notes", "orderType")) == {"notes": "x"}
    with pytest.raises(UnknownColumnError) as exc:
        build_update_values({"notes": "x", "orderId": 1, "drop": 2}, ("notes",))
    assert exc.value.columns == ["drop", "orderId"]


def test_registry_render_and_unknown_name():
    registry = SqlTemplates()

    @registry.template("Answer")
    def answer(values):
        return text("SELECT :v AS v")

    assert registry.names() == ["Answer"]
    assert str(registry.render("Answer", {"v": 1})) == "SELECT :v AS v"
    with pytest.raises(KeyError):
        registry.render("Missing")
    with pytest.raises(ValueError):
        registry.template("Answer")(answer)


def test_all_query_modules_register_templates():
    names = sql_templates.names()
    for name in ("InsertUser", "GetAllBusinesses", "InsertProduct", "InsertOrder",
                 "InsertOrderDeliveryAddressMapping", "CheckAllMeasurementsDone"):
        assert name in names
