"""
Tests for the numbered party queries.
"""
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock
from uuid import UUID

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from evenue.models import AttendeeStatus, PartyType
from evenue.services.party_queries import (
    QUERIES, PartyQueryService, QueryResult, UnknownQueryError, format_result,
)

DIALECT = postgresql.dialect()


def compiled(number: int, **params) -> str:
    stmt = PartyQueryService.statement(number, **params)
    return str(stmt.compile(dialect=DIALECT, compile_kwargs={"literal_binds": True}))


def test_catalog_lists_ten_queries():
    catalog = PartyQueryService.catalog()
    assert [entry["number"] for entry in catalog] == list(range(1, 11))
    assert all(entry["description"] for entry in catalog)


def test_unknown_query_number():
    with pytest.raises(UnknownQueryError):
        PartyQueryService.statement(11)


def test_count_parties_in_country():
    sql = compiled(1)
    assert "count(*)" in sql
    assert "FROM zip_code" in sql
    assert "zip_code.country = 'de'" in sql
    assert "zip_code.country = 'us'" in compiled(1, country="us")


def test_hosts_use_subquery():
    sql = compiled(2)
    assert "user_info.email IN (SELECT party_info.host" in sql


def test_start_date_window_defaults_to_sample_year():
    stmt = PartyQueryService.statement(3, year=2027)
    assert "party_datetime.start_date BETWEEN" in str(stmt.compile(dialect=DIALECT))
    assert sorted(stmt.compile().params.values()) == [date(2027, 11, 28), date(2027, 12, 25)]

    stmt = PartyQueryService.statement(3, start=date(2030, 1, 1), end=date(2030, 2, 1))
    assert sorted(stmt.compile().params.values()) == [date(2030, 1, 1), date(2030, 2, 1)]


def test_simple_aggregates():
    assert "avg(user_info.age)" in compiled(4)
    assert "SELECT DISTINCT user_info.country" in compiled(5)


def test_parties_attended_join():
    sql = compiled(6)
    assert "FROM party_info JOIN party_attendees ON party_info.party_id = party_attendees.party_id" in sql
    assert "party_attendees.attendee_email = 'dwayne.johnson@gmail.com'" in sql


def test_attendee_names_default_to_first_party():
    sql = compiled(7)
    assert "ORDER BY party_info.party_id" in sql
    assert "LIMIT 1" in sql

    stmt = PartyQueryService.statement(7, party_id="fb0c5eae-2f1b-4be8-af9d-ab09a6606c59")
    assert UUID("fb0c5eae-2f1b-4be8-af9d-ab09a6606c59") in stmt.compile().params.values()


def test_attendee_counts_ordered_descending():
    sql = compiled(8)
    assert "count(pa.attendee_email) AS attendees" in sql
    assert "GROUP BY p.party_id, p.title" in sql
    assert "ORDER BY attendees DESC" in sql


def test_attendees_at_zip_code():
    sql = compiled(9)
    assert "JOIN zip_code AS zc ON pl.zip_code = zc.zip_code" in sql
    assert "zc.zip_code = '40489'" in sql
    assert "GROUP BY ui.email, ui.first_name, ui.last_name" in sql


def test_parties_hosted_label():
    assert 'AS "Number of Parties Hosted"' in compiled(10)


def test_result_text_is_tab_separated():
    result = QueryResult(2, "hosts", ["email", "age"], [("a@b.c", 35), ("d@e.f", None)])
    assert result.to_text() == "a@b.c\t35\nd@e.f\tnull"
    assert format_result(result) == "Query 2: \na@b.c\t35\nd@e.f\tnull\n\n"


def test_enum_columns_render_database_labels():
    result = QueryResult(6, "attended", ["type", "attendee_status"], [(PartyType.RAVE, AttendeeStatus.ACCEPTED)])
    assert result.to_text() == "RAVE\taccepted"


def test_empty_result_renders_blank():
    assert format_result(QueryResult(7, "attendees", ["email"])) == "Query 7: \n\n\n"


def test_run_collects_rows():
    db = MagicMock()
    execution = MagicMock()
    execution.keys.return_value = ["avg_1"]
    execution.__iter__.return_value = iter([(Decimal("43.875"),)])
    db.execute.return_value = execution

    result = PartyQueryService(db).run(4)

    assert result.columns == ["avg_1"]
    assert result.rows == [(Decimal("43.875"),)]
    assert result.to_dict()["rows"] == [[Decimal("43.875")]]


def test_run_rolls_back_on_database_error():
    db = MagicMock()
    db.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))

    with pytest.raises(OperationalError):
        PartyQueryService(db).run(1)
    db.rollback.assert_called_once()


def test_every_query_compiles():
    for number in QUERIES:
        stmt = PartyQueryService.statement(number)
        assert str(stmt.compile(dialect=DIALECT)).startswith("SELECT")
