"""
Tests that the sample rows satisfy the schema's constraints.
"""
from datetime import date
from decimal import Decimal

from evenue import sample_data
from evenue.config import resolve_sample_year
from evenue.models import AttendeeStatus, PartyType


USER_EMAILS = {user[0] for user in sample_data.USERS}


def test_users_are_adults_with_country_codes():
    assert len(sample_data.USERS) == 16
    assert len(USER_EMAILS) == 16
    for email, first_name, last_name, age, country in sample_data.USERS:
        assert age >= 18
        assert len(country) == 2
        assert len(first_name) <= 30 and len(last_name) <= 30


def test_every_user_has_a_password_of_minimum_length():
    assert set(sample_data.PASSWORDS) == USER_EMAILS
    assert all(len(password) >= 8 for password in sample_data.PASSWORDS.values())


def test_parties_satisfy_checks():
    for party in sample_data.PARTIES:
        assert len(party["title"]) <= 80
        assert isinstance(party["type"], PartyType)
        assert 50 <= len(party["party_description"]) <= 300
        assert 20 <= len(party["guest_description"]) <= 100
        assert 1 <= party["max_guests"] <= 1000
        assert party["host"] in USER_EMAILS
        assert party["attendance_fee"] < Decimal("100000")


def test_party_positions_and_emails_resolve():
    party_count = len(sample_data.PARTIES)
    for email, position in sample_data.FAVOURITES:
        assert email in USER_EMAILS
        assert 0 <= position < party_count
    for position, email, status in sample_data.PARTY_ATTENDEES:
        assert email in USER_EMAILS
        assert 0 <= position < party_count
        assert isinstance(status, AttendeeStatus)
    for position, reporter, _, reason in sample_data.PARTY_REPORTS:
        assert reporter in USER_EMAILS
        assert len(reason) <= 500


def test_favourites_contain_one_duplicate():
    assert len(sample_data.FAVOURITES) - len(set(sample_data.FAVOURITES)) == 1


def test_zip_codes_match_addresses():
    address_zips = {zip_code for _, _, _, zip_code in sample_data.PARTY_ADDRESSES}
    assert {zip_code for zip_code, *_ in sample_data.ZIP_CODES} == address_zips
    assert all(country == "de" for *_, country in sample_data.ZIP_CODES)


def test_party_schedule_is_in_sample_year():
    schedule = sample_data.party_schedule(sample_data.PARTY_SCHEDULES[0], 2031)
    assert schedule["position"] == 0
    assert schedule["start_date"] == date(2031, 12, 24)
    assert schedule["end_date"] == date(2031, 12, 25)
    assert schedule["start_time_tz"].utcoffset().total_seconds() == 2 * 3600


def test_sample_year_defaults_to_next_year(monkeypatch):
    from evenue.config import settings

    monkeypatch.setattr(settings, "sample_party_year", None)
    assert resolve_sample_year(today=date(2026, 10, 19)) == 2027
    assert resolve_sample_year(2030) == 2030

    monkeypatch.setattr(settings, "sample_party_year", 2040)
    assert resolve_sample_year(today=date(2026, 10, 19)) == 2040


def test_schedules_pass_date_checks_for_default_year():
    today = date.today()
    year = today.year + 1
    for entry in sample_data.PARTY_SCHEDULES:
        schedule = sample_data.party_schedule(entry, year)
        assert schedule["start_date"] > today
        assert schedule["end_date"] > schedule["start_date"]
