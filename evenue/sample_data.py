"""
Fixed sample rows for the Evenue showcase.

Rows that belong to a party refer to it by position: 0 is the first party in
``party_id`` order, 1 the second. Party ids are generated by the database, so
which party lands at which position differs between runs.
"""
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal

from evenue.models.base import AttendeeStatus, PartyType

CET = timezone(timedelta(hours=1))
CEST = timezone(timedelta(hours=2))


# (email, first_name, last_name, age, country)
USERS = [
    ("lady.gaga@gmail.com", "Lady", "Gaga", 35, "US"),
    ("kim.kardashian@gmail.com", "Kim", "Kardashian", 40, "US"),
    ("kanye.west@gmail.com", "Kanye", "West", 44, "US"),
    ("brad.pitt@gmail.com", "Brad", "Pitt", 57, "US"),
    ("angelina.jolie@gmail.com", "Angelina", "Jolie", 45, "US"),
    ("leonardo.dicaprio@gmail.com", "Leonardo", "DiCaprio", 46, "US"),
    ("tom.hanks@gmail.com", "Tom", "Hanks", 64, "US"),
    ("meryl.streep@gmail.com", "Meryl", "Streep", 71, "US"),
    ("dwayne.johnson@gmail.com", "Dwayne", "Johnson", 48, "US"),
    ("ryan.reynolds@gmail.com", "Ryan", "Reynolds", 44, "CA"),
    ("michael.jackson@gmail.com", "Michael", "Jackson", 50, "US"),
    ("taylor.swift@gmail.com", "Taylor", "Swift", 31, "US"),
    ("adele@gmail.com", "Adele", "Adkins", 32, "GB"),
    ("ed.sheeran@gmail.com", "Ed", "Sheeran", 30, "GB"),
    ("justin.bieber@gmail.com", "Justin", "Bieber", 26, "CA"),
    ("beyonce@gmail.com", "Beyoncé", "Knowles", 39, "US"),
]

# Plain-text passwords; hashed by the database on insert
PASSWORDS = {
    "lady.gaga@gmail.com": "FamousForAMeatDress126",
    "kim.kardashian@gmail.com": "iamkimkardashian",
    "kanye.west@gmail.com": "iloveMyselfMoreThanKanye",
    "brad.pitt@gmail.com": "BradsterBrad",
    "angelina.jolie@gmail.com": "TombRaiderJolie",
    "leonardo.dicaprio@gmail.com": "FloatingDoor",
    "tom.hanks@gmail.com": "Tommybro07",
    "meryl.streep@gmail.com": "MerylStreepPass",
    "dwayne.johnson@gmail.com": "TheRealRock",
    "ryan.reynolds@gmail.com": "Ilovetwitter",
    "michael.jackson@gmail.com": "Shamona198",
    "taylor.swift@gmail.com": "Blondehairgalxoxo",
    "adele@gmail.com": "RollingInTheDeep",
    "ed.sheeran@gmail.com": "CheekyGinger187",
    "justin.bieber@gmail.com": "DrewCEOJB",
    "beyonce@gmail.com": "JayZsWife1942",
}

# (reporter, reported, report_time, reason); a report_time of None means now()
USER_REPORTS = [
    ("lady.gaga@gmail.com", "kim.kardashian@gmail.com", None, "Spamming"),
    ("lady.gaga@gmail.com", "kim.kardashian@gmail.com",
     datetime(2022, 12, 18, 12, 34, 56, tzinfo=CEST), "Being obnoxious"),
    ("adele@gmail.com", "ed.sheeran@gmail.com",
     datetime(2022, 9, 3, 8, 23, 57, tzinfo=CET), "Trolling during karaoke"),
    ("beyonce@gmail.com", "ryan.reynolds@gmail.com",
     datetime(2022, 10, 18, 10, 24, 46, tzinfo=CET), "Cyberbullying"),
]

PARTIES = [
    {
        "title": "Celebrity Media Informatics Party!!!",
        "type": PartyType.ROOFTOPPARTY,
        "party_description": (
            "Im throwing a party for celebrities on top of the tallest flatroof bulding in "
            "regensburg. A lot of fun will be had for sure. xoxo"
        ),
        "guest_description": "A list celebrities only!!! Must be tech savvy!!!",
        "max_guests": 30,
        "host": "kim.kardashian@gmail.com",
        "attendance_fee": Decimal("12000.99"),
    },
    {
        "title": "Musician Rave",
        "type": PartyType.RAVE,
        "party_description": (
            "THE MOST TURNT UP RAVE IN GERMANY BRING ALL YOUR FRIENDS AND FRIENDS OF FRIENDS "
            "AND HAVE FUN"
        ),
        "guest_description": "Everybody is welcome and accepted",
        "max_guests": 100,
        "host": "lady.gaga@gmail.com",
        "attendance_fee": Decimal("0"),
    },
]

# (email, party position); the second leonardo.dicaprio entry is a duplicate
FAVOURITES = [
    ("leonardo.dicaprio@gmail.com", 0),
    ("michael.jackson@gmail.com", 0),
    ("justin.bieber@gmail.com", 0),
    ("leonardo.dicaprio@gmail.com", 1),
    ("michael.jackson@gmail.com", 1),
    ("dwayne.johnson@gmail.com", 0),
    ("dwayne.johnson@gmail.com", 1),
    ("ed.sheeran@gmail.com", 0),
    ("leonardo.dicaprio@gmail.com", 1),
    ("kanye.west@gmail.com", 0),
    ("beyonce@gmail.com", 0),
    ("angelina.jolie@gmail.com", 0),
]

# (party position, start month/day, start time, end month/day, end time)
PARTY_SCHEDULES = [
    (0, (12, 24), time(20, 0, tzinfo=CEST), (12, 25), time(6, 0, tzinfo=CEST)),
    (1, (12, 28), time(18, 0, tzinfo=CET), (12, 29), time(2, 0, tzinfo=CET)),
]

# (party position, (x, y))
PARTY_LOCATIONS = [
    (0, (12.357954, 51.340177)),
    (1, (6.840363, 51.232688)),
]

# (party position, street_name, street_number, zip_code)
PARTY_ADDRESSES = [
    (0, "Agnesstraße", "17", "40489"),
    (1, "Adlershelmstraße", "20", "04318"),
]

# (zip_code, city, state, country)
ZIP_CODES = [
    ("04318", "Leipzig", "Saxony", "de"),
    ("40489", "Düsseldorf", "North Rhine-Westphalia", "de"),
]

# (party position, attendee email, status)
PARTY_ATTENDEES = [
    (0, "dwayne.johnson@gmail.com", AttendeeStatus.ACCEPTED),
    (1, "dwayne.johnson@gmail.com", AttendeeStatus.ACCEPTED),
    (1, "kanye.west@gmail.com", AttendeeStatus.DECLINED),
    (0, "angelina.jolie@gmail.com", AttendeeStatus.DECLINED),
    (0, "adele@gmail.com", AttendeeStatus.DECLINED),
    (0, "ed.sheeran@gmail.com", AttendeeStatus.ACCEPTED),
    (0, "justin.bieber@gmail.com", AttendeeStatus.ACCEPTED),
    (0, "tom.hanks@gmail.com", AttendeeStatus.DECLINED),
    (1, "tom.hanks@gmail.com", AttendeeStatus.DECLINED),
]

# (party position, reporter, report_time, reason)
PARTY_REPORTS = [
    (0, "dwayne.johnson@gmail.com",
     datetime(2022, 12, 20, 11, 34, 36, tzinfo=CET), "Too few rocks lol."),
    (0, "dwayne.johnson@gmail.com",
     datetime(2022, 12, 20, 11, 35, 54, tzinfo=CET),
     "Apparently people named Dwayne are not welcome which is as discriminatory as it gets"),
    (0, "justin.bieber@gmail.com",
     datetime(2022, 12, 22, 6, 28, 42, tzinfo=CEST), "Way too many groupies allowed to attend."),
    (1, "kanye.west@gmail.com",
     datetime(2022, 11, 7, 21, 15, 13, tzinfo=timezone(timedelta(hours=5))),
     "The host cursed at me for no reason and then kicked me out."),
    (1, "beyonce@gmail.com",
     datetime(2022, 11, 4, 15, 15, 4, tzinfo=CET), "Highly offensive music was being played!."),
]

# Attendance states that count as attending in user_activity
ATTENDING_STATUSES = (AttendeeStatus.ATTENDING, AttendeeStatus.ACCEPTED)


def party_schedule(position_schedule, year: int):
    """Expand a PARTY_SCHEDULES entry into concrete dates for ``year``."""
    position, (start_month, start_day), start_time, (end_month, end_day), end_time = position_schedule
    return {
        "position": position,
        "start_date": date(year, start_month, start_day),
        "start_time_tz": start_time,
        "end_date": date(year, end_month, end_day),
        "end_time_tz": end_time,
    }
