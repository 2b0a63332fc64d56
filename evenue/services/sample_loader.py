"""
Sample data loader for the Evenue showcase.

Inserts the fixed rows from ``evenue.sample_data`` in foreign key order. Link
tables are written with Core inserts because several of them carry no primary
key and one (favourites) holds a duplicate row.
"""
import logging
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import bindparam, func, insert, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from evenue.config import resolve_sample_year
from evenue.models import (
    Favourite, PartyAddress, PartyAttendee, PartyDatetime, PartyInfo, PartyLocation,
    PartyReport, UserInfo, UserLogin, UserReport, ZipCode,
)
from evenue import sample_data


USER_ACTIVITY_SQL = text("""
    INSERT INTO user_activity (email, parties_hosted, parties_attended)
    SELECT u.email,
           ARRAY(SELECT p.party_id FROM party_info p
                 WHERE p.host = u.email ORDER BY p.party_id),
           ARRAY(SELECT a.party_id FROM party_attendees a
                 WHERE a.attendee_email = u.email
                   AND a.attendee_status = ANY(CAST(:statuses AS attendee_status[]))
                 ORDER BY a.party_id)
    FROM user_info u
""")


class SampleDataLoader:
    """Loads the fixed sample rows into an empty schema."""

    def __init__(self, db: Session, year: Optional[int] = None):
        self.db = db
        self.year = resolve_sample_year(year)
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_all(self) -> Dict[str, int]:
        """Insert every sample row and commit; returns row counts per table."""
        try:
            counts = {
                "user_info": self.load_users(),
                "user_login": self.load_logins(),
                "user_reports": self.load_user_reports(),
                "party_info": self.load_parties(),
            }
            party_ids = self.party_ids()
            counts["favourites"] = self.load_favourites(party_ids)
            counts["party_datetime"] = self.load_party_datetimes(party_ids)
            counts["party_location"] = self.load_party_locations(party_ids)
            counts["party_address"] = self.load_party_addresses(party_ids)
            counts["zip_code"] = self.load_zip_codes()
            counts["party_attendees"] = self.load_party_attendees(party_ids)
            counts["party_reports"] = self.load_party_reports(party_ids)
            counts["user_activity"] = self.load_user_activity()

            self.db.commit()
        except SQLAlchemyError as e:
            self.logger.error(f"Error loading sample data: {e}")
            self.db.rollback()
            raise

        self.logger.info(f"Loaded sample data for {self.year}: {sum(counts.values())} rows")
        return counts

    def load_users(self) -> int:
        users = [
            UserInfo(email=email, first_name=first_name, last_name=last_name, age=age, country=country)
            for email, first_name, last_name, age, country in sample_data.USERS
        ]
        self.db.add_all(users)
        self.db.flush()
        return len(users)

    def load_logins(self) -> int:
        """Store bcrypt-style hashes computed by pgcrypto, never the plain text."""
        stmt = insert(UserLogin.__table__).values(
            email=bindparam("login_email"),
            password=func.crypt(bindparam("plain_password"), func.gen_salt("bf")),
        )
        rows = [
            {"login_email": email, "plain_password": password}
            for email, password in sample_data.PASSWORDS.items()
        ]
        self.db.execute(stmt, rows)
        return len(rows)

    def load_user_reports(self) -> int:
        reports = [
            UserReport(
                user_reporter_email=reporter,
                user_reported_email=reported,
                user_report_time=report_time if report_time is not None else func.now(),
                user_report_reason=reason,
            )
            for reporter, reported, report_time, reason in sample_data.USER_REPORTS
        ]
        self.db.add_all(reports)
        self.db.flush()
        return len(reports)

    def load_parties(self) -> int:
        parties = [PartyInfo(**party) for party in sample_data.PARTIES]
        self.db.add_all(parties)
        self.db.flush()
        return len(parties)

    def party_ids(self) -> List[UUID]:
        """Party ids in ``party_id`` order; positions in the sample data index this list."""
        return [row.party_id for row in self.db.query(PartyInfo.party_id).order_by(PartyInfo.party_id)]

    def _insert(self, model, rows: List[dict]) -> int:
        self.db.execute(insert(model.__table__), rows)
        return len(rows)

    def load_favourites(self, party_ids: List[UUID]) -> int:
        return self._insert(Favourite, [
            {"email": email, "party_id": party_ids[position]}
            for email, position in sample_data.FAVOURITES
        ])

    def load_party_datetimes(self, party_ids: List[UUID]) -> int:
        rows = []
        for entry in sample_data.PARTY_SCHEDULES:
            schedule = sample_data.party_schedule(entry, self.year)
            position = schedule.pop("position")
            rows.append({"party_id": party_ids[position], **schedule})
        return self._insert(PartyDatetime, rows)

    def load_party_locations(self, party_ids: List[UUID]) -> int:
        return self._insert(PartyLocation, [
            {"party_id": party_ids[position], "coordinates": coordinates}
            for position, coordinates in sample_data.PARTY_LOCATIONS
        ])

    def load_party_addresses(self, party_ids: List[UUID]) -> int:
        return self._insert(PartyAddress, [
            {
                "party_id": party_ids[position],
                "street_name": street_name,
                "street_number": street_number,
                "zip_code": zip_code,
            }
            for position, street_name, street_number, zip_code in sample_data.PARTY_ADDRESSES
        ])

    def load_zip_codes(self) -> int:
        return self._insert(ZipCode, [
            {"zip_code": zip_code, "city": city, "state": state, "country": country}
            for zip_code, city, state, country in sample_data.ZIP_CODES
        ])

    def load_party_attendees(self, party_ids: List[UUID]) -> int:
        return self._insert(PartyAttendee, [
            {"party_id": party_ids[position], "attendee_email": email, "attendee_status": status}
            for position, email, status in sample_data.PARTY_ATTENDEES
        ])

    def load_party_reports(self, party_ids: List[UUID]) -> int:
        reports = [
            PartyReport(
                party_id=party_ids[position],
                party_reporter_email=reporter,
                party_report_time=report_time,
                party_report_reason=reason,
            )
            for position, reporter, report_time, reason in sample_data.PARTY_REPORTS
        ]
        self.db.add_all(reports)
        self.db.flush()
        return len(reports)

    def load_user_activity(self) -> int:
        """Derive hosted and attended party lists for every user."""
        statuses = [status.value for status in sample_data.ATTENDING_STATUSES]
        result = self.db.execute(USER_ACTIVITY_SQL, {"statuses": statuses})
        return result.rowcount


def create_sample_loader(db: Session, year: Optional[int] = None) -> SampleDataLoader:
    """Factory function to create a sample data loader."""
    return SampleDataLoader(db, year)
