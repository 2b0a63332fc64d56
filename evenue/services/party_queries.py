"""
Party Queries

The ten fixed read queries of the Evenue showcase and the tab separated
rendering of their results.
"""
import enum
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased
from sqlalchemy.sql import Select

from evenue.config import resolve_sample_year
from evenue.models import PartyAddress, PartyAttendee, PartyDatetime, PartyInfo, UserInfo, ZipCode


DEFAULT_COUNTRY = "de"
DEFAULT_ATTENDEE_EMAIL = "dwayne.johnson@gmail.com"
DEFAULT_ZIP_CODE = "40489"
NULL_TEXT = "null"


def render_value(value: Any) -> str:
    """Text form of one column value; enum columns print their database label."""
    if value is None:
        return NULL_TEXT
    if isinstance(value, enum.Enum):
        return str(value.value)
    return str(value)


@dataclass
class QueryResult:
    """Column names and rows returned by one numbered query."""

    number: int
    description: str
    columns: List[str]
    rows: List[tuple] = field(default_factory=list)

    def to_text(self) -> str:
        """One line per row, values separated by tabs."""
        return "\n".join(
            "\t".join(render_value(value) for value in row)
            for row in self.rows
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "description": self.description,
            "columns": self.columns,
            "rows": [list(row) for row in self.rows],
        }


@dataclass(frozen=True)
class PartyQuery:
    number: int
    description: str
    build: Callable[..., Select]


def parties_in_country(country: str = DEFAULT_COUNTRY, **_) -> Select:
    return select(func.count()).select_from(ZipCode).where(ZipCode.country == country)


def party_hosts(**_) -> Select:
    return (
        select(UserInfo.email, UserInfo.first_name, UserInfo.last_name, UserInfo.age)
        .where(UserInfo.email.in_(select(PartyInfo.host)))
    )


def parties_starting_between(start: Optional[date] = None, end: Optional[date] = None,
                             year: Optional[int] = None, **_) -> Select:
    year = resolve_sample_year(year)
    start = start or date(year, 11, 28)
    end = end or date(year, 12, 25)
    return select(PartyDatetime.__table__).where(PartyDatetime.start_date.between(start, end))


def average_user_age(**_) -> Select:
    return select(func.avg(UserInfo.age))


def user_countries(**_) -> Select:
    return select(UserInfo.country).distinct()


def parties_attended_by(email: str = DEFAULT_ATTENDEE_EMAIL, **_) -> Select:
    return (
        select(PartyInfo.__table__, PartyAttendee.__table__)
        .join_from(PartyInfo, PartyAttendee, PartyInfo.party_id == PartyAttendee.party_id)
        .where(PartyAttendee.attendee_email == email)
    )


def party_attendee_names(party_id=None, **_) -> Select:
    """Attendees of one party; without ``party_id`` the first party in id order."""
    if isinstance(party_id, str):
        party_id = UUID(party_id)
    elif party_id is None:
        party_id = (
            select(PartyInfo.party_id).order_by(PartyInfo.party_id).limit(1).scalar_subquery()
        )
    return (
        select(UserInfo.first_name, UserInfo.last_name, UserInfo.email)
        .join(PartyAttendee, UserInfo.email == PartyAttendee.attendee_email)
        .where(PartyAttendee.party_id == party_id)
    )


def attendee_counts(**_) -> Select:
    p = aliased(PartyInfo, name="p")
    pa = aliased(PartyAttendee, name="pa")
    attendees = func.count(pa.attendee_email).label("attendees")
    return (
        select(p.party_id, p.title, attendees)
        .join(pa, p.party_id == pa.party_id)
        .group_by(p.party_id, p.title)
        .order_by(attendees.desc())
    )


def attendees_at_zip_code(zip_code: str = DEFAULT_ZIP_CODE, **_) -> Select:
    ui = aliased(UserInfo, name="ui")
    pa = aliased(PartyAttendee, name="pa")
    pl = aliased(PartyAddress, name="pl")
    zc = aliased(ZipCode, name="zc")
    return (
        select(ui.email, ui.first_name, ui.last_name)
        .join(pa, ui.email == pa.attendee_email)
        .join(pl, pa.party_id == pl.party_id)
        .join(zc, pl.zip_code == zc.zip_code)
        .where(zc.zip_code == zip_code)
        .group_by(ui.email, ui.first_name, ui.last_name)
    )


def parties_hosted_per_user(**_) -> Select:
    u = aliased(UserInfo, name="u")
    ph = aliased(PartyInfo, name="ph")
    p = aliased(PartyInfo, name="p")
    return (
        select(u.email, func.count(p.party_id).label("Number of Parties Hosted"))
        .join(ph, u.email == ph.host)
        .join(p, p.party_id == ph.party_id)
        .group_by(u.email)
    )


QUERIES: Dict[int, PartyQuery] = {
    query.number: query
    for query in (
        PartyQuery(1, "Counts all the parties that are in a certain country.", parties_in_country),
        PartyQuery(2, "Selects all of the info about the party hosts.", party_hosts),
        PartyQuery(3, "Selects all parties whose start dates are between two dates.", parties_starting_between),
        PartyQuery(4, "Selects the average age of all users.", average_user_age),
        PartyQuery(5, "Selects all of the distinct countries users are from.", user_countries),
        PartyQuery(6, "Selects and joins all the parties a certain user is attending.", parties_attended_by),
        PartyQuery(7, "Selects the full names of the attendees of a specific party.", party_attendee_names),
        PartyQuery(8, "Lists parties with at least one attendee by attendee count, descending.", attendee_counts),
        PartyQuery(9, "Selects all users who are attending a party within a given zip code.", attendees_at_zip_code),
        PartyQuery(10, "Selects all users and the amount of parties they have hosted.", parties_hosted_per_user),
    )
}


class UnknownQueryError(KeyError):
    """Raised when a query number outside the catalogue is requested."""


class PartyQueryService:
    """Runs the numbered party queries against a database session."""

    def __init__(self, db: Session):
        self.db = db
        self.logger = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def catalog() -> List[Dict[str, Any]]:
        return [{"number": q.number, "description": q.description} for q in QUERIES.values()]

    @staticmethod
    def statement(number: int, **params) -> Select:
        if number not in QUERIES:
            raise UnknownQueryError(number)
        return QUERIES[number].build(**params)

    def run(self, number: int, **params) -> QueryResult:
        """Execute query ``number`` and collect its rows."""
        stmt = self.statement(number, **params)
        try:
            result = self.db.execute(stmt)
            columns = list(result.keys())
            rows = [tuple(row) for row in result]
        except SQLAlchemyError as e:
            self.logger.error(f"Query {number} failed: {e}")
            self.db.rollback()
            raise

        self.logger.debug(f"Query {number} returned {len(rows)} rows")
        return QueryResult(number, QUERIES[number].description, columns, rows)

    def run_all(self, numbers: Optional[Sequence[int]] = None, **params) -> List[QueryResult]:
        """Run several queries; ``params`` go to every query, each takes what it uses."""
        return [self.run(number, **params) for number in (numbers or sorted(QUERIES))]


def format_result(result: QueryResult) -> str:
    """Render a result the way the showcase prints it."""
    return f"Query {result.number}: \n{result.to_text()}\n\n"


def create_query_service(db: Session) -> PartyQueryService:
    """Factory function to create a query service."""
    return PartyQueryService(db)
