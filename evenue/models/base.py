import enum
import re

from sqlalchemy import Column, Enum, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import UserDefinedType

Base = declarative_base()


class PartyType(str, enum.Enum):
    """Types of parties offered in the app."""

    HAUSPARTY = "HAUSPARTY"
    GARTENPARTY = "GARTENPARTY"
    MOTTOPARTY = "MOTTOPARTY"
    GRILLPARTY = "GRILLPARTY"
    RAVE = "RAVE"
    CLUB = "CLUB"
    ROOFTOPPARTY = "ROOFTOPPARTY"


class AttendeeStatus(str, enum.Enum):
    """States a user can be in with respect to attending a party."""

    ATTENDING = "attending"
    DECLINED = "declined"
    ACCEPTED = "accepted"


def _enum_values(enum_class):
    return [member.value for member in enum_class]


party_type_enum = Enum(PartyType, name="party_type", values_callable=_enum_values)
attendee_status_enum = Enum(AttendeeStatus, name="attendee_status", values_callable=_enum_values)


class Point(UserDefinedType):
    """PostgreSQL geometric POINT, exchanged as an ``(x, y)`` tuple of floats."""

    cache_ok = True

    _POINT_RE = re.compile(r"^\(\s*([^,\s]+)\s*,\s*([^)\s]+)\s*\)$")

    def get_col_spec(self, **kw):
        return "POINT"

    def bind_processor(self, dialect):
        def process(value):
            if value is None:
                return None
            x, y = value
            return f"({x}, {y})"
        return process

    def result_processor(self, dialect, coltype):
        def process(value):
            if value is None:
                return None
            match = self._POINT_RE.match(value)
            if not match:
                raise ValueError(f"Invalid point literal: {value!r}")
            return float(match.group(1)), float(match.group(2))
        return process


def uuid_primary_key() -> Column:
    """UUID primary key generated by uuid-ossp on the server."""
    return Column(UUID(as_uuid=True), primary_key=True, server_default=text("uuid_generate_v4()"))


# Shared column lengths
EMAIL_LENGTH = 255
ZIP_CODE_LENGTH = 12
REPORT_REASON_LENGTH = 500
