from sqlalchemy import (
    CheckConstraint, Column, Date, ForeignKey, Numeric, SmallInteger, String, Time, text,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from evenue.models.base import (
    Base, EMAIL_LENGTH, attendee_status_enum, party_type_enum, uuid_primary_key,
)


class PartyInfo(Base):
    """Core details of a party as entered in the party creation prompt."""

    __tablename__ = "party_info"

    party_id = uuid_primary_key()
    title = Column(String(80), nullable=False)
    type = Column(party_type_enum, nullable=False)
    party_description = Column(String(300), nullable=False)
    guest_description = Column(String(100), nullable=False)  # who the party caters to
    max_guests = Column(SmallInteger, nullable=False)
    host = Column(String(EMAIL_LENGTH), ForeignKey("user_info.email", ondelete="CASCADE"), nullable=False)
    attendance_fee = Column(Numeric(7, 2), server_default=text("0"))  # drinks, food

    # Relationships
    host_user = relationship("UserInfo", backref="hosted_parties")

    __table_args__ = (
        CheckConstraint("LENGTH(party_description) >= 50", name="ck_party_info_description_length"),
        CheckConstraint("LENGTH(guest_description) >= 20", name="ck_party_info_guest_description_length"),
        CheckConstraint("max_guests >= 1 AND max_guests <= 1000", name="ck_party_info_max_guests"),
    )

    def __repr__(self):
        return f"<PartyInfo(title='{self.title}', type='{self.type}', host='{self.host}')>"


class Favourite(Base):
    """Parties a user has marked as favourite."""

    __tablename__ = "favourites"

    email = Column(String(EMAIL_LENGTH), ForeignKey("user_info.email"), nullable=False)
    party_id = Column(UUID(as_uuid=True), ForeignKey("party_info.party_id", ondelete="CASCADE"), nullable=False)

    user = relationship("UserInfo", backref="favourites")
    party = relationship("PartyInfo", backref="favourited_by")

    __mapper_args__ = {"primary_key": [email, party_id]}

    def __repr__(self):
        return f"<Favourite(email='{self.email}', party='{self.party_id}')>"


class PartyDatetime(Base):
    """Start and end of a party.

    Date and time-with-timezone are kept in separate columns so that parties
    can be looked up by day alone.
    """

    __tablename__ = "party_datetime"

    party_id = Column(UUID(as_uuid=True), ForeignKey("party_info.party_id", ondelete="CASCADE"), nullable=False)
    start_date = Column(Date, nullable=False)
    start_time_tz = Column(Time(timezone=True), nullable=False)
    end_date = Column(Date, nullable=False)
    end_time_tz = Column(Time(timezone=True), nullable=False)

    party = relationship("PartyInfo", backref="datetimes")

    __table_args__ = (
        CheckConstraint("start_date >= CURRENT_DATE", name="ck_party_datetime_start_date"),
        CheckConstraint(
            "(start_date = CURRENT_DATE AND start_time_tz >= CURRENT_TIME) OR (start_date > CURRENT_DATE)",
            name="ck_party_datetime_start_time",
        ),
        CheckConstraint("end_date >= start_date", name="ck_party_datetime_end_date"),
        CheckConstraint(
            "(end_date = CURRENT_DATE AND end_time_tz >= start_time_tz) OR (end_date > start_date)",
            name="ck_party_datetime_end_time",
        ),
    )
    __mapper_args__ = {"primary_key": [party_id]}

    def __repr__(self):
        return f"<PartyDatetime(party='{self.party_id}', start='{self.start_date} {self.start_time_tz}')>"


class PartyAttendee(Base):
    """Users and their attendance status for a party."""

    __tablename__ = "party_attendees"

    party_id = Column(UUID(as_uuid=True), ForeignKey("party_info.party_id"), nullable=False)
    attendee_email = Column(String(EMAIL_LENGTH), ForeignKey("user_info.email"), nullable=False)
    attendee_status = Column(attendee_status_enum, nullable=False)

    # Relationships
    party = relationship("PartyInfo", backref="attendees")
    attendee = relationship("UserInfo", backref="attendances")

    __mapper_args__ = {"primary_key": [party_id, attendee_email]}

    def __repr__(self):
        return f"<PartyAttendee(party='{self.party_id}', email='{self.attendee_email}', status='{self.attendee_status}')>"
