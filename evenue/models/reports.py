from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from evenue.models.base import Base, EMAIL_LENGTH, REPORT_REASON_LENGTH, uuid_primary_key


class UserReport(Base):
    """Reports filed by one user against another."""

    __tablename__ = "user_reports"

    user_report_id = uuid_primary_key()
    user_reporter_email = Column(String(EMAIL_LENGTH), ForeignKey("user_info.email"), nullable=False)
    user_reported_email = Column(String(EMAIL_LENGTH), ForeignKey("user_info.email"), nullable=False)
    user_report_time = Column(DateTime(timezone=True), nullable=False)  # review queue is ordered by full timestamp
    user_report_reason = Column(String(REPORT_REASON_LENGTH), nullable=False)

    # Relationships
    reporter = relationship("UserInfo", foreign_keys=[user_reporter_email], backref="reports_filed")
    reported = relationship("UserInfo", foreign_keys=[user_reported_email], backref="reports_received")

    def __repr__(self):
        return f"<UserReport(reporter='{self.user_reporter_email}', reported='{self.user_reported_email}')>"


class PartyReport(Base):
    """Reports filed by users against a party."""

    __tablename__ = "party_reports"

    party_report_id = uuid_primary_key()
    party_id = Column(UUID(as_uuid=True), ForeignKey("party_info.party_id"), nullable=False)
    party_reporter_email = Column(String(EMAIL_LENGTH), ForeignKey("user_info.email"), nullable=False)
    party_report_time = Column(DateTime(timezone=True), nullable=False)
    party_report_reason = Column(String(REPORT_REASON_LENGTH), nullable=False)

    # Relationships
    party = relationship("PartyInfo", backref="reports")
    reporter = relationship("UserInfo", backref="party_reports_filed")

    def __repr__(self):
        return f"<PartyReport(party='{self.party_id}', reporter='{self.party_reporter_email}')>"
