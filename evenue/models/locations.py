from sqlalchemy import CHAR, Column, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import backref, relationship
from evenue.models.base import Base, Point, ZIP_CODE_LENGTH


class PartyLocation(Base):
    """Map marker of a party.

    Kept apart from the address since spatial lookups on the coordinates are
    far more frequent than address lookups.
    """

    __tablename__ = "party_location"

    party_id = Column(
        UUID(as_uuid=True),
        ForeignKey("party_info.party_id", ondelete="CASCADE"),
        primary_key=True,
    )
    coordinates = Column(Point(), nullable=False)  # (x, y)

    party = relationship("PartyInfo", backref=backref("location", uselist=False))

    def __repr__(self):
        return f"<PartyLocation(party='{self.party_id}', coordinates={self.coordinates})>"


class PartyAddress(Base):
    """Street address of a party location."""

    __tablename__ = "party_address"

    party_id = Column(
        UUID(as_uuid=True),
        ForeignKey("party_location.party_id", ondelete="CASCADE"),
        primary_key=True,
    )
    street_name = Column(Text, nullable=False)
    street_number = Column(Text, nullable=False)
    zip_code = Column(String(ZIP_CODE_LENGTH), unique=True, nullable=False)  # text keeps leading zeros

    location = relationship("PartyLocation", backref=backref("address", uselist=False))

    def __repr__(self):
        return f"<PartyAddress(street='{self.street_name} {self.street_number}', zip_code='{self.zip_code}')>"


class ZipCode(Base):
    """City, state and country implied by a zip code."""

    __tablename__ = "zip_code"

    zip_code = Column(
        String(ZIP_CODE_LENGTH),
        ForeignKey("party_address.zip_code", ondelete="CASCADE"),
        nullable=False,
    )
    city = Column(Text, nullable=False)
    state = Column(Text, nullable=False)
    # The party's country, which need not match the host's
    country = Column(CHAR(2), nullable=False)

    address = relationship("PartyAddress", backref="zip_code_info")

    __mapper_args__ = {"primary_key": [zip_code]}

    def __repr__(self):
        return f"<ZipCode(zip_code='{self.zip_code}', city='{self.city}', country='{self.country}')>"
