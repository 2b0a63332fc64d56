from sqlalchemy import CHAR, CheckConstraint, Column, ForeignKey, SmallInteger, String, Text
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import relationship
from evenue.models.base import Base, EMAIL_LENGTH


class UserInfo(Base):
    """Registered app users, identified by their unique email address."""

    __tablename__ = "user_info"

    email = Column(String(EMAIL_LENGTH), primary_key=True)
    first_name = Column(String(30), nullable=False)  # registration form limit
    last_name = Column(String(30), nullable=False)
    age = Column(SmallInteger, nullable=False)
    country = Column(CHAR(2), nullable=False)  # ISO 3166-1 alpha-2

    __table_args__ = (
        CheckConstraint("age >= 18", name="ck_user_info_adult"),
    )

    def __repr__(self):
        return f"<UserInfo(email='{self.email}', name='{self.first_name} {self.last_name}')>"


class UserLogin(Base):
    """Password hashes, salted with blowfish by pgcrypto's gen_salt('bf')."""

    __tablename__ = "user_login"

    email = Column(String(EMAIL_LENGTH), ForeignKey("user_info.email"), nullable=False)
    password = Column(Text, nullable=False)

    user = relationship("UserInfo", backref="logins")

    __table_args__ = (
        CheckConstraint("LENGTH(password) >= 8", name="ck_user_login_password_length"),
    )
    __mapper_args__ = {"primary_key": [email]}

    def __repr__(self):
        return f"<UserLogin(email='{self.email}')>"


class UserActivity(Base):
    """Parties a user has hosted and attended."""

    __tablename__ = "user_activity"

    email = Column(String(EMAIL_LENGTH), ForeignKey("user_info.email"), nullable=False)
    parties_hosted = Column(ARRAY(UUID(as_uuid=True)))
    parties_attended = Column(ARRAY(UUID(as_uuid=True)))

    user = relationship("UserInfo", backref="activity")

    __mapper_args__ = {"primary_key": [email]}

    def __repr__(self):
        return f"<UserActivity(email='{self.email}')>"
