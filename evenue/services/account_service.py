"""
Account checks against the pgcrypto password hashes in ``user_login``.
"""
import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from evenue.models import UserLogin


class AccountService:
    """Verifies login credentials inside the database."""

    def __init__(self, db: Session):
        self.db = db
        self.logger = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def login_statement(email: str, password: str):
        # crypt() reuses the salt embedded in the stored hash
        return (
            select(func.count())
            .select_from(UserLogin)
            .where(UserLogin.email == email)
            .where(UserLogin.password == func.crypt(password, UserLogin.password))
        )

    def verify_login(self, email: str, password: str) -> bool:
        matches = self.db.execute(self.login_statement(email, password)).scalar_one()
        if matches:
            self.logger.info(f"Login verified for {email}")
        else:
            self.logger.warning(f"Login rejected for {email}")
        return matches > 0
