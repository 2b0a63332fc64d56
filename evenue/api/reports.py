"""
Report API Endpoints

Read-only REST endpoints for the party queries and login verification.
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List

from evenue.config import settings
from evenue.database import get_db
from evenue.services.account_service import AccountService
from evenue.services.party_queries import PartyQueryService, UnknownQueryError


router = APIRouter(prefix=settings.api_v1_prefix, tags=["reports"])


class LoginRequest(BaseModel):
    email: str
    password: str


def get_query_service(db: Session = Depends(get_db)) -> PartyQueryService:
    return PartyQueryService(db)


def get_account_service(db: Session = Depends(get_db)) -> AccountService:
    return AccountService(db)


@router.get("/reports", response_model=List[dict])
async def list_reports():
    """List the numbered party queries."""
    return PartyQueryService.catalog()


@router.get("/reports/{number}")
def run_report(number: int, service: PartyQueryService = Depends(get_query_service)):
    """
    Run one party query.

    Returns the query's description, column names and rows.
    """
    try:
        return service.run(number).to_dict()
    except UnknownQueryError:
        raise HTTPException(status_code=404, detail=f"Unknown query: {number}")
    except SQLAlchemyError as e:
        raise HTTPException(status_code=500, detail=f"Failed to run query {number}: {str(e)}")


@router.post("/accounts/verify")
def verify_account(request: LoginRequest, service: AccountService = Depends(get_account_service)):
    """Check an email and password against the stored hash."""
    try:
        valid = service.verify_login(request.email, request.password)
    except SQLAlchemyError as e:
        raise HTTPException(status_code=500, detail=f"Failed to verify login: {str(e)}")
    return {"email": request.email, "valid": valid}
