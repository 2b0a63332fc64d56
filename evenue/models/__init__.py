from .base import Base, PartyType, AttendeeStatus, Point
from .users import UserInfo, UserLogin, UserActivity
from .reports import UserReport, PartyReport
from .parties import PartyInfo, Favourite, PartyDatetime, PartyAttendee
from .locations import PartyLocation, PartyAddress, ZipCode

__all__ = [
    "Base",
    "PartyType",
    "AttendeeStatus",
    "Point",
    "UserInfo",
    "UserLogin",
    "UserActivity",
    "UserReport",
    "PartyInfo",
    "Favourite",
    "PartyDatetime",
    "PartyLocation",
    "PartyAddress",
    "ZipCode",
    "PartyAttendee",
    "PartyReport",
]
