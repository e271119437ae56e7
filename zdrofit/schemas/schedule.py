from enum import Enum
from typing import Optional

from zdrofit.schemas.pascal import PascalModel
from zdrofit.utils.time_utils import Date, DateTime


class ClassStatus(str, Enum):
    BOOKABLE = "Bookable"
    AWAITABLE = "Awaitable"
    BOOKED = "Booked"
    UNAVAILABLE = "Unavailable"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value):
        # statuses added by the portal later on should not break decoding
        if isinstance(value, str):
            return cls.UNKNOWN
        return None


class BookingIndicator(PascalModel):
    limit: int
    available: int


class ClassUser(PascalModel):
    id: int
    is_current_user: bool


class Class(PascalModel):
    id: int
    status: ClassStatus
    status_reason: Optional[str] = None
    name: str
    start_time: DateTime
    booking_indicator: BookingIndicator
    users: list[ClassUser]

    @property
    def is_booked_by_current_user(self) -> bool:
        return any(u.is_current_user for u in self.users)


class CalendarData(PascalModel):
    classes: list[Class]


class DailyClassesRequest(PascalModel):
    club_id: int
    date: Date


class DailyClassesResponse(PascalModel):
    calendar_data: list[CalendarData]
