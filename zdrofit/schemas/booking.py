from zdrofit.schemas.pascal import PascalModel
from zdrofit.utils.time_utils import DateTime


class BookClassRequest(PascalModel):
    class_id: int


class CancelBookingRequest(PascalModel):
    class_id: int


class Ticket(PascalModel):
    time_table_event_id: int
    name: str
    start_time: DateTime
    zone_name: str
    user_name: str
    user_number: str
    user_id: int
    trainer: str


class BookClassResponse(PascalModel):
    tickets: list[Ticket]
    class_id: int
    user_id: int


class CancelBookingResponse(PascalModel):
    class_id: int
    user_id: int
