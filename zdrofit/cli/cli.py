import datetime
from typing import Optional

import typer
from rich import print as rprint
from rich.table import Table

from zdrofit.api import ZdrofitApi
from zdrofit.errors import ApiError
from zdrofit.schemas.auth import LoginRequest
from zdrofit.schemas.booking import BookClassRequest, CancelBookingRequest
from zdrofit.schemas.schedule import DailyClassesRequest
from zdrofit.settings import get_settings
from zdrofit.utils.logging_utils import log

cli = typer.Typer()


def authenticated_api() -> ZdrofitApi:
    settings = get_settings()
    if settings.ZDROFIT_LOGIN is None or settings.ZDROFIT_PASSWORD is None:
        log.error("ZDROFIT_LOGIN and ZDROFIT_PASSWORD must be set, abort!")
        raise typer.Exit(1)
    api = ZdrofitApi.from_settings(settings)
    log.debug("Authenticating...")
    auth_result = api.authenticate(
        LoginRequest(
            remember_me=True,
            login=settings.ZDROFIT_LOGIN,
            password=settings.ZDROFIT_PASSWORD,
        )
    )
    if isinstance(auth_result, ApiError):
        log.error(f"Authentication failed ({auth_result.name}), abort!")
        raise typer.Exit(1)
    return api


@cli.command()
def classes(
    club_id: Optional[int] = typer.Option(
        None, help="Club to list classes for, defaults to ZDROFIT_CLUB_ID"
    ),
    date: Optional[datetime.datetime] = typer.Option(
        None, formats=["%Y-%m-%d"], help="Day to list classes for, defaults to today"
    ),
) -> None:
    """
    List the classes scheduled at a club on a given day
    """
    club_id = club_id if club_id is not None else get_settings().ZDROFIT_CLUB_ID
    if club_id is None:
        log.error("No club id given and ZDROFIT_CLUB_ID is not set, abort!")
        raise typer.Exit(1)
    api = authenticated_api()
    schedule = api.daily_classes(
        DailyClassesRequest(
            club_id=club_id,
            date=(date if date is not None else datetime.datetime.now()).date(),
        )
    )
    if isinstance(schedule, ApiError):
        log.error(f"Failed to fetch classes ({schedule.name})")
        raise typer.Exit(1)
    table = Table("Id", "Start", "Name", "Status", "Available", "Booked")
    for slot in schedule.calendar_data:
        for _class in slot.classes:
            table.add_row(
                str(_class.id),
                _class.start_time.strftime("%H:%M"),
                _class.name,
                _class.status.value,
                f"{_class.booking_indicator.available}/{_class.booking_indicator.limit}",
                "yes" if _class.is_booked_by_current_user else "",
            )
    rprint(table)


@cli.command()
def book(class_id: int) -> None:
    """
    Book the class with the given id
    """
    api = authenticated_api()
    booking_error = api.book_class(BookClassRequest(class_id=class_id))
    if booking_error is not None:
        log.error(f"Booking of class {class_id} failed ({booking_error.name})")
        raise typer.Exit(1)
    log.info(f"Booked class {class_id}")


@cli.command()
def cancel(class_id: int) -> None:
    """
    Cancel the booking of the class with the given id
    """
    api = authenticated_api()
    cancellation_error = api.cancel_class_booking(
        CancelBookingRequest(class_id=class_id)
    )
    if cancellation_error is not None:
        log.error(
            f"Cancellation of class {class_id} failed ({cancellation_error.name})"
        )
        raise typer.Exit(1)
    log.info(f"Cancelled booking of class {class_id}")
