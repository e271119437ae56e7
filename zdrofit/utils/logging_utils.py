import logging

from rich.logging import RichHandler

from zdrofit.settings import get_settings


def _log_level() -> int:
    settings = get_settings()
    if settings.LOG_LEVEL is not None:
        return logging.getLevelName(settings.LOG_LEVEL.upper())
    return logging.DEBUG if settings.IS_DEVELOPMENT else logging.INFO


logging.basicConfig(
    level=_log_level(),
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(markup=False, rich_tracebacks=True)],
)
# connection pool chatter drowns out the request log in development
logging.getLogger("urllib3").setLevel(logging.WARNING)

log = logging.getLogger("zdrofit")
