DEFAULT_BASE_URL = "https://zdrofit.perfectgym.pl"

LOGIN_PATH = "/ClientPortal2/Auth/Login"
DAILY_CLASSES_PATH = "/ClientPortal2/Classes/ClassCalendar/DailyClasses"
BOOK_CLASS_PATH = "/ClientPortal2/Classes/ClassCalendar/BookClass"
CANCEL_BOOKING_PATH = "/ClientPortal2/Classes/ClassCalendar/CancelBooking"

AUTH_COOKIE_NAME = "ClientPortal.Auth"

USER_AGENT = "Mozilla/5.0 (X11; Fedora; Linux x86_64; rv:100.0) Gecko/20100101 Firefox/100.0"

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
