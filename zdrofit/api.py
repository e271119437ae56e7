from dataclasses import dataclass
from typing import Optional, Type, TypeVar, Union
from urllib.parse import urljoin, urlparse

import requests
from pydantic import ValidationError
from requests import Session

from zdrofit.consts import (
    AUTH_COOKIE_NAME,
    BOOK_CLASS_PATH,
    CANCEL_BOOKING_PATH,
    DAILY_CLASSES_PATH,
    LOGIN_PATH,
)
from zdrofit.errors import ApiError
from zdrofit.http_client import create_http_session
from zdrofit.schemas.auth import LoginRequest, LoginResponse
from zdrofit.schemas.booking import (
    BookClassRequest,
    BookClassResponse,
    CancelBookingRequest,
    CancelBookingResponse,
)
from zdrofit.schemas.pascal import PascalModel
from zdrofit.schemas.schedule import DailyClassesRequest, DailyClassesResponse
from zdrofit.sessions import InMemorySessionStore, SessionStore
from zdrofit.settings import Settings
from zdrofit.utils.logging_utils import log

ResponseModel = TypeVar("ResponseModel", bound=PascalModel)


@dataclass(frozen=True)
class ApiPaths:
    login: str = LOGIN_PATH
    daily_classes: str = DAILY_CLASSES_PATH
    book_class: str = BOOK_CLASS_PATH
    cancel_booking: str = CANCEL_BOOKING_PATH


class ZdrofitApi:
    """
    Client for the club portal's class booking endpoints.

    Every operation is a single JSON POST. Failures are logged and returned as
    an `ApiError` instead of being raised. The authentication cookie obtained by
    `authenticate` is kept in the session store and sent with every later call.

    The `http` session is shared by every call on a client and requests does not
    guarantee that a Session is thread-safe, so concurrent callers should each
    pass their own `http` session.
    """

    def __init__(
        self,
        base_url: str,
        http: Optional[Session] = None,
        strict: bool = True,
        session_store: Optional[SessionStore] = None,
        paths: Optional[ApiPaths] = None,
        auth_cookie_name: str = AUTH_COOKIE_NAME,
    ):
        self.base_url = base_url
        self.host = urlparse(base_url).netloc
        self.http = http if http is not None else create_http_session()
        self.strict = strict
        self.session_store = (
            session_store if session_store is not None else InMemorySessionStore()
        )
        self.paths = paths if paths is not None else ApiPaths()
        self.auth_cookie_name = auth_cookie_name

    @classmethod
    def from_settings(cls, settings: Settings) -> "ZdrofitApi":
        return cls(
            settings.ZDROFIT_BASE_URL,
            strict=settings.ZDROFIT_STRICT,
            paths=ApiPaths(
                login=settings.ZDROFIT_LOGIN_PATH,
                daily_classes=settings.ZDROFIT_DAILY_CLASSES_PATH,
                book_class=settings.ZDROFIT_BOOK_CLASS_PATH,
                cancel_booking=settings.ZDROFIT_CANCEL_BOOKING_PATH,
            ),
            auth_cookie_name=settings.ZDROFIT_AUTH_COOKIE_NAME,
        )

    def authenticate(
        self, request: LoginRequest
    ) -> Union[LoginResponse, ApiError]:
        res = self._post(self.paths.login, request)
        if isinstance(res, ApiError):
            return res
        # the cookie may be set on a redirect hop rather than the final response
        auth_cookie = None
        for hop in [*res.history, res]:
            for cookie in hop.cookies:
                if cookie.name == self.auth_cookie_name:
                    auth_cookie = cookie
        if auth_cookie is None or auth_cookie.value is None:
            log.error(
                f"Authentication response did not set the '{self.auth_cookie_name}' cookie"
            )
            return ApiError.MISSING_SESSION_COOKIE
        login_response = self._parse(res, LoginResponse)
        if isinstance(login_response, ApiError):
            return login_response
        self.session_store.set(
            self.host,
            auth_cookie.value,
            float(auth_cookie.expires) if auth_cookie.expires is not None else None,
        )
        log.debug(f"Authenticated as member {login_response.user.member.id}")
        return login_response

    def authenticated(self) -> bool:
        return self.session_store.get(self.host) is not None

    def daily_classes(
        self, request: DailyClassesRequest
    ) -> Union[DailyClassesResponse, ApiError]:
        res = self._authed_post(self.paths.daily_classes, request)
        if isinstance(res, ApiError):
            return res
        return self._parse(res, DailyClassesResponse)

    def book_class(self, request: BookClassRequest) -> Optional[ApiError]:
        log.debug(f"Booking class {request.class_id}")
        res = self._authed_post(self.paths.book_class, request)
        if isinstance(res, ApiError):
            return res
        booking = self._parse(res, BookClassResponse)
        if isinstance(booking, ApiError):
            return booking
        return None

    def cancel_class_booking(
        self, request: CancelBookingRequest
    ) -> Optional[ApiError]:
        log.debug(f"Cancelling booking of class {request.class_id}")
        res = self._authed_post(self.paths.cancel_booking, request)
        if isinstance(res, ApiError):
            return res
        cancellation = self._parse(res, CancelBookingResponse)
        if isinstance(cancellation, ApiError):
            return cancellation
        return None

    def _authed_post(
        self, path: str, payload: PascalModel
    ) -> Union[requests.Response, ApiError]:
        token = self.session_store.get(self.host)
        if token is None:
            log.error(f"Not authenticated, refusing to call {path}")
            return ApiError.NOT_AUTHENTICATED
        return self._post(path, payload, cookies={self.auth_cookie_name: token})

    def _post(
        self,
        path: str,
        payload: PascalModel,
        cookies: Optional[dict[str, str]] = None,
    ) -> Union[requests.Response, ApiError]:
        url = urljoin(self.base_url, path)
        log.debug(f"POST {url}")
        try:
            res = self.http.post(
                url,
                json=payload.model_dump(mode="json", by_alias=True),
                cookies=cookies,
            )
        except requests.exceptions.RequestException as e:
            log.error(f"Request to {url} failed: {e}")
            return ApiError.NETWORK
        if not 200 <= res.status_code < 300:
            log.error(f"Request to {url} failed with status {res.status_code}: {res.text}")
            return ApiError.HTTP_STATUS
        return res

    def _parse(
        self, res: requests.Response, model: Type[ResponseModel]
    ) -> Union[ResponseModel, ApiError]:
        try:
            data = res.json()
        except requests.exceptions.JSONDecodeError as e:
            log.error(f"Malformed {model.__name__} body: {e}")
            return ApiError.MALFORMED_RESPONSE
        try:
            return model.model_validate(data, context={"strict": self.strict})
        except ValidationError as e:
            log.error(f"Malformed {model.__name__}: {e}")
            return ApiError.MALFORMED_RESPONSE
