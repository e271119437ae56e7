from http.cookiejar import DefaultCookiePolicy

import certifi
from requests import Session

from zdrofit.consts import USER_AGENT


def create_http_session() -> Session:
    session = Session()
    session.verify = certifi.where()
    session.headers.update(
        {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
    )
    # ignore collected cookies, the auth cookie lives in the session store
    session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
    return session
