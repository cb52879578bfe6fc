"""Identity middleware - reads the already-authenticated user id set by the gateway."""

from dataclasses import dataclass

import falcon.asgi

USER_ID_HEADER = "X-User-Id"


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str


class IdentityMiddleware:
    """Sets req.context.user from the trusted identity header, or None when absent.

    Authentication happens upstream; this service only needs to know who the
    caller is to look up their role and placement.
    """

    def __init__(self, header: str = USER_ID_HEADER) -> None:
        self._header = header

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        user_id = (req.get_header(self._header) or "").strip()
        req.context.user = RequestUser(user_id=user_id) if user_id else None
