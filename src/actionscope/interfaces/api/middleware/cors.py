"""Cross-origin access for the front end."""

import falcon
import falcon.asgi

from actionscope.interfaces.api.middleware.auth import USER_ID_HEADER

ALLOWED_METHODS = ("GET", "POST", "PATCH", "DELETE", "OPTIONS")
ALLOWED_HEADERS = ("Content-Type", USER_ID_HEADER)
PREFLIGHT_MAX_AGE = 86400


class CORSMiddleware:
    """Echo allowed origins and short-circuit preflight requests.

    ``"*"`` in ``origins`` allows any origin. Requests from other origins get
    no ``Access-Control-Allow-Origin`` header, so browsers block the response.
    """

    def __init__(self, origins: list[str]) -> None:
        self._any_origin = "*" in origins
        self._origins = frozenset(o for o in origins if o != "*")

    def allows(self, origin: str | None) -> bool:
        return bool(origin) and (self._any_origin or origin in self._origins)

    def _apply(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.append_header("Vary", "Origin")
        origin = req.get_header("Origin")
        if not self.allows(origin):
            return
        resp.set_header("Access-Control-Allow-Origin", origin)
        if req.method == "OPTIONS":
            resp.set_header("Access-Control-Allow-Methods", ", ".join(ALLOWED_METHODS))
            resp.set_header("Access-Control-Allow-Headers", ", ".join(ALLOWED_HEADERS))
            resp.set_header("Access-Control-Max-Age", str(PREFLIGHT_MAX_AGE))

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if req.method == "OPTIONS":
            self._apply(req, resp)
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        if req.method != "OPTIONS":
            self._apply(req, resp)
