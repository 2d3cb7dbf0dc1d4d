import logging
import time

logger = logging.getLogger("core.requests")

MAX_BODY_LOG = 200


class RequestLogMiddleware:
    """Log one line per /api request: method, path, status, duration and a body preview."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        t0 = time.perf_counter()
        response = self.get_response(request)
        if request.path.startswith("/api"):
            elapsed_ms = (time.perf_counter() - t0) * 1000
            line = f"{request.method} {request.path} {response.status_code} in {elapsed_ms:.0f}ms"
            body = self._json_body(response)
            if body:
                line += f" :: {body}"
            logger.info(line)
        return response

    @staticmethod
    def _json_body(response):
        if response.streaming or "json" not in response.get("Content-Type", ""):
            return ""
        text = response.content.decode("utf-8", errors="replace")
        if len(text) > MAX_BODY_LOG:
            text = text[: MAX_BODY_LOG - 1] + "…"
        return text
