import httpx

from .. import constants as cs


def upstream_error_message(response: httpx.Response, key: str) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return cs.HTTP_STATUS_FALLBACK.format(status=response.status_code)


def transport_error_message(error: httpx.HTTPError) -> str:
    return str(error) or type(error).__name__
