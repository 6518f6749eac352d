import sys

import requests

DEFAULT_TIMEOUT = 10


class FetchError(RuntimeError):
    """Raised when a remote document cannot be downloaded."""


def read_file(htmlfile):
    """Читает локальный HTML-файл целиком. Ошибки ввода-вывода не перехватываются."""
    print(f"Processing file: {htmlfile}", file=sys.stderr)
    with open(htmlfile, 'rb') as f:
        return f.read()


def fetch_url(url, timeout=DEFAULT_TIMEOUT):
    """Загружает документ по `url` и возвращает тело ответа в байтах."""
    print(f"Processing URL: {url}", file=sys.stderr)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except (requests.RequestException, ValueError) as exc:
        raise FetchError(str(exc)) from exc
    return resp.content
