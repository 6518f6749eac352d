import sys
from typing import Dict, Optional

import typer

from html_grader.core.checks import process_checks
from html_grader.core.config import CHECKSFILE_DEFAULT, assert_file_exists
from html_grader.parser.acquisition import DEFAULT_TIMEOUT, FetchError, fetch_url, read_file

app = typer.Typer(add_completion=False)


def check_html_file(
    path: str,
    checks_file: str,
    mode: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> Dict[str, bool]:
    """Проверяет HTML из файла (`mode='file'`) или по URL (`mode='url'`)."""

    print(f"Checking {mode}: {path} against {checks_file}", file=sys.stderr)
    if mode == 'file':
        html = read_file(path)
    elif mode == 'url':
        try:
            html = fetch_url(path, timeout=timeout)
        except FetchError as err:
            print(f"Error: {err}", file=sys.stderr)
            sys.exit(1)
    else:
        print(f"Unknown mode: {mode}. Exiting.")
        sys.exit(1)

    return process_checks(html, checks_file)


def _existing_path(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return assert_file_exists(value)


def _positive_timeout(value: float) -> float:
    if value <= 0:
        print(f"Timeout must be greater than 0, got {value}. Exiting.")
        sys.exit(1)
    return value


@app.command()
def main(
    checks: str = typer.Option(
        CHECKSFILE_DEFAULT, "--checks", "-c", help="Path to checks.json", callback=_existing_path
    ),
    file: Optional[str] = typer.Option(
        None, "--file", "-f", help="Path to index.html", callback=_existing_path
    ),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="URL of index.html"),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT, "--timeout", help="HTTP timeout in seconds", callback=_positive_timeout
    ),
) -> None:
    """Grade an HTML document for the presence of the selectors in the checks file."""

    if file and url:
        print("Both file and URL are set. Exiting.")
        sys.exit(1)
    if file:
        path, mode = file, 'file'
    elif url:
        path, mode = url, 'url'
    else:
        print("Neither file nor URL is set. Exiting.")
        sys.exit(1)

    check_html_file(path, checks, mode, timeout=timeout)
