import json
import sys
from typing import Any, Dict, Iterable

from html_grader.core.config import load_checks
from html_grader.parser.document import HtmlDocument


def evaluate_checks(document: Any, checks: Iterable[str]) -> Dict[str, bool]:
    """Применяет каждый селектор к `document` (любой объект с методом `query`).

    Порядок ключей результата совпадает с порядком `checks`.
    """

    out: Dict[str, bool] = {}
    for check in checks:
        out[check] = document.query(check) > 0
    return out


def format_checks(results: Dict[str, bool]) -> str:
    return json.dumps(results, indent=4, ensure_ascii=False)


def print_checks(results: Dict[str, bool]) -> None:
    print("Printing results", file=sys.stderr)
    print(format_checks(results))


def process_checks(html: bytes, checks_file: str) -> Dict[str, bool]:
    """Загружает селекторы, проверяет их на документе и печатает отчёт."""

    print(
        f"Processing checks from {checks_file} (html length = {len(html)})",
        file=sys.stderr,
    )
    document = HtmlDocument(html)
    checks = sorted(load_checks(checks_file))
    results = evaluate_checks(document, checks)
    print_checks(results)
    return results
