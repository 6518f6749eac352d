"""Core helpers for html_grader: config, checks, runner."""
from .config import (
    CHECKSFILE_DEFAULT,
    HTMLFILE_DEFAULT,
    ChecksFormatError,
    assert_file_exists,
    load_checks,
)
from .checks import evaluate_checks, format_checks, print_checks, process_checks
from .runner import app, check_html_file, main as run_main

__all__ = [
    "CHECKSFILE_DEFAULT",
    "HTMLFILE_DEFAULT",
    "ChecksFormatError",
    "assert_file_exists",
    "load_checks",
    "evaluate_checks",
    "format_checks",
    "print_checks",
    "process_checks",
    "app",
    "check_html_file",
    "run_main",
]
