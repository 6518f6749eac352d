import json
import os
import sys
from typing import List

HTMLFILE_DEFAULT = 'index.html'
CHECKSFILE_DEFAULT = 'checks.json'


class ChecksFormatError(ValueError):
    """Raised when the checks file is valid JSON but not a list of selectors."""


def assert_file_exists(infile: str) -> str:
    instr = str(infile)
    if not os.path.exists(instr):
        print(f"{instr} does not exist. Exiting.")
        sys.exit(1)
    return instr


def load_checks(checks_path: str = CHECKSFILE_DEFAULT) -> List[str]:
    # Malformed JSON is not caught: json.JSONDecodeError reaches the caller.
    with open(checks_path, 'r', encoding='utf-8') as f:
        checks = json.load(f)
    if not isinstance(checks, list) or not all(isinstance(c, str) for c in checks):
        raise ChecksFormatError(f"'{checks_path}' must contain a JSON array of selector strings")
    return checks
