from html_grader.core.checks import evaluate_checks, format_checks, print_checks, process_checks
from html_grader.core.config import CHECKSFILE_DEFAULT, HTMLFILE_DEFAULT, assert_file_exists, load_checks
from html_grader.core.runner import app, check_html_file


def main() -> None:
    # Delegate to the typer app defined in runner.
    app()


if __name__ == "__main__":
    main()
