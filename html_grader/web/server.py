import os

from flask import Flask, Response

from html_grader.core.config import HTMLFILE_DEFAULT

PREVIEW_BYTES = 100
DEFAULT_PORT = 5000


def create_app(html_file: str = HTMLFILE_DEFAULT) -> Flask:
    """Flask-приложение с одним эндпоинтом: первые 100 байт `html_file`."""
    app = Flask(__name__)

    @app.route('/')
    def index() -> Response:
        with open(html_file, 'rb') as f:
            head = f.read(PREVIEW_BYTES)
        return Response(head, mimetype='text/plain')

    return app


def main() -> None:
    app = create_app()
    port = int(os.environ.get("PORT", DEFAULT_PORT))
    print(f"Listening on {port}")
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
