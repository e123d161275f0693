"""Development server entrypoint: ``python main.py``."""
from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()

from api_template import create_app  # noqa: E402
from api_template.config import BaseConfig  # noqa: E402

config = BaseConfig()
app = create_app(config)


if __name__ == "__main__":
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
