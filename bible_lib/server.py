# bible_lib/server.py
from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv

from bible_lib.core.config import configure_logging, load_settings
from bible_lib.routes.bible_api import bible_bp

load_dotenv()
configure_logging()

app = Flask(__name__)
app.json.sort_keys = False

CORS(app)

# Register blueprints
app.register_blueprint(bible_bp)


def main():
    settings = load_settings()
    app.run(host=settings["host"], port=int(settings["port"]))


if __name__ == "__main__":
    main()
