from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv
import os

from routes.bible_api import bible_bp

load_dotenv()


def create_app(corpus_path=None) -> Flask:
    app = Flask(__name__)

    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "change-me")

    # Falls back to core.config settings when unset
    app.config["BIBLE_CORPUS_PATH"] = corpus_path or os.getenv("BIBLE_CORPUS_PATH")

    CORS(app)

    app.register_blueprint(bible_bp)

    return app


if __name__ == "__main__":
    create_app().run(host="127.0.0.1", port=int(os.getenv("PORT", "5055")))
