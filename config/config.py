# config/config.py
import os
from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class Config:
    # --- App settings ---
    FLASK_ENV = os.getenv("FLASK_ENV", "production")
    DEBUG = os.getenv("FLASK_DEBUG", "false").lower() in ("1", "true", "yes")
    TESTING = False
    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    # PORT wins over APP_PORT (hosting platforms inject PORT)
    APP_PORT = int(os.getenv("PORT") or os.getenv("APP_PORT", 5000))

    # --- CORS Settings ---
    # Accept comma-separated values: e.g., "http://localhost:3000,http://127.0.0.1:3000"
    ALLOWED_ORIGINS = [
        o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",")
    ]

    # --- Uploads ---
    # Ad images live here and are served via /uploads/<filename>
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(BASE_DIR, "uploads"))
    ALLOWED_IMAGE_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp"}
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10 MB

    # --- Database ---
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./pets.db")
    AUTO_MIGRATE = os.getenv("AUTO_MIGRATE", "true").lower() in ("1", "true", "yes")
