# soilsense/app/config.py
import os
from dotenv import load_dotenv
from pathlib import Path

dotenv_path = Path(__file__).parents[2] / '.env'
load_dotenv(dotenv_path)


class Settings:
    # --- OpenWeatherMap (current weather) ---
    OPENWEATHER_API_KEY: str = os.getenv("OPENWEATHER_API_KEY", "")
    OPENWEATHER_URL: str     = os.getenv("OPENWEATHER_URL", "https://api.openweathermap.org/data/2.5/weather")
    WEATHER_UNITS: str       = os.getenv("WEATHER_UNITS", "metric")

    # --- Outbound HTTP ---
    HTTP_CONNECT_TIMEOUT: float = float(os.getenv("HTTP_CONNECT_TIMEOUT", "10"))
    HTTP_READ_TIMEOUT: float    = float(os.getenv("HTTP_READ_TIMEOUT", "25"))
    HTTP_MAX_CONNECTIONS: int   = int(os.getenv("HTTP_MAX_CONNECTIONS", "20"))
    HTTP_USER_AGENT: str        = os.getenv("HTTP_USER_AGENT", "soilsense/0.1")

    # Vite dev server by default; comma separated
    CORS_ORIGINS: list = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
