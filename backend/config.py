"""Application configuration via environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

# Canvas (points)
CANVAS_CONTAINER_WIDTH = float(os.getenv("CANVAS_CONTAINER_WIDTH", "390"))
CANVAS_MARGIN = float(os.getenv("CANVAS_MARGIN", "16"))
CANVAS_ORIGIN_Y = float(os.getenv("CANVAS_ORIGIN_Y", "0"))
