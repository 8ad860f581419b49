# fabricmarket/config.py
import os

from dotenv import load_dotenv

load_dotenv()

# Backend persistence
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./fabricmarket.db")

# Storefront -> Catalog Service
# The storefront always goes through HTTP, even when both halves run in one process.
CATALOG_API_URL = os.getenv("CATALOG_API_URL", "http://localhost:8000").rstrip("/")
CATALOG_REQUEST_TIMEOUT = float(os.getenv("CATALOG_REQUEST_TIMEOUT", "10.0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# MCP transport (mounted under /mcp by main.py)
MCP_SERVER_NAME = "fabricmarket-mcp"
MCP_SSE_PATH = os.getenv("MCP_SSE_PATH", "/sse")
MCP_MESSAGE_PATH = os.getenv("MCP_MESSAGE_PATH", "/messages/")

CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₹")

# Slider ceilings of the product list filters; also the default upper bounds
GSM_SLIDER_MAX = 400
PRICE_SLIDER_MAX = 1000
