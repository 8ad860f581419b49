from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fabricmarket.config import CORS_ORIGINS
from fabricmarket.database import init_db
from fabricmarket.logger import get_logger
from fabricmarket.mcp_handlers import create_mcp
from fabricmarket.routes import register_api_routes
from fabricmarket.storefront import create_storefront

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


# =====================================================
# 1) FastAPI app (Catalog Service)
# =====================================================
app = FastAPI(title="Fabric Marketplace", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

register_api_routes(app)

# =====================================================
# 2) Storefront session + MCP server
# =====================================================
storefront = create_storefront()
mcp = create_mcp(storefront)

app.mount("/mcp", mcp.sse_app())

# =====================================================
# 3) Health
# =====================================================
@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn, os
    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
