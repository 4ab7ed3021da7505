import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from .api.images import router as images_router
from .api.items import router as items_router
from .api.orders import router as orders_router
from .config import CORS_ORIGINS
from .database import Base, engine
from .errors import ErrorKind, OrderItError

logger = logging.getLogger("uvicorn.error")  # shows up in the uvicorn console

STATUS_BY_KIND = {
    ErrorKind.MISSING_FIELD: 400,
    ErrorKind.INVALID_PRICE: 400,
    ErrorKind.PRICE_TOO_HIGH: 400,
    ErrorKind.INVALID_QUANTITY: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DANGLING_ITEM_REFERENCE: 409,
    ErrorKind.PRINT_FAILED: 502,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        with engine.connect() as con:
            con.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=engine)
        logger.info("DB connectivity OK (startup)")
    except Exception as e:
        logger.error("DB connectivity FAILED (startup): %s", e, exc_info=True)
    yield


app = FastAPI(
    title="order-it POS API",
    version="0.1.0",
    lifespan=lifespan,
)
app.include_router(items_router)
app.include_router(orders_router)
app.include_router(images_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(OrderItError)
async def order_it_error_handler(request: Request, exc: OrderItError):
    status_code = STATUS_BY_KIND.get(exc.kind, 500)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.get("/health/db")
def health_db():
    """Health check: SELECT 1 against the DB."""
    try:
        with engine.connect() as con:
            con.execute(text("SELECT 1"))
        return {"db": "ok"}
    except Exception as e:
        raise HTTPException(status_code=503, detail=f"db not ok: {e}")


@app.get("/")
def root():
    return {"status": "ok"}
