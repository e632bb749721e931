from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import db, settings
from core.errors import NotFoundError, ReferentialFailure, StorageError, ValidationFailure
from core.logging_config import configure_logging
from pets import router as pets_router
from vets import router as vets_router
from visits import router as visits_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        if settings.db_auto_migrate():
            await db.apply_schema()
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Pet Clinic", lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pets_router.router, tags=["pets"])
app.include_router(vets_router.router, tags=["vets"])
app.include_router(visits_router.router, tags=["visits"])


@app.exception_handler(ValidationFailure)
async def validation_failure_handler(_: Request, exc: ValidationFailure) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(_: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(ReferentialFailure)
async def referential_failure_handler(_: Request, exc: ReferentialFailure) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(StorageError)
async def storage_error_handler(_: Request, exc: StorageError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage failure."},
    )


@app.get("/health")
async def health() -> JSONResponse:
    if not db.is_initialized():
        return JSONResponse(content={"status": "ok", "database": "not_initialized"})
    try:
        await db.ping()
    except StorageError:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "database": "error"},
        )
    return JSONResponse(content={"status": "ok", "database": "ok"})


@app.get("/")
def root() -> dict:
    return {"message": "pet clinic api"}
