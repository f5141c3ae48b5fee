## Main application entry point

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from career_projects.generation.errors import ProjectRequestError
from career_projects.generation.routes import error_payload, router as generation_router
from career_projects.settings import settings
from career_projects.utils.logger import setup_logger

logger = setup_logger(level=settings.log_level)

app = FastAPI(title="Career Project Generator")

@app.get("/health")
async def health_check():
    return {"status": "ok"}

@app.exception_handler(ProjectRequestError)
async def project_request_error_handler(request: Request, exc: ProjectRequestError):
    return JSONResponse(error_payload(exc.status_code, exc.message), status_code=exc.status_code)

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected Error: {exc}", exc_info=exc,
    extra={"method": request.method, "path": request.url.path, "error_type": type(exc).__name__})
    return JSONResponse(error_payload(500, "Internal server error"), status_code=500)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"Response: {response.status_code}",
    extra={"method": request.method, "path": request.url.path, "status": response.status_code})
    return response

app.include_router(generation_router)
