import sys
import time
import logging
from contextlib import asynccontextmanager
from pathlib import Path

# Add the server directory to Python path
server_dir = str(Path(__file__).parent)
if server_dir not in sys.path:
    sys.path.append(server_dir)

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from config import app_config
from controllers import (
    blog_controller,
    comment_controller,
    enrollment_controller,
    product_controller,
    training_controller,
    training_page_controller,
)
from middleware.error_handlers import register_error_handlers
from seed.seed_database import initialize_database

# Configure logging
logging.basicConfig(
    level=app_config.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app_config.auto_init_db():
        initialize_database()
    yield


# Initialize FastAPI app
app = FastAPI(title="Saffron Academy API", version="1.0.0", lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=app_config.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Log every request with its outcome
@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response


register_error_handlers(app)


@app.get("/")
def read_root():
    return {"success": True, "message": "API running"}


# Public site
app.include_router(blog_controller.router, prefix="/api/blogs", tags=["Blogs"])
app.include_router(product_controller.router, prefix="/api/products", tags=["Products"])
app.include_router(comment_controller.router, prefix="/api/comments", tags=["Comments"])
app.include_router(training_controller.router, prefix="/api/trainings", tags=["Trainings"])
app.include_router(enrollment_controller.router, prefix="/api/enrollments", tags=["Enrollments"])
app.include_router(training_page_controller.router, prefix="/api/training-page", tags=["Training Page"])

# Admin dashboard
app.include_router(blog_controller.admin_router, prefix="/api/admin/blogs", tags=["Admin Blogs"])
app.include_router(product_controller.admin_router, prefix="/api/admin/products", tags=["Admin Products"])
app.include_router(comment_controller.admin_router, prefix="/api/admin/comments", tags=["Admin Comments"])
app.include_router(training_controller.admin_router, prefix="/api/admin/trainings", tags=["Admin Trainings"])
app.include_router(enrollment_controller.admin_router, prefix="/api/admin/enrollments", tags=["Admin Enrollments"])
app.include_router(training_page_controller.admin_router, prefix="/api/admin/training-page",
                   tags=["Admin Training Page"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=app_config.get_port())
