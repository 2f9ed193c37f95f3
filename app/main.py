# Recipe Share API Main Entry Point
import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from .settings import settings
from .routers.ready import router as ready_router
from .routers.importer import router as importer_router
from .routers.posts import router as posts_router
from .routers.comments import router as comments_router
from .routers.reactions import router as reactions_router
from .routers.users import router as users_router
from .routers.dev import router as dev_router

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("recipeshare")

# Rate limiter (per-IP)
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit_default])

app = FastAPI(title="Recipe Share API", version="0.1.0")
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ready_router, prefix="/api", tags=["ready"])
# Before the posts router so /posts/convert is never read as a post id
app.include_router(importer_router, prefix="/api", tags=["importer"])
app.include_router(posts_router, prefix="/api", tags=["posts"])
app.include_router(comments_router, prefix="/api", tags=["comments"])
app.include_router(reactions_router, prefix="/api", tags=["reactions"])
app.include_router(users_router, prefix="/api", tags=["users"])
app.include_router(dev_router, prefix="/api", tags=["dev"])
