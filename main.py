from contextlib import asynccontextmanager

from fastapi import FastAPI
from app.routers import posts, comments
from app.storage.database import init_db
from app.core.logx import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup: creating tables if missing")
    init_db()
    yield
    logger.info("Application shutdown")


app = FastAPI(title="Blog Management System", lifespan=lifespan)

# 注册路由
app.include_router(posts.posts_router)
app.include_router(comments.comments_router)

# uvicorn main:app
# uvicorn main:app --reload
@app.get("/")
def root():
    return {"message": "Welcome to Blog Management System"}
