# mentora/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mentora import __version__
from mentora.api import admin, auth, mentor, request, session, users
from mentora.config import settings
from mentora.database import create_db_and_tables

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# Initialize FastAPI app
app = FastAPI(title="Mentora API", version=__version__, debug=settings.DEBUG)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Error-Code"],
)

# API routers
app.include_router(auth.router)      # /auth/*
app.include_router(users.router)     # /users/*
app.include_router(mentor.router)    # /mentors/*
app.include_router(request.router)   # /requests/*
app.include_router(session.router)   # /sessions/*
app.include_router(admin.router)     # /admin/*


@app.on_event("startup")
def on_startup():
    # Development convenience; production schemas are managed by Alembic.
    create_db_and_tables()


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "Mentora API is running",
        "version": __version__,
        "environment": settings.APP_ENV,
    }
