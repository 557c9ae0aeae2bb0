"""FastAPI application entry point. Registers middleware, routers and the admin login redirect."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from sofaclean.config import settings
from sofaclean.database import Base, engine
import sofaclean.models  # noqa: F401 - registers model metadata
from sofaclean.middleware.auth_middleware import AdminLoginRequired
from sofaclean.middleware.locale_middleware import LocaleRedirectMiddleware
from sofaclean.routers import (
    admin_analytics, admin_pages, admin_posts, admin_quotes, admin_settings,
    auth, pages, quotes, site,
)

app = FastAPI(
    title="SofaClean Pro",
    description="Bilingual marketing site and CMS backend for an on-site cleaning service",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LocaleRedirectMiddleware)


@app.exception_handler(AdminLoginRequired)
async def redirect_to_admin_login(request: Request, exc: AdminLoginRequired):
    return RedirectResponse(url="/admin", status_code=303)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "SofaClean Pro"}


# API routers
app.include_router(auth.router)
app.include_router(site.router)
app.include_router(quotes.router)
app.include_router(admin_posts.router)
app.include_router(admin_quotes.router)
app.include_router(admin_settings.router)
app.include_router(admin_analytics.router)

# Admin screens must come before the catch-all /{lang} page routes
app.include_router(admin_pages.login_router)
app.include_router(admin_pages.router)
app.include_router(pages.router)


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)
