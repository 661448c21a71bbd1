import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from trophy_cabinet.config import settings
from trophy_cabinet.core.exceptions import (
    UnauthorizedException,
    NotFoundException,
    ForbiddenException,
    ValidationException,
    ConflictException,
    InvalidInviteCodeException,
    InviteCodeExpiredException,
    InviteCodeExhaustedException,
)
from trophy_cabinet.routes import (
    award_routes,
    billing_routes,
    invite_code_routes,
    profile_routes,
    season_routes,
    tenant_routes,
    trophy_routes,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.DEBUG else None,  # Disable in production
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
cors_origins = settings.cors_origins_list
if cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# Exception handlers: every domain error reaches the client as {"detail": message}
@app.exception_handler(UnauthorizedException)
async def unauthorized_exception_handler(request: Request, exc: UnauthorizedException):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


@app.exception_handler(NotFoundException)
async def not_found_exception_handler(request: Request, exc: NotFoundException):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(ForbiddenException)
async def forbidden_exception_handler(request: Request, exc: ForbiddenException):
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(exc)})


@app.exception_handler(ValidationException)
async def validation_exception_handler(request: Request, exc: ValidationException):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(ConflictException)
async def conflict_exception_handler(request: Request, exc: ConflictException):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


@app.exception_handler(InvalidInviteCodeException)
async def invalid_invite_code_exception_handler(request: Request, exc: InvalidInviteCodeException):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(InviteCodeExpiredException)
async def invite_code_expired_exception_handler(request: Request, exc: InviteCodeExpiredException):
    return JSONResponse(status_code=status.HTTP_410_GONE, content={"detail": str(exc)})


@app.exception_handler(InviteCodeExhaustedException)
async def invite_code_exhausted_exception_handler(
    request: Request, exc: InviteCodeExhaustedException
):
    return JSONResponse(status_code=status.HTTP_410_GONE, content={"detail": str(exc)})


# Health check endpoint
@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.APP_VERSION}


# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "Trophy Cabinet API",
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.DEBUG else "Documentation disabled in production",
    }


# Include routers
app.include_router(profile_routes.router, prefix="/api/profiles", tags=["Profiles"])
app.include_router(tenant_routes.router, prefix="/api/tenants", tags=["Tenants"])
app.include_router(
    invite_code_routes.router,
    prefix="/api/tenants/{tenant_slug}/invite-codes",
    tags=["Invite Codes"],
)
app.include_router(
    invite_code_routes.redeem_router, prefix="/api/invite-codes", tags=["Invite Codes"]
)
app.include_router(
    trophy_routes.router, prefix="/api/tenants/{tenant_slug}/trophies", tags=["Trophies"]
)
app.include_router(
    season_routes.router, prefix="/api/tenants/{tenant_slug}", tags=["Seasons & Teams"]
)
app.include_router(
    award_routes.router, prefix="/api/tenants/{tenant_slug}/awards", tags=["Awards"]
)
app.include_router(billing_routes.router, prefix="/api/billing", tags=["Billing"])
