"""
FastAPI application definition.

This module creates and configures the FastAPI application instance,
including exception handlers and router registration.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from validation_playbook.api.routes import router
from validation_playbook.models import Config
from validation_playbook.registry import UnknownModelError
from validation_playbook.runner import OnboardingRunner, StageMismatchError, UnknownThreadError
from validation_playbook.settings import get_settings
from validation_playbook.validation import PayloadValidationError


def create_app(settings: Optional[Config] = None, runner: Optional[OnboardingRunner] = None) -> FastAPI:
    """
    Builds the application.

    Args:
        settings: overrides the environment-loaded Config
        runner: overrides the onboarding runner (a fresh graph by default)
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Executable Pydantic / Annotated / FastAPI / LangGraph examples",
        version="0.1.0",
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.runner = runner or OnboardingRunner()

    @app.exception_handler(PayloadValidationError)
    async def _payload_invalid(request: Request, exc: PayloadValidationError):
        return JSONResponse(
            status_code=422,
            content={"model": exc.model, "errors": [e.model_dump(mode="json") for e in exc.errors]},
        )

    @app.exception_handler(UnknownModelError)
    async def _unknown_model(request: Request, exc: UnknownModelError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(UnknownThreadError)
    async def _unknown_thread(request: Request, exc: UnknownThreadError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(StageMismatchError)
    async def _stage_mismatch(request: Request, exc: StageMismatchError):
        return JSONResponse(
            status_code=409,
            content={"detail": str(exc), "expected": exc.expected, "actual": exc.actual},
        )

    app.include_router(router)
    return app


app = create_app()
