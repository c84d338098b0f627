import logging

from fastapi import FastAPI

from api.core.config import Settings, get_settings
from api.core.logging_setup import configure_logging
from api.repositories.json_storage import JsonUserRepository
from api.routers import users as users_router
from api.services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn."""
    settings = settings or get_settings()
    application = FastAPI(title="Users API")
    application.state.settings = settings
    application.state.user_service = UserService(JsonUserRepository(settings.users_file))
    application.include_router(users_router.router)
    return application


app = create_app()


def main() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    logger.info("[x] - server is running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
