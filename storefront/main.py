# storefront/main.py
#
# start: uvicorn --factory storefront.main:create_app
#    lub: python -m storefront.main
from fastapi import FastAPI
import uvicorn

from storefront.api import api_router
from storefront.services.notification_service import TelegramNotifier
from storefront.services.session import StorefrontSession, build_session, default_backend
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(session: StorefrontSession | None = None) -> FastAPI:
    app = FastAPI(
        title="Gold Storefront",
        version="1.0.0",
    )

    if session is None:
        session = build_session(default_backend(), TelegramNotifier())

    # jeden kontekst sesji na aplikacje
    app.state.storefront = session
    app.include_router(api_router)

    logger.info("Storefront app created")
    return app


if __name__ == "__main__":
    uvicorn.run("storefront.main:create_app", factory=True, host="0.0.0.0", port=8000)
