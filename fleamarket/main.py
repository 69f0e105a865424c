from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from fleamarket.core.config import settings
from fleamarket.core.logging import configure_logging, request_id_middleware
from fleamarket.core.errors import AppError, app_error_handler, validation_exception_handler
from fleamarket.db.session import engine
from fleamarket.db.base import Base
from fleamarket.db import models  # noqa: F401  registers tables on Base.metadata

from fleamarket.routers.auth import router as auth_router
from fleamarket.routers.items import router as items_router


def create_app() -> FastAPI:
	configure_logging(settings.LOG_LEVEL)
	app = FastAPI(title=settings.APP_NAME)

	# DB init
	Base.metadata.create_all(bind=engine)

	# Middleware
	app.middleware("http")(request_id_middleware)

	# Domain errors and validation errors share one envelope
	app.add_exception_handler(AppError, app_error_handler)
	app.add_exception_handler(RequestValidationError, validation_exception_handler)

	# Routers
	app.include_router(auth_router)
	app.include_router(items_router)

	@app.get("/health")
	def health():
		return {"status": "OK"}

	return app

app = create_app()

if __name__ == "__main__":
	import uvicorn
	uvicorn.run(app, host="0.0.0.0", port=8000)
