from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError


class AppError(Exception):
	status_code = 500
	headers = None

	def __init__(self, message: str = "Internal server error", details=None):
		super().__init__(message)
		self.message = message
		self.details = details


class BadRequestError(AppError):
	status_code = 400

class UnauthorizedError(AppError):
	status_code = 401
	headers = {"WWW-Authenticate": "Bearer"}

	def __init__(self, message: str = "Unauthorized", details=None):
		super().__init__(message, details)

class ForbiddenError(AppError):
	status_code = 403

class NotFoundError(AppError):
	status_code = 404

class ConflictError(AppError):
	status_code = 409


def error_response(request: Request, status_code: int, message: str, details=None, headers=None):
	# Ensure details is serializable
	if isinstance(details, Exception):
		details = str(details)
	return JSONResponse(
		status_code=status_code,
		content={
			"error": {
				"message": message,
				"details": details,
				"request_id": getattr(request.state, "request_id", None),
			}
		},
		headers=headers,
	)

async def app_error_handler(request: Request, exc: AppError):
	return error_response(request, exc.status_code, exc.message, details=exc.details, headers=exc.headers)

async def validation_exception_handler(request: Request, exc: RequestValidationError):
	return error_response(
		request,
		422,
		"Validation error",
		details=jsonable_encoder(exc.errors()),
	)
