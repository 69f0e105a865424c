import json
import logging
import uuid
from fastapi import Request

logger = logging.getLogger("api")

def configure_logging(level: str = "INFO") -> logging.Logger:
	"""Attach the JSON-line stream handler to the ``api`` logger exactly once."""
	logger.setLevel(level)
	if not any(getattr(h, "_fleamarket", False) for h in logger.handlers):
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter("%(message)s"))
		handler._fleamarket = True
		logger.addHandler(handler)
	return logger

async def request_id_middleware(request: Request, call_next):
	# Honour an upstream id so a request can be traced across services
	request.state.request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
	response = await call_next(request)
	response.headers["X-Request-Id"] = request.state.request_id
	return response

def log_event(event: str, **kwargs):
	payload = {"event": event, **kwargs}
	logger.info(json.dumps(payload, ensure_ascii=False, default=str))
