import os

# Must be set before the app (and its settings) are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ITEM_CREATE_TIERS"] = ""

import pytest
from fastapi.testclient import TestClient

from fleamarket.db.base import Base
from fleamarket.db.session import engine, SessionLocal
from fleamarket.main import app

PASSWORD = "password1"


@pytest.fixture(autouse=True)
def _schema():
	Base.metadata.create_all(bind=engine)
	yield
	Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
	session = SessionLocal()
	try:
		yield session
	finally:
		session.close()


@pytest.fixture
def client():
	with TestClient(app) as c:
		yield c


def signup(client, username, password=PASSWORD, tier=None):
	body = {"username": username, "password": password}
	if tier:
		body["tier"] = tier
	resp = client.post("/auth/signup", json=body)
	assert resp.status_code == 201, resp.text
	return resp.json()


def login_headers(client, username, password=PASSWORD):
	resp = client.post("/auth/signin", json={"username": username, "password": password})
	assert resp.status_code == 200, resp.text
	return {"Authorization": f"Bearer {resp.json()['access_token']}"}
