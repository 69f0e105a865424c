from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fleamarket.core.config import settings

engine_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
	engine_args["connect_args"] = {"check_same_thread": False}
	# In-memory databases vanish with their connection; share a single one
	if settings.DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
		engine_args["poolclass"] = StaticPool
engine = create_engine(settings.DATABASE_URL, **engine_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
	db = SessionLocal()
	try:
		yield db
	finally:
		db.close()
