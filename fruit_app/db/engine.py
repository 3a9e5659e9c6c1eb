# fruit_app/db/engine.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

DEFAULT_DB_URL = "sqlite:///db.sqlite"  # file in project root


def get_engine(db_url: str = DEFAULT_DB_URL, echo: bool = False) -> Engine:
    """
    Build the engine that owns the connection pool for one application.
    """
    url = make_url(db_url)
    kwargs = {"future": True, "echo": echo}

    if url.get_backend_name() == "sqlite":
        # FastAPI runs sync endpoints in a threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # one shared connection, otherwise every checkout sees an empty db
            kwargs["poolclass"] = StaticPool

    return create_engine(url, **kwargs)
