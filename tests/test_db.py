import pytest
from sqlalchemy.pool import StaticPool

from app import db as db_module
from app.models import User


@pytest.fixture
def scratch_engine(monkeypatch):
    """Point the app's lazy engine at a private in-memory database."""
    monkeypatch.setattr(db_module, "_engine", None)
    monkeypatch.setattr(db_module, "_session_factory", None)
    engine = db_module.init_engine("sqlite:///:memory:")
    db_module.init_db()
    yield engine
    engine.dispose()


def test_engine_options():
    assert db_module.engine_options("postgresql+psycopg2://u:p@h/db") == {"pool_pre_ping": True}

    memory = db_module.engine_options("sqlite:///:memory:")
    assert memory["poolclass"] is StaticPool
    assert memory["connect_args"] == {"check_same_thread": False}

    on_disk = db_module.engine_options("sqlite:///./recipes.db")
    assert "poolclass" not in on_disk


def test_session_scope_commits(scratch_engine):
    with db_module.session_scope() as session:
        session.add(User(email="scope@example.com", name="Scope"))

    with db_module.session_scope() as session:
        assert session.query(User).filter(User.email == "scope@example.com").count() == 1


def test_session_scope_rolls_back_on_error(scratch_engine):
    with pytest.raises(RuntimeError):
        with db_module.session_scope() as session:
            session.add(User(email="gone@example.com"))
            session.flush()
            raise RuntimeError("boom")

    with db_module.session_scope() as session:
        assert session.query(User).count() == 0


def test_get_db_yields_working_session(scratch_engine):
    gen = db_module.get_db()
    session = next(gen)
    assert session.query(User).count() == 0
    gen.close()
