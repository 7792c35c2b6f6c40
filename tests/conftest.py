import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.data.database import init_db, make_engine
from storefront.main import create_app
from storefront.repos.kv_repo import KeyValueRepo
from storefront.services.notification_service import NotificationError
from storefront.services.persistence import PersistenceSync
from storefront.services.session import build_session


class FakeNotifier:
    """Zapamietuje wyslane wiadomosci; fail=True symuluje awarie webhooka."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[str] = []

    def send(self, text: str) -> None:
        if self.fail:
            raise NotificationError("simulated failure")
        self.sent.append(text)


@pytest.fixture
def kv_repo():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    return KeyValueRepo(sessionmaker(bind=engine, autoflush=False, autocommit=False))


@pytest.fixture
def persistence(kv_repo):
    return PersistenceSync(kv_repo)


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def storefront(kv_repo, notifier):
    return build_session(kv_repo, notifier, admin_password="secret")


@pytest.fixture
def client(storefront):
    return TestClient(create_app(storefront))


@pytest.fixture
def file_kv_repo(tmp_path):
    # plik zamiast :memory: -> osobne polaczenia na watek, jak w produkcji
    engine = make_engine(f"sqlite:///{tmp_path / 'storefront.db'}")
    init_db(bind=engine)
    yield KeyValueRepo(sessionmaker(bind=engine, autoflush=False, autocommit=False))
    engine.dispose()
