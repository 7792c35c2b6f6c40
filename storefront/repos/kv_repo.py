# storefront/repos/kv_repo.py
from datetime import datetime, timezone

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session, sessionmaker

from storefront.data.models.kv_entry import KeyValueModel

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class KeyValueRepo:
    """
    Trwaly magazyn klucz -> JSON na tabeli kv_entries.
    Kazde wywolanie otwiera i zamyka wlasna sesje (stan sklepu zyje w pamieci,
    tu trafia tylko zapis po kazdej zmianie i odczyt przy starcie).
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get(self, key: str) -> str | None:
        db: Session = self.session_factory()
        try:
            row = db.get(KeyValueModel, key)
            return row.value if row else None
        finally:
            db.close()

    def put(self, key: str, raw: str) -> None:
        db: Session = self.session_factory()
        try:
            insert = _UPSERT_DIALECTS.get(db.get_bind().dialect.name)
            now = datetime.now(timezone.utc)

            if insert is None:
                db.merge(KeyValueModel(key=key, value=raw, updated_at=now))
            else:
                #upsert: INSERT ... ON CONFLICT(key) DO UPDATE, bez wyscigu get->add
                stmt = insert(KeyValueModel).values(key=key, value=raw, updated_at=now)
                stmt = stmt.on_conflict_do_update(
                    index_elements=[KeyValueModel.key],
                    set_={"value": stmt.excluded.value, "updated_at": stmt.excluded.updated_at},
                )
                db.execute(stmt)
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
