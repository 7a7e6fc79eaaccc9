"""
Pytest Configuration and Shared Fixtures

Provides an in-memory stand-in for the Supabase query builder, a FastAPI
TestClient wired to it, and fakes for Cloudinary and SMTP.
"""

import os

# Must be set before app.config is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT", "10000/minute")

import copy
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient


# ============================================================================
# Fake Supabase
# ============================================================================

def _same(a: Any, b: Any) -> bool:
    return a == b or (a is not None and b is not None and str(a) == str(b))


class FakeResult:
    def __init__(self, data: List[Dict[str, Any]], count: Optional[int] = None):
        self.data = data
        self.count = count


class FakeQuery:
    """Subset of the postgrest builder the services use"""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table_name = table
        self.action = "select"
        self.columns: Optional[List[str]] = None
        self.count: Optional[str] = None
        self.payload: Any = None
        self.filters: List = []
        self.orders: List = []
        self.limit_n: Optional[int] = None
        self.range_bounds: Optional[tuple] = None

    # actions
    def select(self, columns: str = "*", count: Optional[str] = None):
        self.action = "select"
        if columns.strip() != "*":
            self.columns = [c.strip() for c in columns.split(",")]
        self.count = count
        return self

    def insert(self, rows):
        self.action = "insert"
        self.payload = rows
        return self

    def update(self, data):
        self.action = "update"
        self.payload = data
        return self

    def delete(self):
        self.action = "delete"
        return self

    # filters and modifiers
    def eq(self, field, value):
        self.filters.append(lambda r: _same(r.get(field), value))
        return self

    def neq(self, field, value):
        self.filters.append(lambda r: not _same(r.get(field), value))
        return self

    def gte(self, field, value):
        self.filters.append(lambda r: r.get(field) is not None and str(r.get(field)) >= str(value))
        return self

    def in_(self, field, values):
        self.filters.append(lambda r: any(_same(r.get(field), v) for v in values))
        return self

    def order(self, column, desc=False):
        self.orders.append((column, desc))
        return self

    def limit(self, n):
        self.limit_n = n
        return self

    def range(self, start, end):
        self.range_bounds = (start, end)
        return self

    def single(self):
        self.limit_n = 1
        return self

    def _matches(self, row) -> bool:
        return all(f(row) for f in self.filters)

    def execute(self) -> FakeResult:
        if self.table_name in self.db.fail_tables:
            raise Exception(f"simulated failure on {self.table_name}")
        rows = self.db.tables.setdefault(self.table_name, [])

        if self.action == "insert":
            payload = self.payload if isinstance(self.payload, list) else [self.payload]
            created = [self.db.new_row(self.table_name, item) for item in payload]
            rows.extend(created)
            return FakeResult(copy.deepcopy(created))

        if self.action == "update":
            changed = []
            for row in rows:
                if self._matches(row):
                    row.update(copy.deepcopy(self.payload))
                    changed.append(copy.deepcopy(row))
            return FakeResult(changed)

        if self.action == "delete":
            removed = [r for r in rows if self._matches(r)]
            self.db.tables[self.table_name] = [r for r in rows if not self._matches(r)]
            return FakeResult(copy.deepcopy(removed))

        selected = [r for r in rows if self._matches(r)]
        total = len(selected)
        for column, desc in reversed(self.orders):
            selected.sort(key=lambda r: (r.get(column) is None, r.get(column) if r.get(column) is not None else 0), reverse=desc)
        if self.range_bounds:
            start, end = self.range_bounds
            selected = selected[start:end + 1]
        if self.limit_n is not None:
            selected = selected[:self.limit_n]
        if self.columns:
            selected = [{c: r.get(c) for c in self.columns} for r in selected]
        return FakeResult(copy.deepcopy(selected), total if self.count else None)


class FakeSupabase:
    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.fail_tables = set()
        self._clock = datetime.now(timezone.utc) - timedelta(hours=1)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def new_row(self, table: str, data: Dict[str, Any]) -> Dict[str, Any]:
        self._clock += timedelta(seconds=1)
        row = {"id": str(uuid.uuid4()), "created_at": self._clock.isoformat()}
        row.update(copy.deepcopy(data))
        return row

    def seed(self, table: str, *rows: Dict[str, Any]) -> List[Dict[str, Any]]:
        created = [self.new_row(table, r) for r in rows]
        self.tables.setdefault(table, []).extend(created)
        return created

    def rows(self, table: str) -> List[Dict[str, Any]]:
        return self.tables.get(table, [])


# ============================================================================
# Cloudinary and SMTP fakes
# ============================================================================

class FakeStorage:
    def __init__(self):
        self.uploads: List[Dict[str, Any]] = []
        self.deleted: List[str] = []
        self.existing = set()

    def upload_image(self, content: bytes) -> Dict[str, Any]:
        public_id = f"portfolio/img{len(self.uploads)}"
        self.uploads.append({"public_id": public_id, "size": len(content)})
        self.existing.add(public_id)
        return {
            "secure_url": f"https://res.cloudinary.com/demo/image/upload/{public_id}.jpg",
            "public_id": public_id,
            "width": 1200,
            "height": 800,
        }

    def upload_pdf(self, content: bytes, public_id: str, folder: Optional[str] = None) -> Dict[str, Any]:
        full_id = f"{folder or 'portfolio/resumes'}/{public_id}"
        self.uploads.append({"public_id": full_id, "size": len(content)})
        self.existing.add(full_id)
        return {
            "secure_url": f"https://res.cloudinary.com/demo/image/upload/{full_id}.pdf",
            "public_id": full_id,
        }

    def delete(self, public_id: str, resource_type: str = "image") -> bool:
        if public_id not in self.existing:
            return False
        self.existing.discard(public_id)
        self.deleted.append(public_id)
        return True


class FakeMailer:
    def __init__(self):
        self.sent = []

    def notify_new_message(self, contact) -> bool:
        self.sent.append(contact)
        return True


# ============================================================================
# App fixtures
# ============================================================================

@pytest.fixture
def fake_db() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def fake_storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def fake_mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def client(fake_db, fake_storage, fake_mailer):
    from app.main import app
    from app.database.supabase_client import get_supabase, get_admin_supabase
    from app.modules.contact.mailer import get_mailer
    from app.modules.uploads.routes import get_storage

    app.dependency_overrides[get_supabase] = lambda: fake_db
    app.dependency_overrides[get_admin_supabase] = lambda: fake_db
    app.dependency_overrides[get_mailer] = lambda: fake_mailer
    app.dependency_overrides[get_storage] = lambda: fake_storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_token() -> str:
    from app.modules.auth.service import AuthService
    return AuthService().create_token("admin")


@pytest.fixture
def admin_headers(admin_token) -> Dict[str, str]:
    return {"Authorization": f"Bearer {admin_token}"}


# ============================================================================
# Sample Data Fixtures
# ============================================================================

@pytest.fixture
def sample_project() -> Dict[str, Any]:
    return {
        "title": "Portfolio Site",
        "description": "Personal site with an admin panel",
        "technologies": ["Next.js", "FastAPI", "Supabase"],
        "category": "Web Dev",
        "status": "completed",
        "featured": True,
        "sort_order": 1,
    }


@pytest.fixture
def sample_contact() -> Dict[str, Any]:
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "subject": "Collaboration",
        "message": "Hi,\nwould you like to build something together?",
    }
