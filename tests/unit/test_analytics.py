"""
Tests for page-view and event tracking plus the admin reports.
"""

from app.modules.analytics.service import AnalyticsService


class TestAnalyticsService:

    def test_summary_counts(self, fake_db):
        fake_db.seed(
            "analytics",
            {"event_type": "page_view", "page": "/"},
            {"event_type": "page_view", "page": "/"},
            {"event_type": "page_view", "page": "/projects"},
            {"event_type": "click", "page": "/"},
            {"event_type": "download_resume", "page": "/about"},
        )
        summary = AnalyticsService(fake_db).summary(days=7)

        assert summary.totalPageViews == 3
        assert summary.totalEvents == 2
        assert summary.pageViewsByPage == {"/": 2, "/projects": 1}
        assert summary.eventsByType == {"click": 1, "download_resume": 1}
        assert summary.period == "7 days"

    def test_summary_keys_missing_page_as_null(self, fake_db):
        fake_db.seed("analytics", {"event_type": "page_view", "page": None})
        assert AnalyticsService(fake_db).summary().pageViewsByPage == {"null": 1}

    def test_summary_ignores_old_rows(self, fake_db):
        fake_db.seed(
            "analytics",
            {"event_type": "page_view", "page": "/", "created_at": "2000-01-01T00:00:00+00:00"},
        )
        assert AnalyticsService(fake_db).summary(days=30).totalPageViews == 0


class TestTrackingRoutes:

    def test_page_view_records_forwarded_ip(self, client, fake_db):
        response = client.post(
            "/api/analytics/page-view",
            json={"page": "/projects", "referrer": "https://google.com", "user_agent": "pytest"},
            headers={"X-Forwarded-For": "203.0.113.9, 198.51.100.7"},
        )
        assert response.status_code == 201
        assert response.json() == {"message": "Page view tracked"}

        row = fake_db.rows("analytics")[0]
        assert row["event_type"] == "page_view"
        assert row["page"] == "/projects"
        assert row["ip_address"] == "198.51.100.7"
        assert row["referrer"] == "https://google.com"

    def test_event_uses_user_agent_header(self, client, fake_db):
        response = client.post(
            "/api/analytics/event",
            json={"event_type": "click", "page": "/", "metadata": {"target": "cta"}},
            headers={"User-Agent": "browser/1.0"},
        )
        assert response.status_code == 201
        row = fake_db.rows("analytics")[0]
        assert row["user_agent"] == "browser/1.0"
        assert row["metadata"] == {"target": "cta"}

    def test_event_stores_non_object_metadata(self, client, fake_db):
        response = client.post("/api/analytics/event", json={"event_type": "scroll", "metadata": [25, 50]})
        assert response.status_code == 201
        assert fake_db.rows("analytics")[0]["metadata"] == [25, 50]

    def test_event_requires_type(self, client):
        assert client.post("/api/analytics/event", json={"page": "/"}).status_code == 400

    def test_generic_track(self, client, fake_db):
        response = client.post(
            "/api/analytics",
            json={"event_type": "section_view", "event_data": {"page": "/about", "section": "skills"}},
        )
        assert response.status_code == 201
        row = fake_db.rows("analytics")[0]
        assert row["page"] == "/about"
        assert row["metadata"]["section"] == "skills"

    def test_tracking_failure(self, client, fake_db):
        fake_db.fail_tables.add("analytics")
        response = client.post("/api/analytics/page-view", json={"page": "/"})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to track page view"}


class TestReportRoutes:

    def test_summary_requires_admin(self, client):
        assert client.get("/api/analytics/summary").status_code == 401

    def test_summary(self, client, fake_db, admin_headers):
        fake_db.seed("analytics", {"event_type": "page_view", "page": "/"})
        body = client.get("/api/analytics/summary", params={"days": 1}, headers=admin_headers).json()
        assert body["totalPageViews"] == 1
        assert body["period"] == "1 days"

    def test_summary_days_out_of_range(self, client, admin_headers):
        response = client.get("/api/analytics/summary", params={"days": 0}, headers=admin_headers)
        assert response.status_code == 400

    def test_detailed_paging_and_filter(self, client, fake_db, admin_headers):
        fake_db.seed(
            "analytics",
            *[{"event_type": "page_view", "page": f"/p{i}"} for i in range(5)],
            {"event_type": "click", "page": "/"},
        )
        page = client.get(
            "/api/analytics/detailed",
            params={"event_type": "page_view", "limit": 2, "offset": 1},
            headers=admin_headers,
        ).json()
        assert [r["page"] for r in page] == ["/p3", "/p2"]

    def test_detailed_with_list_metadata(self, client, fake_db, admin_headers):
        fake_db.seed("analytics", {"event_type": "scroll", "page": "/", "metadata": ["a", "b"]})
        response = client.get("/api/analytics/detailed", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()[0]["metadata"] == ["a", "b"]
