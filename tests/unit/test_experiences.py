"""
Tests for experiences: description lines are stored as an array and served as text.
"""

import pytest
from pydantic import ValidationError

from app.modules.experiences.schemas import ExperienceCreate, ExperienceResponse


class TestExperienceSchemas:

    def test_description_split_into_lines(self):
        exp = ExperienceCreate(
            title="Engineer", company="Acme", period="2021 - 2023", type="experience",
            description="Built APIs\n\n  Led migrations  \n",
        )
        assert exp.description == ["Built APIs", "Led migrations"]

    def test_description_list_kept(self):
        exp = ExperienceCreate(
            title="BSc", company="Uni", period="2019 - 2023", type="education",
            description=["Thesis on compilers"],
        )
        assert exp.description == ["Thesis on compilers"]

    def test_type_must_be_known(self):
        with pytest.raises(ValidationError):
            ExperienceCreate(title="x", company="y", period="z", type="hobby")

    def test_type_required(self):
        with pytest.raises(ValidationError):
            ExperienceCreate(title="x", company="y", period="z")

    def test_response_joins_description(self):
        exp = ExperienceResponse(id="1", title="x", company="y", description=["a", "b"])
        assert exp.description == "a\nb"

    def test_empty_description_kept_as_text(self):
        exp = ExperienceCreate(title="x", company="y", period="z", type="experience", description="")
        assert exp.description == ""

    def test_response_null_description(self):
        assert ExperienceResponse(id="1", title="x", company="y", description=None).description == ""


class TestExperienceRoutes:

    def test_create_and_list(self, client, fake_db, admin_headers):
        response = client.post(
            "/api/experiences",
            json={
                "title": "Intern",
                "company": "Acme",
                "period": "Summer 2024",
                "type": "experience",
                "description": "Line one\nLine two",
                "start_date": "2024-06-01",
            },
            headers=admin_headers,
        )
        assert response.status_code == 201
        assert fake_db.rows("experiences")[0]["description"] == ["Line one", "Line two"]

        listed = client.get("/api/experiences").json()
        assert listed[0]["description"] == "Line one\nLine two"

    def test_list_newest_first(self, client, fake_db):
        fake_db.seed(
            "experiences",
            {"title": "Old", "company": "A", "period": "p", "type": "experience", "start_date": "2019-01-01"},
            {"title": "New", "company": "B", "period": "p", "type": "experience", "start_date": "2023-01-01"},
        )
        assert [e["title"] for e in client.get("/api/experiences").json()] == ["New", "Old"]

    def test_filter_by_type(self, client, fake_db):
        fake_db.seed(
            "experiences",
            {"title": "Job", "company": "A", "period": "p", "type": "experience"},
            {"title": "Degree", "company": "U", "period": "p", "type": "education"},
        )
        response = client.get("/api/experiences", params={"type": "education"})
        assert [e["title"] for e in response.json()] == ["Degree"]

    def test_update_through_personal_info(self, client, fake_db, admin_headers):
        row = fake_db.seed("experiences", {"title": "Dev", "company": "A", "period": "p", "type": "experience"})[0]
        response = client.put(
            f"/api/personal-info/experiences/{row['id']}",
            json={"company": "B", "description": "x\ny"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["company"] == "B"
        assert fake_db.rows("experiences")[0]["description"] == ["x", "y"]

    def test_delete_requires_admin(self, client, fake_db):
        row = fake_db.seed("experiences", {"title": "Dev", "company": "A", "period": "p", "type": "experience"})[0]
        assert client.delete(f"/api/experiences/{row['id']}").status_code == 401

    def test_update_rejects_null_company(self, client, fake_db, admin_headers):
        row = fake_db.seed("experiences", {"title": "Dev", "company": "A", "period": "p", "type": "experience"})[0]
        response = client.put(f"/api/experiences/{row['id']}", json={"company": None}, headers=admin_headers)
        assert response.status_code == 400
        assert fake_db.rows("experiences")[0]["company"] == "A"

    def test_delete_missing_experience(self, client, admin_headers):
        response = client.delete("/api/experiences/missing", headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Experience not found"}
