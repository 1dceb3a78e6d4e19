"""Tests for how pages and HTMX actions behave when the database errors."""

import json
import re
from unittest.mock import patch

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from constructpro import models
from constructpro.repositories import (
    InquiryRepository,
    ProfileRepository,
    ProjectRepository,
    TestimonialRepository,
)

PROJECT_FORM = {
    "title": "Harbor Offices",
    "description": "Three floors of open-plan office space.",
    "category": "Commercial",
    "location": "Portland, OR",
    "status": "in_progress",
    "budget": "3500000",
    "image_url": "",
    "completion_date": "2025-09-01",
}


def db_down() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("database is unavailable"))


def _toast(response) -> dict:
    return json.loads(response.headers["HX-Trigger"])["showToast"]


def _stat(body: str, title: str) -> int:
    match = re.search(
        rf'<div class="stat-title">{title}</div>\s*<div class="stat-value">(\d+)</div>', body,
    )
    assert match, f"no stat card for {title}"
    return int(match.group(1))


class TestListPagesDegrade:

    @pytest.mark.asyncio
    async def test_projects(self, admin_client):
        with patch.object(ProjectRepository, "list_all", side_effect=db_down()):
            response = await admin_client.get("/admin/projects")

        assert response.status_code == 200
        assert "Failed to load projects" in response.text

    @pytest.mark.asyncio
    async def test_testimonials(self, admin_client):
        with patch.object(TestimonialRepository, "list_all", side_effect=db_down()):
            response = await admin_client.get("/admin/testimonials")

        assert response.status_code == 200
        assert "Failed to load testimonials" in response.text

    @pytest.mark.asyncio
    async def test_inquiries(self, admin_client):
        with patch.object(InquiryRepository, "list_all", side_effect=db_down()):
            response = await admin_client.get("/admin/inquiries")

        assert response.status_code == 200
        assert "Failed to load contact inquiries" in response.text

    @pytest.mark.asyncio
    async def test_users(self, admin_client):
        with patch.object(ProfileRepository, "list_all", side_effect=db_down()):
            response = await admin_client.get("/admin/users")

        assert response.status_code == 200
        assert "Failed to load users" in response.text


class TestProjectWritesFail:

    @pytest.mark.asyncio
    async def test_create_keeps_form(self, admin_client, db):
        with patch.object(ProjectRepository, "insert", side_effect=db_down()):
            response = await admin_client.post("/admin/projects", data=PROJECT_FORM)

        assert response.status_code == 500
        assert "Failed to save project" in response.text
        assert 'value="Harbor Offices"' in response.text
        assert (await db.execute(select(models.Project))).scalars().all() == []

    @pytest.mark.asyncio
    async def test_update_redirects_and_keeps_row(self, admin_client, make_project, db):
        project = await make_project()

        with patch.object(ProjectRepository, "update", side_effect=db_down()):
            response = await admin_client.post(f"/admin/projects/{project.id}", data=PROJECT_FORM)

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/projects?toast=project_save_failed"
        row = await db.get(models.Project, project.id, populate_existing=True)
        assert row.title == "Riverside Villa"

    @pytest.mark.asyncio
    async def test_delete_leaves_row_in_place(self, admin_client, make_project, db):
        project = await make_project()

        with patch.object(ProjectRepository, "delete", side_effect=db_down()):
            response = await admin_client.delete(f"/admin/projects/{project.id}")

        assert response.status_code == 200
        assert response.headers["HX-Reswap"] == "none"
        toast = _toast(response)
        assert toast["description"] == "Failed to delete project"
        assert toast["variant"] == "destructive"
        assert await db.get(models.Project, project.id, populate_existing=True) is not None


class TestTestimonialWritesFail:

    @pytest.mark.asyncio
    async def test_toggle_keeps_flag(self, admin_client, make_testimonial, db):
        testimonial = await make_testimonial(active=True)

        with patch.object(TestimonialRepository, "set_active", side_effect=db_down()):
            response = await admin_client.post(f"/admin/testimonials/{testimonial.id}/toggle")

        assert response.headers["HX-Reswap"] == "none"
        assert _toast(response)["description"] == "Failed to update testimonial"
        row = await db.get(models.Testimonial, testimonial.id, populate_existing=True)
        assert row.active is True

    @pytest.mark.asyncio
    async def test_delete_leaves_row_in_place(self, admin_client, make_testimonial, db):
        testimonial = await make_testimonial()

        with patch.object(TestimonialRepository, "delete", side_effect=db_down()):
            response = await admin_client.delete(f"/admin/testimonials/{testimonial.id}")

        assert response.headers["HX-Reswap"] == "none"
        assert _toast(response)["description"] == "Failed to delete testimonial"
        assert await db.get(models.Testimonial, testimonial.id, populate_existing=True) is not None


class TestInquiryStatusFails:

    @pytest.mark.asyncio
    async def test_status_unchanged(self, admin_client, make_inquiry, db):
        inquiry = await make_inquiry(status="new")

        with patch.object(InquiryRepository, "update_status", side_effect=db_down()):
            response = await admin_client.patch(
                f"/admin/inquiries/{inquiry.id}/status", data={"new_status": "closed"},
            )

        assert response.headers["HX-Reswap"] == "none"
        assert _toast(response)["description"] == "Failed to update inquiry status"
        row = await db.get(models.ContactInquiry, inquiry.id, populate_existing=True)
        assert row.status == "new"


class TestStatsFail:

    @pytest.mark.asyncio
    async def test_one_failing_count_zeroes_all(self, admin_client, make_project, make_testimonial):
        await make_project()
        await make_testimonial()

        with patch.object(InquiryRepository, "count", side_effect=db_down()):
            response = await admin_client.get("/admin/dashboard/stats")

        assert response.status_code == 200
        body = response.text
        assert _stat(body, "Total Projects") == 0
        assert _stat(body, "Contact Inquiries") == 0
        assert _stat(body, "Registered Users") == 0
        assert _stat(body, "Testimonials") == 0


class TestPublicSiteFails:

    @pytest.mark.asyncio
    async def test_landing_renders_empty_sections(self, client, make_project, make_testimonial):
        await make_project()
        await make_testimonial()

        with patch.object(ProjectRepository, "list_featured", side_effect=db_down()), \
                patch.object(TestimonialRepository, "list_active", side_effect=db_down()):
            response = await client.get("/")

        assert response.status_code == 200
        assert "No completed projects to display yet." in response.text
        assert "What Our Clients Say" not in response.text
        assert "Dana Whitfield" not in response.text

    @pytest.mark.asyncio
    async def test_contact_insert_failure_keeps_form(self, client, db):
        with patch.object(InquiryRepository, "insert", side_effect=db_down()):
            response = await client.post("/contact", data={
                "first_name": "John",
                "last_name": "Smith",
                "email": "john@example.com",
                "project_type": "villa",
                "message": "Planning a villa on a sloped lot.",
            })

        assert response.status_code == 500
        assert "Failed to send message. Please try again." in response.text
        assert 'value="John"' in response.text
        assert (await db.execute(select(models.ContactInquiry))).scalars().all() == []

    @pytest.mark.asyncio
    async def test_api_projects(self, client):
        with patch.object(ProjectRepository, "list_featured", side_effect=db_down()):
            response = await client.get("/api/v1/projects")

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to load projects"}
