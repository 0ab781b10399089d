"""Tests for the HTTP routes."""
import unittest

from fastapi.testclient import TestClient

from tasknote.dependencies import get_task_service, get_theme_manager
from tasknote.main import create_app
from tasknote.services.theme_service import AppTheme, ThemeManager
from tests.helpers import make_service


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        self.service = make_service()
        self.themes = ThemeManager(default=AppTheme.SYSTEM)
        app = create_app()
        app.dependency_overrides[get_task_service] = lambda: self.service
        app.dependency_overrides[get_theme_manager] = lambda: self.themes
        self.client = TestClient(app)

    def create(self, title, **fields):
        response = self.client.post("/api/tasks", json={"title": title, **fields})
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()


class TaskRouteTests(ApiTestCase):
    def test_health(self):
        self.assertEqual(self.client.get("/health").status_code, 200)

    def test_create_and_get_task(self):
        task = self.create("Buy milk", priority="high", category="Personal")

        response = self.client.get(f"/api/tasks/{task['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["title"], "Buy milk")
        self.assertEqual(response.json()["priority"], "high")

    def test_create_with_empty_title(self):
        response = self.client.post("/api/tasks", json={"title": ""})
        self.assertEqual(response.status_code, 422)

    def test_missing_task(self):
        self.assertEqual(self.client.get("/api/tasks/999").status_code, 404)
        self.assertEqual(self.client.delete("/api/tasks/999").status_code, 404)

    def test_partial_update(self):
        task = self.create("Report", description="Quarterly", priority="low")

        response = self.client.patch(f"/api/tasks/{task['id']}", json={"priority": "urgent"})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["priority"], "urgent")
        self.assertEqual(body["description"], "Quarterly")

    def test_null_for_required_field_is_rejected(self):
        task = self.create("Report", description="Quarterly")

        for body in [{"description": None}, {"is_completed": None}, {"priority": None}, {"category": None}]:
            response = self.client.patch(f"/api/tasks/{task['id']}", json=body)
            self.assertEqual(response.status_code, 422, body)

        self.assertEqual(self.client.get(f"/api/tasks/{task['id']}").json()["description"], "Quarterly")

    def test_due_date_can_be_cleared(self):
        task = self.create("Report", due_date="2030-01-05T09:00:00")
        response = self.client.patch(f"/api/tasks/{task['id']}", json={"due_date": None})
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()["due_date"])

    def test_due_reminders(self):
        self.create("Late", due_date="2020-01-05T09:00:00")
        self.create("Later", due_date="2099-01-05T09:00:00")

        response = self.client.post("/api/reminders/due")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([r["body"] for r in response.json()], ["Late"])
        self.assertEqual(self.client.post("/api/reminders/due").json(), [])

    def test_toggle_and_delete(self):
        task = self.create("Report")

        response = self.client.post(f"/api/tasks/{task['id']}/toggle")
        self.assertTrue(response.json()["is_completed"])

        response = self.client.delete(f"/api/tasks/{task['id']}")
        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.client.get("/api/tasks").json(), [])

    def test_filters_drive_task_list(self):
        self.create("Report", category="Work")
        self.create("Run", category="Health")

        response = self.client.put(
            "/api/filters",
            json={"selected_categories": ["Work"], "sort_option": "alphabetical"},
        )
        self.assertEqual([t["title"] for t in response.json()], ["Report"])
        self.assertEqual([t["title"] for t in self.client.get("/api/tasks").json()], ["Report"])
        self.assertEqual(self.client.get("/api/filters").json()["sort_option"], "alphabetical")

        response = self.client.delete("/api/filters")
        self.assertEqual(len(response.json()), 2)

    def test_suggestions(self):
        self.create("Buy milk")
        response = self.client.get("/api/tasks/suggestions", params={"q": "mil"})
        self.assertEqual(response.json(), ["milk"])

    def test_reorder(self):
        for title in ["A", "B", "C"]:
            self.create(title)
        self.client.put("/api/filters", json={"sort_option": "manual"})

        response = self.client.post("/api/tasks/reorder", json={"from_positions": [0], "to_position": 2})
        self.assertEqual([t["title"] for t in response.json()], ["B", "C", "A"])

        response = self.client.post("/api/tasks/reorder", json={"from_positions": [5], "to_position": 0})
        self.assertEqual(response.status_code, 400)


class CategoryRouteTests(ApiTestCase):
    def test_create_category_once(self):
        first = self.client.post("/api/categories", json={"name": "Work"})
        second = self.client.post("/api/categories", json={"name": "work"})

        self.assertEqual(first.status_code, 201)
        self.assertEqual(second.status_code, 200)
        self.assertEqual(second.json()["id"], first.json()["id"])

    def test_rename_and_delete_category(self):
        category = self.client.post("/api/categories", json={"name": "Work"}).json()
        self.create("Report", category="Work")

        response = self.client.patch(f"/api/categories/{category['id']}", json={"name": "Office"})
        self.assertEqual(response.json()["name"], "Office")
        self.assertEqual(response.json()["task_count"], 0)

        response = self.client.delete(f"/api/categories/{category['id']}")
        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.client.get("/api/categories").json(), [])

    def test_missing_category(self):
        response = self.client.delete("/api/categories/42")
        self.assertEqual(response.status_code, 404)


class SettingsRouteTests(ApiTestCase):
    def test_theme(self):
        self.assertEqual(self.client.get("/api/settings/theme").json()["theme"], "system")

        response = self.client.put("/api/settings/theme", json={"theme": "dark"})
        self.assertEqual(response.json()["color_scheme"], "dark")
        self.assertEqual(self.themes.current_theme, AppTheme.DARK)

        response = self.client.put("/api/settings/theme", json={"theme": "sepia"})
        self.assertEqual(response.status_code, 422)

    def test_sample_data_and_delete_all(self):
        self.assertTrue(self.client.post("/api/data/sample").json()["created"])
        self.assertFalse(self.client.post("/api/data/sample").json()["created"])
        self.assertEqual(len(self.client.get("/api/tasks").json()), 5)

        self.assertEqual(self.client.delete("/api/data").status_code, 204)
        self.assertEqual(self.client.get("/api/tasks").json(), [])
        self.assertEqual(self.client.get("/api/categories").json(), [])
