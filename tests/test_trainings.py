#!/usr/bin/env python3
"""
Tests for training program endpoints.

Run with: pytest tests/test_trainings.py -v
"""


class TestPublicTrainings:

    def test_only_published_active_trainings_are_listed(self, client, make_training):
        visible = make_training(price=9000)
        cheaper = make_training(price=4000)
        make_training(isPublished=False)
        make_training(isActive=False)

        body = client.get("/api/trainings").json()

        assert body["count"] == 2
        assert [t["trainingId"] for t in body["data"]] == [cheaper["trainingId"], visible["trainingId"]]

    def test_filter_by_mode(self, client, make_training):
        online = make_training(mode="Online")
        make_training(mode="Offline")

        body = client.get("/api/trainings?mode=Online").json()

        assert [t["trainingId"] for t in body["data"]] == [online["trainingId"]]

    def test_get_by_slug(self, client, make_training):
        training = make_training(title="Saffron Basics")

        response = client.get("/api/trainings/saffron-basics")

        assert response.status_code == 200
        assert response.json()["data"]["trainingId"] == training["trainingId"]

    def test_get_by_id(self, client, make_training):
        training = make_training()

        response = client.get(f"/api/trainings/id/{training['trainingId']}")

        assert response.json()["data"]["title"] == training["title"]

    def test_draft_is_hidden(self, client, make_training):
        draft = make_training(title="Secret Course", isPublished=False)

        by_slug = client.get("/api/trainings/secret-course")
        by_id = client.get(f"/api/trainings/id/{draft['trainingId']}")

        assert by_slug.status_code == 404
        assert by_id.status_code == 404
        assert by_slug.json() == {"success": False, "message": "Training program not found"}


class TestAdminTrainings:

    def test_create_training(self, client, admin_headers):
        response = client.post(
            "/api/admin/trainings",
            json={"title": "Saffron Business 101", "description": "Markets", "duration": "2 Days",
                  "price": 5000, "maxParticipants": 20},
            headers=admin_headers
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["slug"] == "saffron-business-101"
        assert data["currentEnrollments"] == 0
        assert data["isPublished"] is False

    def test_create_rejects_negative_price(self, client, admin_headers):
        response = client.post(
            "/api/admin/trainings",
            json={"title": "Bad", "description": "x", "duration": "1 Day", "price": -1},
            headers=admin_headers
        )

        assert response.status_code == 400

    def test_duplicate_title_is_400(self, client, admin_headers, make_training):
        make_training(title="Saffron Basics")

        response = client.post(
            "/api/admin/trainings",
            json={"title": "Saffron Basics", "description": "x", "duration": "1 Day", "price": 1},
            headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Slug 'saffron-basics' is already in use"

    def test_admin_list_includes_drafts(self, client, admin_headers, make_training):
        make_training()
        make_training(isPublished=False)

        data = client.get("/api/admin/trainings?isPublished=false", headers=admin_headers).json()["data"]

        assert len(data["trainings"]) == 1
        assert data["pagination"]["itemsPerPage"] == 50

    def test_update_title_changes_slug(self, client, admin_headers, make_training):
        training = make_training()

        response = client.put(
            f"/api/admin/trainings/{training['trainingId']}",
            json={"title": "Advanced Saffron", "isPublished": False},
            headers=admin_headers
        )

        data = response.json()["data"]
        assert data["slug"] == "advanced-saffron"
        assert data["isPublished"] is False

    def test_null_price_update_is_rejected(self, client, admin_headers, make_training):
        training = make_training(title="Saffron Basics")

        response = client.put(
            f"/api/admin/trainings/{training['trainingId']}", json={"price": None}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["success"] is False
        # The stored training is unchanged and still usable
        public = client.get("/api/trainings/saffron-basics")
        assert public.status_code == 200
        assert public.json()["data"]["price"] == 15000
        enrollment = client.post("/api/enrollments", json={
            "studentName": "Ravi", "email": "ravi@example.com", "phone": "1",
            "trainingId": training["trainingId"]
        })
        assert enrollment.status_code == 201

    def test_null_title_update_is_rejected(self, client, admin_headers, make_training):
        training = make_training()

        response = client.put(
            f"/api/admin/trainings/{training['trainingId']}", json={"title": None}, headers=admin_headers
        )

        assert response.status_code == 400

    def test_update_keeps_seat_count(self, client, admin_headers, make_training):
        from helpers import training_helper

        training = make_training()
        training_helper.adjust_enrollment_count(training["trainingId"], 2)

        data = client.put(
            f"/api/admin/trainings/{training['trainingId']}", json={"price": 12000}, headers=admin_headers
        ).json()["data"]

        assert data["price"] == 12000
        assert data["currentEnrollments"] == 2

    def test_delete_training(self, client, admin_headers, make_training):
        training = make_training()

        response = client.delete(f"/api/admin/trainings/{training['trainingId']}", headers=admin_headers)

        assert response.status_code == 200
        missing = client.get(f"/api/admin/trainings/{training['trainingId']}", headers=admin_headers)
        assert missing.status_code == 404

    def test_stats(self, client, admin_headers, make_training):
        training = make_training()
        make_training(isActive=False)
        client.post("/api/enrollments", json={
            "studentName": "Ravi", "email": "ravi@example.com", "phone": "1",
            "trainingId": training["trainingId"]
        })

        data = client.get("/api/admin/trainings/stats", headers=admin_headers).json()["data"]

        assert data == {
            "totalTrainings": 2, "activeTrainings": 1, "totalEnrollments": 1, "pendingEnrollments": 1
        }

    def test_admin_routes_require_token(self, client):
        assert client.get("/api/admin/trainings").status_code == 401
