import pytest

pytestmark = pytest.mark.api


def create_portfolio_user(client, headers, name="Alex", bio="Backend developer"):
    response = client.post("/portfolio-users", json={"name": name, "bio": bio}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def create_project(client, headers, owner_id, title="Task Tracker"):
    response = client.post(
        "/projects",
        json={"title": title, "description": "Manage tasks.", "portfolioUserId": owner_id},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_skill(client, headers, owner_id, name="Go", level="Intermediate"):
    return client.post(
        "/skills",
        json={"name": name, "level": level, "portfolioUserId": owner_id},
        headers=headers,
    )


class TestPublicEndpoints:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_empty_listings(self, client):
        assert client.get("/portfolio-users").json() == []
        assert client.get("/projects").json() == []
        assert client.get("/skills").json() == []

    def test_skill_levels(self, client):
        response = client.get("/skills/levels")

        assert response.json() == [
            "Beginner",
            "Novice",
            "Intermediate",
            "Advanced",
            "Expert",
            "Master",
        ]

    def test_unknown_route_uses_message_body(self, client):
        response = client.get("/nothing-here")

        assert response.status_code == 404
        assert "message" in response.json()

    def test_missing_entities_are_404(self, client):
        for path in ("/projects/5", "/skills/5", "/portfolio-users/5", "/projects/by-user/5"):
            response = client.get(path)
            assert response.status_code == 404, path
            assert response.json()["message"].endswith("not found.")


class TestWritesRequireAuthentication:
    @pytest.mark.parametrize(
        "method, path",
        [
            ("post", "/portfolio-users"),
            ("put", "/portfolio-users/1"),
            ("delete", "/portfolio-users/1"),
            ("post", "/projects"),
            ("put", "/projects/1"),
            ("delete", "/projects/1"),
            ("post", "/skills"),
            ("put", "/skills/1"),
            ("delete", "/skills/1"),
            ("post", "/seed"),
        ],
    )
    def test_anonymous_write_is_401(self, client, method, path):
        kwargs = {} if method == "delete" else {"json": {}}
        response = getattr(client, method)(path, **kwargs)

        assert response.status_code == 401
        assert response.json() == {"message": "User not authenticated."}

    def test_garbage_token_is_401(self, client):
        response = client.post(
            "/portfolio-users",
            json={"name": "Alex", "bio": "dev"},
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401


class TestPortfolioUsers:
    def test_create_returns_camel_case_body(self, client, auth_headers):
        body = create_portfolio_user(client, auth_headers)

        assert body["name"] == "Alex"
        assert body["profileImageUrl"] is None
        assert body["accountId"] is not None
        assert body["version"] == 1
        assert body["projects"] == []
        assert body["skills"] == []

    def test_create_validation_error(self, client, auth_headers):
        response = client.post("/portfolio-users", json={"name": "Alex"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"message": "Bio is required."}

    def test_malformed_body_is_400(self, client, auth_headers):
        response = client.post("/portfolio-users", json=["not", "an", "object"], headers=auth_headers)

        assert response.status_code == 400
        assert "message" in response.json()

    def test_update_and_id_mismatch(self, client, auth_headers):
        user = create_portfolio_user(client, auth_headers)

        mismatch = client.put(
            f"/portfolio-users/{user['id']}",
            json={"id": user["id"] + 1, "name": "Alex", "bio": "x"},
            headers=auth_headers,
        )
        updated = client.put(
            f"/portfolio-users/{user['id']}",
            json={"id": user["id"], "name": "Alex Smith", "bio": "Platform engineer"},
            headers=auth_headers,
        )

        assert mismatch.status_code == 400
        assert mismatch.json() == {"message": "ID mismatch."}
        assert updated.status_code == 200
        assert updated.json()["name"] == "Alex Smith"
        assert updated.json()["version"] == 2

    def test_search_is_case_insensitive(self, client, auth_headers):
        create_portfolio_user(client, auth_headers, name="Alex")
        create_portfolio_user(client, auth_headers, name="Sam")

        response = client.get("/portfolio-users/search", params={"name": "ALE"})

        assert [user["name"] for user in response.json()] == ["Alex"]

    def test_delete_cascades_to_children(self, client, auth_headers):
        user = create_portfolio_user(client, auth_headers)
        create_project(client, auth_headers, user["id"])
        create_skill(client, auth_headers, user["id"])
        assert len(client.get("/projects").json()) == 1

        response = client.delete(f"/portfolio-users/{user['id']}", headers=auth_headers)

        assert response.status_code == 204
        assert client.get("/projects").json() == []
        assert client.get("/skills").json() == []
        assert client.get(f"/skills/by-user/{user['id']}").status_code == 404

    def test_statistics(self, client, auth_headers):
        user = create_portfolio_user(client, auth_headers)
        create_project(client, auth_headers, user["id"])
        create_skill(client, auth_headers, user["id"])

        overall = client.get("/portfolio-users/statistics").json()
        own = client.get(f"/portfolio-users/{user['id']}/statistics").json()

        assert overall == {"totalPortfolioUsers": 1, "totalProjects": 1, "totalSkills": 1}
        assert own["projectCount"] == 1
        assert own["skillsByLevel"] == [{"level": "Intermediate", "count": 1}]


class TestProjects:
    def test_owner_listing_reflects_create(self, client, auth_headers):
        user = create_portfolio_user(client, auth_headers)
        assert client.get(f"/projects/by-user/{user['id']}").json() == []

        project = create_project(client, auth_headers, user["id"])

        listed = client.get(f"/portfolio-users/{user['id']}/projects").json()
        assert [p["id"] for p in listed] == [project["id"]]
        assert listed[0]["portfolioUserId"] == user["id"]

    def test_unknown_owner_is_404(self, client, auth_headers):
        response = client.post(
            "/projects",
            json={"title": "Orphan", "description": "none", "portfolioUserId": 77},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Portfolio user with ID 77 not found."}

    def test_listing_is_cached_and_invalidated(self, client, auth_headers):
        cache = client.app.state.cache
        user = create_portfolio_user(client, auth_headers)
        project = create_project(client, auth_headers, user["id"])

        client.get("/projects")
        client.get("/projects/statistics")
        assert "all_projects" in cache
        assert "projects_statistics" in cache

        response = client.delete(f"/projects/{project['id']}", headers=auth_headers)

        assert response.status_code == 204
        assert "all_projects" not in cache
        assert "projects_statistics" not in cache
        assert client.get("/projects").json() == []

    def test_stale_version_is_409(self, client, auth_headers):
        user = create_portfolio_user(client, auth_headers)
        project = create_project(client, auth_headers, user["id"])
        payload = {
            "id": project["id"],
            "title": "Renamed",
            "description": "Manage tasks.",
            "portfolioUserId": user["id"],
            "version": project["version"],
        }

        first = client.put(f"/projects/{project['id']}", json=payload, headers=auth_headers)
        second = client.put(f"/projects/{project['id']}", json=payload, headers=auth_headers)

        assert first.status_code == 200
        assert second.status_code == 409

    def test_search_filters_by_owner(self, client, auth_headers):
        alex = create_portfolio_user(client, auth_headers, name="Alex")
        sam = create_portfolio_user(client, auth_headers, name="Sam")
        create_project(client, auth_headers, alex["id"], title="Weather App")
        create_project(client, auth_headers, sam["id"], title="Weather Station")

        response = client.get(
            "/projects/search", params={"title": "weather", "portfolioUserId": sam["id"]}
        )

        assert [p["title"] for p in response.json()] == ["Weather Station"]

    def test_statistics_shape(self, client, auth_headers):
        user = create_portfolio_user(client, auth_headers)
        create_project(client, auth_headers, user["id"])

        stats = client.get("/projects/statistics").json()

        assert stats == {
            "totalProjects": 1,
            "totalUsers": 1,
            "averageProjectsPerUser": 1.0,
            "projectsByUser": [{"portfolioUserId": user["id"], "count": 1}],
        }


class TestSkills:
    def test_alex_adds_go_twice(self, client, auth_headers):
        alex = create_portfolio_user(client, auth_headers, name="Alex")

        first = create_skill(client, auth_headers, alex["id"], name="Go", level="Intermediate")
        second = create_skill(client, auth_headers, alex["id"], name="go", level="Expert")

        assert first.status_code == 201
        assert second.status_code == 409
        assert "Use PUT to update the skill level." in second.json()["message"]
        skills = client.get(f"/skills/by-user/{alex['id']}").json()
        assert [(s["name"], s["level"]) for s in skills] == [("Go", "Intermediate")]

    def test_invalid_level_is_400(self, client, auth_headers):
        user = create_portfolio_user(client, auth_headers)

        created = create_skill(client, auth_headers, user["id"], level="Wizard")
        by_level = client.get("/skills/by-level/Wizard")

        assert created.status_code == 400
        assert by_level.status_code == 400

    def test_by_level_and_search(self, client, auth_headers):
        user = create_portfolio_user(client, auth_headers)
        create_skill(client, auth_headers, user["id"], name="Go", level="Expert")
        create_skill(client, auth_headers, user["id"], name="Django", level="Beginner")

        experts = client.get("/skills/by-level/expert").json()
        found = client.get("/skills/search", params={"name": "JAN", "level": "beginner"}).json()

        assert [s["name"] for s in experts] == ["Go"]
        assert [s["name"] for s in found] == ["Django"]

    def test_statistics_totals(self, client, auth_headers):
        alex = create_portfolio_user(client, auth_headers, name="Alex")
        sam = create_portfolio_user(client, auth_headers, name="Sam")
        create_skill(client, auth_headers, alex["id"], name="Go")
        create_skill(client, auth_headers, sam["id"], name="Go", level="Expert")
        create_skill(client, auth_headers, sam["id"], name="SQL", level="Expert")

        stats = client.get("/skills/statistics").json()

        assert stats["totalSkills"] == 3
        assert stats["totalSkills"] == sum(o["count"] for o in stats["skillsByUser"])
        assert stats["averageSkillsPerUser"] == 1.5
        assert stats["mostPopularSkills"][0] == {"skillName": "Go", "count": 2}


class TestSeed:
    def test_seed_once_as_admin(self, client, admin_headers):
        first = client.post("/seed", headers=admin_headers)
        second = client.post("/seed", headers=admin_headers)

        assert first.status_code == 200
        assert second.status_code == 400
        assert second.json() == {"message": "Sample data already exists."}
        users = client.get("/portfolio-users").json()
        assert users[0]["name"] == "Jordan Developer"
        assert len(users[0]["projects"]) == 2
        assert users[0]["accountId"] is not None

    def test_plain_user_cannot_seed(self, client, auth_headers):
        response = client.post("/seed", headers=auth_headers)

        assert response.status_code == 403
        assert response.json() == {"message": "Insufficient permissions."}
        assert client.get("/portfolio-users").json() == []

    def test_admin_role_is_reported(self, client, admin_headers):
        response = client.get("/auth/me", headers=admin_headers)

        assert response.json()["roles"] == ["user", "Admin"]
