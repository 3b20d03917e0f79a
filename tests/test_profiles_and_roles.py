"""Tests for the profile self-service and role read endpoints."""


class TestProfile:
    def test_get_own_profile(self, test_client, alice, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/profiles/me", headers=alice.headers)

        assert response.status_code == 200
        assert response.json()["user_id"] == alice.id
        assert response.json()["name"] == "Alice"
        assert response.json()["email"] == alice.email

    def test_update_name_and_avatar(self, test_client, store, alice, api_v1_prefix):
        response = test_client.put(
            f"{api_v1_prefix}/profiles/me",
            json={"name": "  Alice L. ", "avatar_url": "https://cdn.campus.edu/a.png"},
            headers=alice.headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Alice L."
        assert response.json()["avatar_url"] == "https://cdn.campus.edu/a.png"
        assert store.rows("activity_logs", entity_type="profile")[0]["details"] == {"fields": ["avatar_url", "name"]}

    def test_profile_update_cannot_touch_roles(self, test_client, store, alice, api_v1_prefix):
        """Extra fields such as a role are ignored; privilege lives only in user_roles."""
        test_client.put(
            f"{api_v1_prefix}/profiles/me", json={"name": "Alice", "role": "admin"}, headers=alice.headers
        )

        assert "role" not in store.rows("profiles", user_id=alice.id)[0]
        assert [r["role"] for r in store.rows("user_roles", user_id=alice.id)] == ["user"]

    def test_empty_update_is_a_no_op(self, test_client, store, alice, api_v1_prefix):
        response = test_client.put(f"{api_v1_prefix}/profiles/me", json={}, headers=alice.headers)

        assert response.status_code == 200
        assert store.rows("activity_logs", entity_type="profile") == []


class TestRoles:
    def test_user_sees_own_default_role(self, test_client, alice, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/roles/me", headers=alice.headers)

        assert response.status_code == 200
        assert [r["role"] for r in response.json()] == ["user"]

    def test_admin_sees_both_roles(self, test_client, admin, api_v1_prefix):
        roles = test_client.get(f"{api_v1_prefix}/roles/me", headers=admin.headers).json()
        assert sorted(r["role"] for r in roles) == ["admin", "user"]

    def test_no_role_write_routes(self, test_client, alice, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/roles/me", json={"role": "admin"}, headers=alice.headers
        )
        assert response.status_code == 405
