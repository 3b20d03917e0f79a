"""Tests for errand requests.

Completion is an UPDATE and the UPDATE policy is owner-only, so both the
helper path and the owner path are exercised explicitly.
"""

GROCERIES = {
    "title": "Groceries",
    "description": "Milk and bread",
    "pickup_location": "Campus Market",
    "delivery_location": "Dorm C",
    "reward": "a coffee",
}


def _post(client, prefix, user, body=GROCERIES):
    response = client.post(f"{prefix}/errands", json=body, headers=user.headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateErrand:
    def test_create(self, test_client, store, alice, api_v1_prefix):
        errand = _post(test_client, api_v1_prefix, alice)

        assert errand["status"] == "open"
        assert errand["reward"] == "a coffee"
        assert "origin=Campus%20Market" in errand["directions_url"]
        assert store.rows("activity_logs", entity_id=errand["id"])[0]["details"] == {"title": "Groceries"}

    def test_fields_are_trimmed_and_blanks_dropped(self, test_client, alice, api_v1_prefix):
        body = {**GROCERIES, "title": "  Books  ", "reward": "   ", "description": ""}
        errand = _post(test_client, api_v1_prefix, alice, body)

        assert errand["title"] == "Books"
        assert errand["reward"] is None
        assert errand["description"] is None

    def test_blank_required_field_rejected(self, test_client, alice, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/errands", json={**GROCERIES, "pickup_location": "   "}, headers=alice.headers
        )
        assert response.status_code == 422

    def test_reward_is_free_text(self, test_client, alice, api_v1_prefix):
        errand = _post(test_client, api_v1_prefix, alice, {**GROCERIES, "reward": "$5-ish, or snacks"})
        assert errand["reward"] == "$5-ish, or snacks"


class TestListErrands:
    def test_everyone_sees_every_errand(self, test_client, alice, bob, api_v1_prefix):
        _post(test_client, api_v1_prefix, alice)
        _post(test_client, api_v1_prefix, bob, {**GROCERIES, "title": "Laundry"})

        titles = [e["title"] for e in test_client.get(f"{api_v1_prefix}/errands", headers=bob.headers).json()]

        assert titles == ["Laundry", "Groceries"]

    def test_status_filter(self, test_client, alice, api_v1_prefix):
        done = _post(test_client, api_v1_prefix, alice)
        _post(test_client, api_v1_prefix, alice, {**GROCERIES, "title": "Stamps"})
        test_client.post(f"{api_v1_prefix}/errands/{done['id']}/complete", headers=alice.headers)

        open_titles = [
            e["title"] for e in test_client.get(f"{api_v1_prefix}/errands?status=open", headers=alice.headers).json()
        ]
        assert open_titles == ["Stamps"]


class TestCompleteErrand:
    def test_helper_who_is_not_owner_is_refused(self, test_client, store, alice, bob, api_v1_prefix):
        errand = _post(test_client, api_v1_prefix, alice)

        response = test_client.post(f"{api_v1_prefix}/errands/{errand['id']}/complete", headers=bob.headers)

        assert response.status_code == 403
        row = store.rows("errand_requests")[0]
        assert row["status"] == "open"
        assert row["completed_by"] is None

    def test_owner_can_complete_own_errand(self, test_client, alice, api_v1_prefix):
        errand = _post(test_client, api_v1_prefix, alice)

        response = test_client.post(f"{api_v1_prefix}/errands/{errand['id']}/complete", headers=alice.headers)

        assert response.status_code == 200
        assert response.json()["status"] == "completed"
        assert response.json()["completed_by"] == alice.id
        assert response.json()["completed_at"] is not None


class TestMutateErrand:
    def test_owner_updates(self, test_client, alice, api_v1_prefix):
        errand = _post(test_client, api_v1_prefix, alice)
        response = test_client.put(
            f"{api_v1_prefix}/errands/{errand['id']}", json={"reward": "lunch"}, headers=alice.headers
        )
        assert response.status_code == 200
        assert response.json()["reward"] == "lunch"

    def test_non_owner_cannot_delete(self, test_client, store, alice, bob, api_v1_prefix):
        errand = _post(test_client, api_v1_prefix, alice)
        url = f"{api_v1_prefix}/errands/{errand['id']}"

        assert test_client.delete(url, headers=bob.headers).status_code == 403
        assert test_client.delete(url, headers=alice.headers).status_code == 204
        assert store.rows("errand_requests") == []

    def test_null_for_required_field_rejected(self, test_client, store, alice, api_v1_prefix):
        errand = _post(test_client, api_v1_prefix, alice)

        response = test_client.put(
            f"{api_v1_prefix}/errands/{errand['id']}", json={"title": None}, headers=alice.headers
        )

        assert response.status_code == 422
        assert store.rows("errand_requests", id=errand["id"])[0]["title"] == "Groceries"

    def test_null_clears_optional_field(self, test_client, alice, api_v1_prefix):
        errand = _post(test_client, api_v1_prefix, alice)

        response = test_client.put(
            f"{api_v1_prefix}/errands/{errand['id']}", json={"reward": None}, headers=alice.headers
        )

        assert response.status_code == 200
        assert response.json()["reward"] is None


class TestListErrandPaging:
    def test_negative_offset_rejected(self, test_client, alice, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/errands?offset=-1", headers=alice.headers)
        assert response.status_code == 422

    def test_oversized_limit_rejected(self, test_client, alice, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/errands?limit=1000", headers=alice.headers)
        assert response.status_code == 422
