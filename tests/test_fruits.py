"""Fruit API tests."""

import pytest


def create_fruit(client, headers, **overrides):
    payload = {"name": "Apple", "color": "red", **overrides}
    response = client.post("/api/fruits", headers=headers, json=payload)
    assert response.status_code == 201
    return response.json()


def test_create_fruit(client, auth_headers):
    """Test creating a fruit."""
    response = client.post(
        "/api/fruits",
        headers=auth_headers,
        json={"name": "Apple", "color": "red", "ready_to_eat": True},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Apple"
    assert data["ready_to_eat"] is True
    assert data["owner_id"] == auth_headers.user_id


def test_create_ignores_client_owner(client, auth_headers, other_auth_headers):
    """The owner is always the caller, whatever the body says."""
    data = create_fruit(client, auth_headers, owner_id=other_auth_headers.user_id, id=999)
    assert data["owner_id"] == auth_headers.user_id
    assert data["id"] != 999


def test_create_missing_required_field(client, auth_headers):
    """Test that validation errors are client errors."""
    response = client.post("/api/fruits", headers=auth_headers, json={"name": "Apple"})
    assert response.status_code == 400


@pytest.mark.parametrize(
    ("submitted", "stored"),
    [("on", True), (True, True), ("off", False), ("true", False), (False, False), (None, False)],
)
def test_create_checkbox_coercion(client, auth_headers, submitted, stored):
    """Test that only "on" and a real true store a ticked box."""
    data = create_fruit(client, auth_headers, ready_to_eat=submitted)
    assert data["ready_to_eat"] is stored


def test_list_fruits(client, auth_headers):
    """Test listing the caller's fruits, newest first."""
    create_fruit(client, auth_headers, name="Apple")
    create_fruit(client, auth_headers, name="Banana", color="yellow")

    response = client.get("/api/fruits", headers=auth_headers)
    assert response.status_code == 200
    assert [f["name"] for f in response.json()] == ["Banana", "Apple"]


def test_list_is_scoped_to_owner(client, auth_headers, other_auth_headers):
    """Test that another user's fruits are not listed."""
    create_fruit(client, auth_headers, name="Apple")

    response = client.get("/api/fruits", headers=other_auth_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_list_search(client, auth_headers):
    """Test case-insensitive search over name and color."""
    create_fruit(client, auth_headers, name="Apple", color="red")
    create_fruit(client, auth_headers, name="Banana", color="yellow")
    create_fruit(client, auth_headers, name="Cherry", color="Dark Red")

    response = client.get("/api/fruits", headers=auth_headers, params={"search": "RED"})
    assert sorted(f["name"] for f in response.json()) == ["Apple", "Cherry"]


def test_get_fruit(client, auth_headers):
    """Test getting a specific fruit."""
    fruit = create_fruit(client, auth_headers)

    response = client.get(f"/api/fruits/{fruit['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["name"] == "Apple"


def test_get_missing_fruit(client, auth_headers):
    """Test that an unknown id is a 404."""
    response = client.get("/api/fruits/12345", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.parametrize("fruit_id", ["99999999999999999999", "2147483648", "0", "-1"])
def test_out_of_range_id_is_missing(client, auth_headers, fruit_id):
    """Ids the database cannot store are reported as not found."""
    url = f"/api/fruits/{fruit_id}"

    assert client.get(url, headers=auth_headers).status_code == 404
    assert client.put(url, headers=auth_headers, json={"color": "blue"}).status_code == 404
    assert client.delete(url, headers=auth_headers).status_code == 404


def test_update_fruit_partial(client, auth_headers):
    """Updating one field leaves the others alone."""
    fruit = create_fruit(client, auth_headers, ready_to_eat=True)

    response = client.put(
        f"/api/fruits/{fruit['id']}", headers=auth_headers, json={"color": "green"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["color"] == "green"
    assert data["name"] == "Apple"
    assert data["ready_to_eat"] is True


def test_update_fruit_idempotent(client, auth_headers):
    """Test that applying the same update twice gives the same state."""
    fruit = create_fruit(client, auth_headers)
    url = f"/api/fruits/{fruit['id']}"

    first = client.put(url, headers=auth_headers, json={"name": "Pear", "ready_to_eat": "on"})
    second = client.put(url, headers=auth_headers, json={"name": "Pear", "ready_to_eat": "on"})

    for key in ("id", "owner_id", "name", "color", "ready_to_eat"):
        assert first.json()[key] == second.json()[key]
    assert second.json()["ready_to_eat"] is True


def test_update_checkbox_off(client, auth_headers):
    """Test that any non-"on" value unticks the box."""
    fruit = create_fruit(client, auth_headers, ready_to_eat=True)

    response = client.put(
        f"/api/fruits/{fruit['id']}", headers=auth_headers, json={"ready_to_eat": "off"}
    )
    assert response.json()["ready_to_eat"] is False


def test_update_cannot_change_owner(client, auth_headers, other_auth_headers):
    """Test that protected fields are not writable through update."""
    fruit = create_fruit(client, auth_headers)

    response = client.put(
        f"/api/fruits/{fruit['id']}",
        headers=auth_headers,
        json={"owner_id": other_auth_headers.user_id, "id": 999, "name": "Pear"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["owner_id"] == auth_headers.user_id
    assert data["id"] == fruit["id"]
    assert data["name"] == "Pear"


def test_update_missing_fruit(client, auth_headers):
    """Test updating an unknown id."""
    response = client.put("/api/fruits/12345", headers=auth_headers, json={"name": "Pear"})
    assert response.status_code == 404


def test_delete_fruit(client, auth_headers):
    """Test deleting a fruit."""
    fruit = create_fruit(client, auth_headers)

    response = client.delete(f"/api/fruits/{fruit['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Fruit successfully deleted"

    response = client.get(f"/api/fruits/{fruit['id']}", headers=auth_headers)
    assert response.status_code == 404

    lists = client.get("/api/fruits", headers=auth_headers).json()
    assert lists == []


def test_delete_missing_fruit(client, auth_headers):
    """Test deleting an unknown id."""
    response = client.delete("/api/fruits/12345", headers=auth_headers)
    assert response.status_code == 404


def test_other_user_can_reach_fruit_by_id(client, auth_headers, other_auth_headers):
    """Show/update/delete do not check ownership unless enforcement is on."""
    fruit = create_fruit(client, auth_headers)

    response = client.get(f"/api/fruits/{fruit['id']}", headers=other_auth_headers)
    assert response.status_code == 200

    response = client.put(
        f"/api/fruits/{fruit['id']}", headers=other_auth_headers, json={"color": "blue"}
    )
    assert response.status_code == 200
    assert response.json()["owner_id"] == auth_headers.user_id


def test_enforced_ownership_hides_other_users_fruit(
    client, auth_headers, other_auth_headers, use_settings
):
    """With enforcement on, another user's fruit looks missing."""
    use_settings(enforce_resource_ownership=True)
    fruit = create_fruit(client, auth_headers)
    url = f"/api/fruits/{fruit['id']}"

    assert client.get(url, headers=other_auth_headers).status_code == 404
    assert client.put(url, headers=other_auth_headers, json={"name": "X"}).status_code == 404
    assert client.delete(url, headers=other_auth_headers).status_code == 404

    assert client.get(url, headers=auth_headers).status_code == 200
