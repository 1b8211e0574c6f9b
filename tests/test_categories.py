"""Category API tests."""

from todo_api.models.category import Category


def test_create_category(client):
    """Test creating a category."""
    response = client.post("/categories", json={"name": "Work"})
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Work"
    assert data["todos"] == []
    assert response.headers["location"] == f"/categories/{data['id']}"


def test_create_category_requires_name(client):
    """Test a category without a name is rejected."""
    response = client.post("/categories", json={})
    assert response.status_code == 400


def test_create_category_with_todos(client):
    """Test todos sent with a new category are created and stamped by the server."""
    response = client.post(
        "/categories",
        json={
            "name": "Home",
            "todos": [
                {
                    "title": "Fix tap",
                    "content": "Kitchen sink",
                    "dueDate": "2025-02-01T09:00:00Z",
                    "isCompleted": True,
                },
                {"title": "Book dentist", "content": "Check-up", "dueDate": "2025-03-01T09:00:00Z"},
            ],
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert [t["title"] for t in data["todos"]] == ["Fix tap", "Book dentist"]
    for todo in data["todos"]:
        assert todo["categoryId"] == data["id"]
        assert todo["isCompleted"] is False
        assert todo["isDeleted"] is False
        assert "category" not in todo

    todos = client.get("/todos").json()
    assert len(todos) == 2
    assert todos[0]["category"] == {"id": data["id"], "name": "Home"}


def test_get_categories(client, make_todo):
    """Test listing categories with their todos flattened."""
    todo = make_todo()
    client.post("/categories", json={"name": "Home"})

    response = client.get("/categories")
    assert response.status_code == 200
    data = response.json()
    assert [c["name"] for c in data] == ["Work", "Home"]
    assert [t["id"] for t in data[0]["todos"]] == [todo["id"]]
    assert data[0]["todos"][0]["title"] == "Write spec"
    assert "category" not in data[0]["todos"][0]
    assert data[1]["todos"] == []


def test_get_categories_excludes_deleted_todos(client, make_todo):
    """Test soft-deleted todos are left out of category listings."""
    kept = make_todo(title="Keep")
    gone = make_todo(title="Drop")
    client.delete(f"/todos/{gone['id']}")

    data = client.get("/categories").json()
    assert [t["id"] for t in data[0]["todos"]] == [kept["id"]]


def test_get_category(client, category, make_todo):
    """Test getting a category by id."""
    todo = make_todo()

    response = client.get(f"/categories/{category['id']}")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Work"
    assert data["todos"][0]["id"] == todo["id"]


def test_get_category_not_found(client):
    """Test getting a missing category."""
    response = client.get("/categories/999")
    assert response.status_code == 404
    assert response.content == b""


def test_update_category(client, category):
    """Test renaming a category."""
    response = client.put(f"/categories/{category['id']}", json={"name": "Office"})
    assert response.status_code == 204
    assert response.content == b""

    assert client.get(f"/categories/{category['id']}").json()["name"] == "Office"


def test_update_category_only_changes_name(client, category, make_todo):
    """Test todos sent with a rename are ignored."""
    make_todo()
    response = client.put(
        f"/categories/{category['id']}",
        json={"name": "Office", "todos": []},
    )
    assert response.status_code == 204
    assert len(client.get(f"/categories/{category['id']}").json()["todos"]) == 1


def test_update_category_not_found(client):
    """Test renaming a missing category."""
    response = client.put("/categories/999", json={"name": "Nope"})
    assert response.status_code == 404


def test_delete_category(client, category, db):
    """Test deleting an empty category returns the removed record."""
    response = client.delete(f"/categories/{category['id']}")
    assert response.status_code == 200
    assert response.json() == {"id": category["id"], "name": "Work", "todos": []}

    assert client.get(f"/categories/{category['id']}").status_code == 404
    assert db.query(Category).count() == 0


def test_delete_category_not_found(client):
    """Test deleting a missing category."""
    response = client.delete("/categories/999")
    assert response.status_code == 404


def test_delete_category_with_todos_is_refused(client, category, make_todo):
    """Test a category referenced by todos cannot be deleted."""
    make_todo()

    response = client.delete(f"/categories/{category['id']}")
    assert response.status_code == 409
    assert response.json()["detail"] == "Category has todos"
    assert client.get(f"/categories/{category['id']}").status_code == 200


def test_delete_category_with_only_deleted_todos_is_refused(client, category, make_todo):
    """Test soft-deleted todos still hold on to their category."""
    todo = make_todo()
    client.delete(f"/todos/{todo['id']}")

    response = client.delete(f"/categories/{category['id']}")
    assert response.status_code == 409


def test_category_ids_out_of_range(client, category):
    """Test ids beyond the integer column range are rejected before any query."""
    too_big = "99999999999999999999"

    assert client.get(f"/categories/{too_big}").status_code == 400
    assert client.put(f"/categories/{too_big}", json={"name": "Huge"}).status_code == 400
    assert client.delete(f"/categories/{too_big}").status_code == 400
    assert client.delete(f"/categories/{2**31}").status_code == 400
    assert client.get(f"/categories/{category['id']}").json()["name"] == "Work"


def test_create_category_attached_todo_category_out_of_range(client):
    """Test an oversized category id on an attached todo is rejected."""
    response = client.post(
        "/categories",
        json={
            "name": "Home",
            "todos": [
                {
                    "title": "Fix tap",
                    "content": "Kitchen sink",
                    "dueDate": "2025-02-01T09:00:00Z",
                    "categoryId": 99999999999999999999,
                }
            ],
        },
    )
    assert response.status_code == 400
    assert client.get("/categories").json() == []
