import uuid

import pytest


# --- helpers ---

async def _create_author(client, name="J.R.R. Tolkien"):
    resp = await client.post("/api/authors", json={"name": name})
    assert resp.status_code == 201
    return resp.json()


async def _create_book(client, author_id, title="The Hobbit", isbn="978-0345339683"):
    resp = await client.post("/api/books", json={"title": title, "author_id": author_id, "isbn": isbn})
    assert resp.status_code == 201
    return resp.json()


# --- authors ---

@pytest.mark.asyncio
async def test_create_and_list_authors(client):
    author = await _create_author(client)
    assert author["name"] == "J.R.R. Tolkien"
    uuid.UUID(author["id"])

    resp = await client.get("/api/authors")
    assert resp.status_code == 200
    page = resp.json()
    assert page["total_elements"] == 1
    assert page["total_pages"] == 1
    assert page["page"] == 0
    assert page["content"] == [author]


@pytest.mark.asyncio
async def test_get_author(client):
    author = await _create_author(client)
    resp = await client.get(f"/api/authors/{author['id']}")
    assert resp.status_code == 200
    assert resp.json() == author


@pytest.mark.asyncio
async def test_author_not_found(client):
    missing = uuid.uuid4()
    resp = await client.get(f"/api/authors/{missing}")
    assert resp.status_code == 404
    body = resp.json()
    assert body["code"] == "NOT_FOUND"
    assert body["detail"] == f"Author not found with id: {missing}"


@pytest.mark.asyncio
async def test_create_author_blank_name(client):
    resp = await client.post("/api/authors", json={"name": "   "})
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["errors"] == {"name": "Author name is required"}


@pytest.mark.asyncio
async def test_create_author_missing_body_field(client):
    resp = await client.post("/api/authors", json={})
    assert resp.status_code == 400
    assert "name" in resp.json()["errors"]


@pytest.mark.asyncio
async def test_update_author(client):
    author = await _create_author(client, "Frank Herbret")
    resp = await client.put(f"/api/authors/{author['id']}", json={"name": "Frank Herbert"})
    assert resp.status_code == 200
    assert resp.json() == {"id": author["id"], "name": "Frank Herbert"}


@pytest.mark.asyncio
async def test_delete_author(client):
    author = await _create_author(client, "Temp")
    resp = await client.delete(f"/api/authors/{author['id']}")
    assert resp.status_code == 204

    resp = await client.get(f"/api/authors/{author['id']}")
    assert resp.status_code == 404

    resp = await client.delete(f"/api/authors/{author['id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_author_with_books(client):
    author = await _create_author(client)
    await _create_book(client, author["id"])

    resp = await client.delete(f"/api/authors/{author['id']}")
    assert resp.status_code == 409
    assert resp.json()["code"] == "RESOURCE_IN_USE"


@pytest.mark.asyncio
async def test_list_authors_filter_and_paging(client):
    for name in ("Terry Pratchett", "Terry Goodkind", "Neil Gaiman"):
        await _create_author(client, name)

    resp = await client.get("/api/authors", params={"name": "terry", "size": 1, "page": 1})
    page = resp.json()
    assert page["total_elements"] == 2
    assert page["total_pages"] == 2
    assert [a["name"] for a in page["content"]] == ["Terry Pratchett"]

    resp = await client.get("/api/authors", params={"sort": "name,desc"})
    assert [a["name"] for a in resp.json()["content"]] == ["Terry Pratchett", "Terry Goodkind", "Neil Gaiman"]


@pytest.mark.asyncio
async def test_list_authors_bad_paging(client):
    resp = await client.get("/api/authors", params={"page": -1})
    assert resp.status_code == 400
    assert "page" in resp.json()["errors"]

    resp = await client.get("/api/authors", params={"sort": "id,sideways"})
    assert resp.status_code == 400
    assert "sort" in resp.json()["errors"]

    resp = await client.get("/api/authors", params={"sort": "isbn"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_invalid_id_in_path(client):
    resp = await client.get("/api/authors/not-a-uuid")
    assert resp.status_code == 400
    assert "author_id" in resp.json()["errors"]


# --- books ---

@pytest.mark.asyncio
async def test_catalog_scenario(client):
    author = await _create_author(client)
    book = await _create_book(client, author["id"])
    assert book["author"] == author
    assert book["isbn"] == "978-0345339683"

    # same ISBN, different title and author
    other = await _create_author(client, "Someone Else")
    resp = await client.post(
        "/api/books", json={"title": "Not The Hobbit", "author_id": other["id"], "isbn": "978-0345339683"}
    )
    assert resp.status_code == 409
    assert resp.json()["detail"] == "A book with ISBN 978-0345339683 already exists."

    missing = str(uuid.uuid4())
    resp = await client.post("/api/books", json={"title": "Orphan", "author_id": missing, "isbn": "978-0000000009"})
    assert resp.status_code == 404
    assert missing in resp.json()["detail"]

    resp = await client.put(
        f"/api/books/{book['id']}",
        json={"title": "The Hobbit", "author_id": author["id"], "isbn": "978-0345339683"},
    )
    assert resp.status_code == 200
    assert resp.json()["id"] == book["id"]


@pytest.mark.asyncio
async def test_get_book(client):
    author = await _create_author(client)
    book = await _create_book(client, author["id"])

    resp = await client.get(f"/api/books/{book['id']}")
    assert resp.status_code == 200
    assert resp.json() == book


@pytest.mark.asyncio
async def test_book_not_found(client):
    resp = await client.get(f"/api/books/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.json()["detail"].startswith("Book not found with id: ")


@pytest.mark.asyncio
async def test_create_book_invalid_fields(client):
    author = await _create_author(client)
    resp = await client.post("/api/books", json={"title": "A", "author_id": author["id"], "isbn": "123"})
    assert resp.status_code == 400
    errors = resp.json()["errors"]
    assert set(errors) == {"title", "isbn"}


@pytest.mark.asyncio
async def test_update_book_duplicate_isbn(client):
    author = await _create_author(client)
    await _create_book(client, author["id"], "The Hobbit", "0-345-33968-x")
    second = await _create_book(client, author["id"], "The Silmarillion", "978-0618391110")

    resp = await client.put(
        f"/api/books/{second['id']}",
        json={"title": "The Silmarillion", "author_id": author["id"], "isbn": "0-345-33968-X"},
    )
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_delete_book(client):
    author = await _create_author(client)
    book = await _create_book(client, author["id"])

    resp = await client.delete(f"/api/books/{book['id']}")
    assert resp.status_code == 204

    resp = await client.get(f"/api/books/{book['id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_search_books_by_title(client):
    author = await _create_author(client, "Frank Herbert")
    await _create_book(client, author["id"], "Dune", "978-0441013593")
    await _create_book(client, author["id"], "Dune Messiah", "978-0593098233")
    await _create_book(client, author["id"], "1984", "978-0451524935")

    resp = await client.get("/api/books", params={"title": "dune"})
    assert resp.status_code == 200
    results = resp.json()["content"]
    assert len(results) == 2
    assert all("Dune" in b["title"] for b in results)

    resp = await client.get("/api/books", params={"title": "1984"})
    assert resp.json()["total_elements"] == 1


@pytest.mark.asyncio
async def test_huge_page_number_is_rejected(client):
    await _create_author(client)
    for path in ("/api/authors", "/api/books"):
        resp = await client.get(path, params={"page": 10**19})
        assert resp.status_code == 400
        assert "page" in resp.json()["errors"]


@pytest.mark.asyncio
async def test_list_authors_accented_filter(client):
    await _create_author(client, "Gabriel García Márquez")
    await _create_author(client, "Émile Zola")

    resp = await client.get("/api/authors", params={"name": "GARCÍA"})
    assert [a["name"] for a in resp.json()["content"]] == ["Gabriel García Márquez"]


@pytest.mark.asyncio
async def test_openapi_documents_error_bodies(client):
    resp = await client.get("/openapi.json")
    assert resp.status_code == 200
    spec = resp.json()

    create_book = spec["paths"]["/api/books"]["post"]
    assert create_book["summary"] == "Create a new book"
    assert {"400", "404", "409"} <= set(create_book["responses"])
    schema_ref = create_book["responses"]["409"]["content"]["application/json"]["schema"]["$ref"]
    assert schema_ref.endswith("/ErrorResponse")

    delete_author = spec["paths"]["/api/authors/{author_id}"]["delete"]
    assert delete_author["summary"] == "Delete an author"
    assert "409" in delete_author["responses"]
    assert set(spec["components"]["schemas"]["ErrorResponse"]["properties"]) == {"detail", "code", "errors"}
