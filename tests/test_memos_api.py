def _create(client, **kw):
    body = {"title": "Groceries", "content": "- milk\n- eggs", **kw}
    r = client.post("/memos", json=body)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_defaults(client):
    m = _create(client)
    assert m["category"] == "personal"
    assert m["tags"] == []
    assert m["summary"] is None
    assert len(m["id"]) == 32


def test_create_rejects_blank_and_unknown_category(client):
    assert client.post("/memos", json={"title": "", "content": "x"}).status_code == 422
    assert client.post("/memos", json={"title": "  ", "content": "x"}).status_code == 422
    assert client.post("/memos", json={"title": "x", "content": ""}).status_code == 422
    assert client.post("/memos", json={"title": "x", "content": "y", "category": "misc"}).status_code == 422


def test_create_dedupes_tags(client):
    m = _create(client, tags=["a", " a ", "b", ""])
    assert m["tags"] == ["a", "b"]


def test_get_patch_delete(client):
    m = _create(client)
    assert client.get(f"/memos/{m['id']}").json()["title"] == "Groceries"

    r = client.patch(f"/memos/{m['id']}", json={"category": "work", "tags": ["shop"]})
    assert r.status_code == 200
    body = r.json()
    assert body["category"] == "work" and body["tags"] == ["shop"]
    assert body["title"] == "Groceries"  # untouched

    assert client.delete(f"/memos/{m['id']}").status_code == 204
    assert client.get(f"/memos/{m['id']}").status_code == 404
    assert client.delete(f"/memos/{m['id']}").status_code == 404
    assert client.patch(f"/memos/{m['id']}", json={"title": "x"}).status_code == 404


def test_list_search_and_category_filter(client):
    _create(client, title="Standup", content="notes", category="work", tags=["Team"])
    _create(client, title="Recipe", content="Pasta with TEAM sauce", category="personal")
    _create(client, title="Idea", content="app", category="idea", tags=["startup"])

    r = client.get("/memos").json()
    assert len(r["items"]) == 3
    assert r["stats"] == {"total": 3, "by_category": {"work": 1, "personal": 1, "idea": 1}, "filtered": 3}

    r = client.get("/memos", params={"q": "team"}).json()
    assert {m["title"] for m in r["items"]} == {"Standup", "Recipe"}
    assert r["stats"]["filtered"] == 2

    r = client.get("/memos", params={"q": "team", "category": "work"}).json()
    assert [m["title"] for m in r["items"]] == ["Standup"]

    r = client.get("/memos", params={"q": "START"}).json()
    assert [m["title"] for m in r["items"]] == ["Idea"]


def test_list_newest_first(client):
    _create(client, title="first")
    _create(client, title="second")
    titles = [m["title"] for m in client.get("/memos").json()["items"]]
    assert titles == ["second", "first"]


def test_stats_and_delete_all(client):
    _create(client, category="study")
    _create(client, category="study")
    assert client.get("/memos/stats").json() == {"total": 2, "by_category": {"study": 2}, "filtered": 2}

    r = client.delete("/memos")
    assert r.status_code == 200 and r.json()["data"] == {"deleted": 2}
    assert client.get("/memos").json()["items"] == []


def test_list_unknown_category_is_422(client):
    _create(client)
    r = client.get("/memos", params={"category": "misc"})
    assert r.status_code == 422
    assert client.get("/memos", params={"category": "all"}).status_code == 200
