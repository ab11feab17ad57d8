def test_helloworld_returns_json(client):
    resp = client.get("/helloworld")
    assert resp.status_code == 200
    assert resp.json() == {"hello": "world"}


def test_root_returns_plain_text(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "hello world"
    assert resp.headers["content-type"].startswith("text/plain")
