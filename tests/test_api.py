"""End-to-end tests for the HTTP API."""
from urllib.parse import quote

import pytest

import routes
from paths import PathTranslator


def image_url(path, kind="image"):
    return f"/api/{kind}/" + quote(str(path), safe="")


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "message": "Server is running!"}


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "LoRA Tagger" in res.text
    assert "/static/app.js" in res.text


def test_static_assets_are_served(client):
    assert client.get("/static/app.js").status_code == 200
    assert client.get("/static/app.css").status_code == 200


# ============== list-directory ==============

def test_list_directory(client, dataset):
    res = client.post("/api/list-directory", json={"directoryPath": str(dataset)})
    assert res.status_code == 200
    body = res.json()
    assert body["currentPath"] == str(dataset)
    assert body["parentPath"] == str(dataset.parent)
    assert body["directories"] == [{"name": "sub", "path": str(dataset / "sub")}]


def test_list_directory_requires_path(client):
    res = client.post("/api/list-directory", json={})
    assert res.status_code == 400
    assert res.json() == {"error": "Directory path is required"}


def test_list_directory_not_found(client, tmp_path):
    res = client.post("/api/list-directory", json={"directoryPath": str(tmp_path / "nope")})
    assert res.status_code == 404
    assert res.json() == {"error": "Directory not found"}


def test_list_directory_not_a_directory(client, dataset):
    res = client.post("/api/list-directory", json={"directoryPath": str(dataset / "a.png")})
    assert res.status_code == 400
    assert res.json() == {"error": "Path is not a directory"}


# ============== scan-directory ==============

def test_scan_directory(client, dataset):
    res = client.post("/api/scan-directory", json={"directoryPath": str(dataset)})
    assert res.status_code == 200
    [image] = res.json()["images"]
    assert image == {
        "id": str(dataset / "a.png"),
        "name": "a.png",
        "path": str(dataset / "a.png"),
        "relativePath": str(dataset / "a.png"),
        "tags": ["cat", "grey"],
        "textFilePath": str(dataset / "a.txt"),
        "width": 64,
        "height": 32,
        "directory": str(dataset),
    }


def test_scan_directory_with_subfolders(client, dataset):
    res = client.post(
        "/api/scan-directory",
        json={"directoryPath": str(dataset), "includeSubfolders": True},
    )
    names = sorted(img["name"] for img in res.json()["images"])
    assert names == ["a.png", "b.png"]


def test_scan_omits_missing_dimensions(client, tmp_path):
    (tmp_path / "broken.png").write_bytes(b"garbage")
    [image] = client.post("/api/scan-directory", json={"directoryPath": str(tmp_path)}).json()["images"]
    assert "width" not in image
    assert "height" not in image


@pytest.mark.parametrize("body,status", [
    ({}, 400),
    ({"directoryPath": ""}, 400),
])
def test_scan_directory_requires_path(client, body, status):
    res = client.post("/api/scan-directory", json=body)
    assert res.status_code == status
    assert res.json() == {"error": "Directory path is required"}


def test_scan_directory_errors(client, dataset):
    res = client.post("/api/scan-directory", json={"directoryPath": str(dataset / "missing")})
    assert res.status_code == 404
    res = client.post("/api/scan-directory", json={"directoryPath": str(dataset / "a.png")})
    assert res.status_code == 400


def test_scan_remembers_last_directory(client, dataset):
    client.post("/api/scan-directory", json={"directoryPath": str(dataset), "includeSubfolders": True})
    page = client.get("/").text
    assert f'value="{dataset}"' in page
    assert "checked" in page


def test_scan_with_path_translation(client, dataset, monkeypatch):
    monkeypatch.setattr(routes, "translator", PathTranslator("/Users/me", str(dataset.parent)))

    res = client.post("/api/scan-directory", json={"directoryPath": "/Users/me/set1"})

    [image] = res.json()["images"]
    assert image["id"] == "/Users/me/set1/a.png"
    assert image["textFilePath"] == "/Users/me/set1/a.txt"
    assert image["directory"] == "/Users/me/set1"


def test_tilde_expands_to_user_home(client, dataset, monkeypatch):
    monkeypatch.setattr(routes, "translator", PathTranslator("/Users/me", str(dataset.parent)))

    res = client.post("/api/list-directory", json={"directoryPath": "~/set1"})

    assert res.status_code == 200
    assert res.json()["currentPath"] == "/Users/me/set1"
    assert res.json()["directories"] == [{"name": "sub", "path": "/Users/me/set1/sub"}]


# ============== images ==============

def test_serve_image(client, dataset):
    res = client.get(image_url(dataset / "a.png"))
    assert res.status_code == 200
    assert res.headers["content-type"] == "image/png"
    assert res.content == (dataset / "a.png").read_bytes()


def test_serve_image_not_found(client, dataset):
    assert client.get(image_url(dataset / "missing.png")).status_code == 404
    # sidecars and other files are not served
    assert client.get(image_url(dataset / "a.txt")).status_code == 404


def test_thumbnail(client, dataset):
    res = client.get(image_url(dataset / "a.png", "thumb") + "?w=32")
    assert res.status_code == 200
    assert res.headers["content-type"] == "image/jpeg"


def test_thumbnail_falls_back_to_original(client, tmp_path):
    broken = tmp_path / "broken.png"
    broken.write_bytes(b"garbage")
    res = client.get(image_url(broken, "thumb"))
    assert res.status_code == 200
    assert res.content == b"garbage"


def test_thumbnail_width_is_bounded(client, dataset):
    res = client.get(image_url(dataset / "a.png", "thumb") + "?w=5")
    assert res.status_code == 400
    assert "error" in res.json()


# ============== update-tags ==============

def test_update_tags(client, dataset):
    res = client.post(
        "/api/update-tags",
        json={"textFilePath": str(dataset / "a.txt"), "tags": ["grey", " cat ", ""]},
    )
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Tags updated successfully"}
    assert (dataset / "a.txt").read_text(encoding="utf-8") == "grey, cat"


def test_update_tags_requires_path(client):
    res = client.post("/api/update-tags", json={"tags": ["cat"]})
    assert res.status_code == 400
    assert res.json() == {"error": "Text file path is required"}


def test_update_tags_requires_tags(client, dataset):
    res = client.post("/api/update-tags", json={"textFilePath": str(dataset / "a.txt")})
    assert res.status_code == 400
    assert "tags" in res.json()["error"]
    assert (dataset / "a.txt").read_text(encoding="utf-8") == "cat, grey"


def test_update_tags_accepts_empty_list(client, dataset):
    res = client.post("/api/update-tags", json={"textFilePath": str(dataset / "a.txt"), "tags": []})
    assert res.status_code == 200
    assert (dataset / "a.txt").read_text(encoding="utf-8") == ""


def test_update_tags_write_failure(client, tmp_path):
    res = client.post(
        "/api/update-tags",
        json={"textFilePath": str(tmp_path / "missing" / "a.txt"), "tags": ["cat"]},
    )
    assert res.status_code == 500
    assert res.json() == {"error": "Failed to update tags"}


# ============== selection ==============

@pytest.fixture
def selected(tmp_path):
    files = {}
    for image_id, text in {"A": "x, y", "B": "x", "C": "x, y, z"}.items():
        path = tmp_path / f"{image_id}.txt"
        path.write_text(text, encoding="utf-8")
        files[image_id] = path
    images = [
        {"id": "A", "textFilePath": str(files["A"]), "tags": ["x", "y"]},
        {"id": "B", "textFilePath": str(files["B"]), "tags": ["x"]},
        {"id": "C", "textFilePath": str(files["C"]), "tags": ["x", "y", "z"]},
    ]
    return images, files


def test_analyze_selection(client, selected):
    images, _files = selected
    res = client.post("/api/selection/analyze", json={"images": images})
    assert res.status_code == 200
    assert res.json() == {
        "tags": [
            {"tag": "x", "count": 3, "isCommon": True},
            {"tag": "y", "count": 2, "isCommon": False},
            {"tag": "z", "count": 1, "isCommon": False},
        ],
        "totalImages": 3,
    }


def test_toggle_common_tag(client, selected):
    images, files = selected
    res = client.post("/api/selection/toggle-tag", json={"images": images, "tag": "x"})
    body = res.json()
    assert body["success"] is True
    assert body["failed"] == []
    assert {u["id"]: u["tags"] for u in body["updated"]} == {"A": ["y"], "B": [], "C": ["y", "z"]}
    assert files["B"].read_text(encoding="utf-8") == ""
    assert files["C"].read_text(encoding="utf-8") == "y, z"


def test_toggle_partial_tag_only_writes_changed_images(client, selected):
    images, files = selected
    res = client.post("/api/selection/toggle-tag", json={"images": images, "tag": "y"})
    assert res.json()["updated"] == [{"id": "B", "tags": ["x", "y"]}]
    assert files["B"].read_text(encoding="utf-8") == "x, y"
    assert files["A"].read_text(encoding="utf-8") == "x, y"


def test_add_tag_to_selection(client, selected):
    images, files = selected
    res = client.post("/api/selection/add-tag", json={"images": images, "tag": "new"})
    assert res.json()["success"] is True
    assert files["A"].read_text(encoding="utf-8") == "x, y, new"


def test_add_tag_requires_tag(client, selected):
    images, _files = selected
    res = client.post("/api/selection/add-tag", json={"images": images, "tag": "  "})
    assert res.status_code == 400
    assert res.json() == {"error": "Tag is required"}


def test_toggle_requires_tag(client, selected):
    images, _files = selected
    assert client.post("/api/selection/toggle-tag", json={"images": images}).status_code == 400


def test_partial_failure_is_reported(client, selected, tmp_path):
    images, files = selected
    images[1]["textFilePath"] = str(tmp_path / "gone" / "B.txt")

    res = client.post("/api/selection/add-tag", json={"images": images, "tag": "new"})

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is False
    assert [f["id"] for f in body["failed"]] == ["B"]
    assert sorted(u["id"] for u in body["updated"]) == ["A", "C"]
    assert body["message"] == "Failed to save tags for 1 of 3 images"
    assert files["C"].read_text(encoding="utf-8") == "x, y, z, new"


# ============== malformed requests ==============

@pytest.mark.parametrize("url", ["/api/scan-directory", "/api/list-directory", "/api/update-tags"])
def test_missing_body_is_a_400(client, url):
    res = client.post(url)
    assert res.status_code == 400
    assert res.json()["error"].startswith("Invalid request")


def test_non_json_body_is_a_400(client):
    res = client.post(
        "/api/scan-directory",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert set(res.json()) == {"error"}
