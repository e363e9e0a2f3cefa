from volunease.db import BANNER_IMAGES


def test_first_read_seeds_dark_theme(client, mongo_db):
    response = client.get("/api/user-preference/u1")

    assert response.status_code == 200
    assert response.json() == {"_id": "u1", "uid": "u1", "theme": "dark"}
    assert mongo_db["userPreferences"].count_documents({"_id": "u1"}) == 1


def test_upsert_preference(client, login):
    login("u1")

    created = client.post("/api/user-preference", json={"uid": "u1", "theme": "light"})
    assert created.status_code == 200
    assert created.json()["upsertedId"] == "u1"

    updated = client.post("/api/user-preference", json={"uid": "u1", "theme": "dark", "fontSize": "lg"})
    assert updated.json()["matchedCount"] == 1

    pref = client.get("/api/user-preference/u1").json()
    assert pref["theme"] == "dark"
    assert pref["fontSize"] == "lg"


def test_upsert_preference_for_another_user_is_forbidden(client, login):
    login("u2")
    response = client.post("/api/user-preference", json={"uid": "u1", "theme": "light"})
    assert response.status_code == 403


def test_banner_images(client, mongo_db):
    mongo_db[BANNER_IMAGES].insert_many([{"title": "One"}, {"title": "Two"}])

    banners = client.get("/api/banner-images").json()

    assert [b["title"] for b in banners] == ["One", "Two"]
    assert all(isinstance(b["_id"], str) for b in banners)
