import pytest


@pytest.mark.django_db
def test_health_reports_vod_store(client):
    resp = client.get("/health/")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "components": {"vod_store": "ok"}}


@pytest.mark.django_db
def test_admin_lists_vods(admin_client, make_vod):
    make_vod(pieces=["https://cdn.example.com/a.mp4"])
    resp = admin_client.get("/admin/vods_app/vod/")
    assert resp.status_code == 200


@pytest.mark.django_db
def test_admin_change_page_shows_pieces_inline(admin_client, make_vod):
    vod = make_vod(pieces=["https://cdn.example.com/inline.mp4"])
    resp = admin_client.get(f"/admin/vods_app/vod/{vod.id}/change/")
    assert resp.status_code == 200
    assert b"https://cdn.example.com/inline.mp4" in resp.content
