import io
import os
import numpy as np
import pytest
from PIL import Image
from conftest import checkerboard


def _open_png(res):
    assert res.status_code == 200
    assert res.mimetype == "image/png"
    return np.array(Image.open(io.BytesIO(res.data)))


def test_index(client):
    res = client.get("/")
    assert res.status_code == 200
    assert b"Drop" in res.data


def test_upload_rejects_bad_extension(client):
    res = client.post("/upload",
                      data={"image": (io.BytesIO(b"x"), "notes.txt")},
                      content_type="multipart/form-data")
    assert res.status_code == 400


def test_upload_missing_part(client):
    assert client.post("/upload", data={}, content_type="multipart/form-data").status_code == 400


def test_spectrum_preview(client, upload):
    name = upload(checkerboard(8))
    out = _open_png(client.post("/apply/spectrum", json={"filename": name}))
    assert out.shape == (8, 8)
    assert out[2, 2] == 255 and out[6, 6] == 255
    assert out[4, 4] == 0


def test_luminance_preview(client, upload):
    name = upload(checkerboard(8))
    out = _open_png(client.post("/apply/luminance", json={"filename": name}))
    assert out.shape == (8, 8)
    assert set(np.unique(out)) == {0, 255}


def test_non_power_of_two_reports_status(client, upload):
    name = upload(np.zeros((6, 10, 3), dtype=np.uint8))
    res = client.post("/apply/spectrum", json={"filename": name})
    assert res.status_code == 400
    body = res.get_json()
    assert body["ok"] is False
    assert "power of two" in body["error"]


def test_undecodable_upload(client, upload):
    name = upload(b"definitely not a png", name="broken.png")
    res = client.post("/apply/spectrum", json={"filename": name})
    assert res.status_code == 400
    assert res.get_json()["ok"] is False


def test_missing_and_invalid_files(client):
    assert client.post("/apply/spectrum", json={"filename": "nope.png"}).status_code == 404
    assert client.post("/apply/spectrum", json={"filename": "nope.exe"}).status_code == 400
    assert client.post("/apply/spectrum", json={}).status_code == 400


def test_save_spectrum(app, client, upload):
    name = upload(checkerboard(8))
    res = client.post("/save", json={"filename": name, "op": "spectrum", "display_scale": 32})
    assert res.status_code == 200
    body = res.get_json()
    assert body["ok"] is True
    saved = os.path.basename(body["result_url"])
    assert saved.startswith("spectrum_s32_")
    assert os.path.exists(os.path.join(app.config["RESULT_DIR"], saved))


def test_save_unknown_op(client, upload):
    name = upload(checkerboard(8))
    assert client.post("/save", json={"filename": name, "op": "blur"}).status_code == 400


def test_display_scale_is_clamped(client, upload):
    name = upload(checkerboard(8))
    res = client.post("/save", json={"filename": name, "op": "spectrum", "display_scale": 1e9})
    assert os.path.basename(res.get_json()["result_url"]).startswith("spectrum_s1024_")


def test_null_display_scale_uses_default(client, upload):
    name = upload(checkerboard(8))
    out = _open_png(client.post("/apply/spectrum", json={"filename": name, "display_scale": None}))
    assert out[2, 2] == 255 and out[4, 4] == 0

    res = client.post("/save", json={"filename": name, "op": "spectrum", "display_scale": None})
    assert os.path.basename(res.get_json()["result_url"]).startswith("spectrum_s64_")


@pytest.mark.parametrize("scale", [{"x": 1}, [32], True, "nan", "wide"])
def test_bad_display_scale_reports_status(client, upload, scale):
    name = upload(checkerboard(8))
    for url, body in (("/apply/spectrum", {}), ("/save", {"op": "spectrum"})):
        res = client.post(url, json={"filename": name, "display_scale": scale, **body})
        assert res.status_code == 400
        assert res.get_json()["ok"] is False
        assert "display_scale" in res.get_json()["error"] or "float" in res.get_json()["error"]


@pytest.mark.parametrize("body", [["x"], "spectrum.png", 7])
def test_non_object_json_body(client, body):
    assert client.post("/apply/spectrum", json=body).status_code == 400
    assert client.post("/apply/luminance", json=body).status_code == 400
    assert client.post("/save", json=body).status_code == 400


def test_non_string_fields(client, upload):
    name = upload(checkerboard(8))
    assert client.post("/apply/spectrum", json={"filename": 12}).status_code == 400
    assert client.post("/save", json={"filename": name, "op": 3}).status_code == 400
