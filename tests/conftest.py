import io
import numpy as np
import pytest
from PIL import Image
from app import create_app


def checkerboard(size: int = 8, block: int = 2) -> np.ndarray:
    """size x size RGB uint8, alternating 0/255 blocks of block x block pixels."""
    y, x = np.mgrid[:size, :size]
    on = ((y // block + x // block) % 2).astype(np.uint8) * 255
    return np.repeat(on[..., None], 3, axis=2)


def png_bytes(pixels: np.ndarray) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(pixels).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "UPLOAD_DIR": str(tmp_path / "uploads"),
        "RESULT_DIR": str(tmp_path / "results"),
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def upload(client):
    """Upload pixels (or raw bytes) and return the stored filename."""
    def _upload(pixels, name="img.png"):
        raw = pixels if isinstance(pixels, bytes) else png_bytes(pixels)
        res = client.post("/upload",
                          data={"image": (io.BytesIO(raw), name)},
                          content_type="multipart/form-data")
        assert res.status_code == 200
        return res.get_json()["filename"]
    return _upload
