import io
import numpy as np
from PIL import Image

def allowed(filename: str, allowed_exts: set) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in allowed_exts

def pil_to_bytes(pil_img: Image.Image, fmt="PNG") -> io.BytesIO:
    buf = io.BytesIO()
    pil_img.save(buf, format=fmt)
    buf.seek(0)
    return buf

def to_numpy_pixels(pil_img: Image.Image) -> np.ndarray:
    """HxWx3 or HxWx4 uint8; palette/gray/etc. are expanded to RGB."""
    if pil_img.mode not in ("RGB", "RGBA"):
        pil_img = pil_img.convert("RGB")
    return np.array(pil_img, dtype=np.uint8)

def load_pixels(path: str) -> np.ndarray:
    with Image.open(path) as pil_img:
        return to_numpy_pixels(pil_img)

def field_to_pil(field: np.ndarray, white_level: float = 1.0) -> Image.Image:
    """
    Single-channel float field -> 8-bit gray, the way a float texture shows:
    values clamp to [0, white_level] before scaling to 0..255.
    """
    white_level = float(white_level)
    norm = np.clip(np.asarray(field, dtype=np.float64), 0.0, white_level) / white_level
    return Image.fromarray(np.round(norm * 255.0).astype(np.uint8))
