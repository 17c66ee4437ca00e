# routes/spectrum.py
from flask import Blueprint, render_template, request, jsonify, send_file, url_for, current_app
from PIL import UnidentifiedImageError
import math, os, uuid
from spectral.errors import SpectrumError
from spectral.luminance import to_luminance
from spectral.pipeline import on_file_dropped
from utils.imaging import allowed, field_to_pil, load_pixels, pil_to_bytes

bp = Blueprint("spectrum", __name__)

OPS = ("spectrum", "luminance")

def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}

def _display_scale(data: dict) -> float:
    """Requested scale clamped to DISPLAY_SCALE_RANGE; missing or null means the default."""
    lo, hi = current_app.config["DISPLAY_SCALE_RANGE"]
    raw = data.get("display_scale")
    if raw is None:
        return float(current_app.config["DISPLAY_SCALE"])
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"display_scale must be a number, got {raw!r}")
    scale = float(raw)
    if not math.isfinite(scale):
        raise ValueError(f"display_scale must be finite, got {raw!r}")
    return max(lo, min(hi, scale))

def _source_path(filename):
    """Returns (path, None) or (None, error response)."""
    if not isinstance(filename, str) or not filename \
            or not allowed(filename, current_app.config["ALLOWED_EXTS"]):
        return None, ("Invalid filename", 400)
    src_path = os.path.join(current_app.config["UPLOAD_DIR"], os.path.basename(filename))
    if not os.path.exists(src_path):
        return None, ("File not found", 404)
    return src_path, None

def _render(op: str, src_path: str, data: dict):
    """Run `op` on the image at src_path; returns a PIL image and a filename suffix."""
    if op == "spectrum":
        scale = _display_scale(data)
        run = on_file_dropped(src_path, display_scale=scale,
                              workers=current_app.config["FFT_WORKERS"],
                              method=current_app.config["FFT_METHOD"])
        return field_to_pil(run.display), f"spectrum_s{scale:.0f}"
    if op == "luminance":
        return field_to_pil(to_luminance(load_pixels(src_path))), "luminance"
    raise ValueError(f"unknown op {op!r}")

def _failure(err: Exception, status: int = 400):
    current_app.logger.warning("spectrum run aborted: %s", err)
    return jsonify({"ok": False, "error": str(err)}), status

@bp.get("/")
def index():
    return render_template("index.html")

@bp.post("/upload")
def upload():
    if "image" not in request.files:
        return "No file part", 400
    f = request.files["image"]
    if f.filename == "" or not allowed(f.filename, current_app.config["ALLOWED_EXTS"]):
        return "Invalid file", 400

    ext = f.filename.rsplit(".", 1)[1].lower()
    file_id = f"{uuid.uuid4().hex}.{ext}"
    save_path = os.path.join(current_app.config["UPLOAD_DIR"], file_id)
    f.save(save_path)
    current_app.logger.info("stored upload %s as %s", f.filename, file_id)

    return jsonify({
        "ok": True,
        "filename": file_id,
        "url": url_for("static", filename=f"uploads/{file_id}")
    })

# -------- APPLY ENDPOINTS --------

def _preview(op: str):
    data = _json_body()
    src_path, err = _source_path(data.get("filename"))
    if err:
        return err
    try:
        out_pil, _ = _render(op, src_path, data)
    except (SpectrumError, UnidentifiedImageError, ValueError) as e:
        return _failure(e)
    return send_file(pil_to_bytes(out_pil, fmt="PNG"),
                     mimetype="image/png",
                     as_attachment=False,
                     download_name="preview.png")

@bp.post("/apply/spectrum")
def apply_spectrum():
    return _preview("spectrum")

@bp.post("/apply/luminance")
def apply_luminance():
    return _preview("luminance")

# -------- SAVE --------

@bp.post("/save")
def save_result():
    """
    op: "spectrum" (optional display_scale) or "luminance"
    Writes the rendered PNG into RESULT_DIR.
    """
    data = _json_body()
    op = data.get("op")
    op = op.lower().strip() if isinstance(op, str) else ""
    if op not in OPS:
        return "Unknown op", 400
    src_path, err = _source_path(data.get("filename"))
    if err:
        return err

    try:
        out_pil, suffix = _render(op, src_path, data)
    except (SpectrumError, UnidentifiedImageError, ValueError) as e:
        return _failure(e)

    out_name = f"{suffix}_{uuid.uuid4().hex}.png"
    out_path = os.path.join(current_app.config["RESULT_DIR"], out_name)
    out_pil.save(out_path, format="PNG")
    current_app.logger.info("saved %s", out_name)

    return jsonify({
        "ok": True,
        "result_url": url_for("static", filename=f"results/{out_name}", _external=False)
    })
