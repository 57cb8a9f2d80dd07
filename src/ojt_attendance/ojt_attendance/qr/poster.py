"""Attendance QR payload plus the printable poster built around it."""

from __future__ import annotations

import io
import json
from typing import Optional

import qrcode
from PIL import Image, ImageDraw, ImageFont

from ..core.constants import QR_SESSION_ID, QR_TYPE, SHIFT_END, SHIFT_START
from ..core.exceptions import ValidationError

POSTER_SIZE = (1240, 1754)  # A4 at 150 dpi
_BORDER = 40


def qr_payload(session_id: str = QR_SESSION_ID) -> str:
    return json.dumps({"sessionId": session_id, "type": QR_TYPE})


def parse_qr_payload(text: Optional[str]) -> str:
    """Validate scanned QR text and return its session id."""

    try:
        data = json.loads(text or "")
    except (TypeError, ValueError):
        raise ValidationError("Invalid QR code format") from None

    if not isinstance(data, dict) or not data.get("sessionId") or data.get("type") != QR_TYPE:
        raise ValidationError("Invalid QR code format")
    return str(data["sessionId"])


def make_qr_image(payload: str, *, box_size: int = 20, border: int = 2) -> Image.Image:
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(payload)
    qr.make(fit=True)
    return qr.make_image(fill_color="black", back_color="white").convert("RGB")


def to_png_bytes(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def _font(size: int):
    try:
        return ImageFont.load_default(size=size)
    except TypeError:
        # Pillow < 10.1 has no sized default font.
        return ImageFont.load_default()


def _centered(draw: ImageDraw.ImageDraw, y: int, text: str, size: int, width: int) -> int:
    font = _font(size)
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    draw.text(((width - (right - left)) // 2, y), text, fill="black", font=font)
    return y + (bottom - top) + size // 2


def shift_schedule_line() -> str:
    return f"Shift Schedule: {SHIFT_START.strftime('%I:%M %p')} - {SHIFT_END.strftime('%I:%M %p')}"


def build_poster(office_ssid: str, *, payload: Optional[str] = None) -> Image.Image:
    width, height = POSTER_SIZE
    poster = Image.new("RGB", POSTER_SIZE, "white")
    draw = ImageDraw.Draw(poster)
    draw.rectangle([_BORDER // 2, _BORDER // 2, width - _BORDER // 2, height - _BORDER // 2], outline="black", width=_BORDER // 2)

    y = 140
    y = _centered(draw, y, "OJT PORTAL", 110, width)
    y = _centered(draw, y, "ATTENDANCE GATEWAY", 48, width)
    draw.line([(200, y), (width - 200, y)], fill="black", width=4)
    y += 60

    qr_img = make_qr_image(payload or qr_payload())
    qr_img = qr_img.resize((720, 720), Image.NEAREST)
    poster.paste(qr_img, ((width - qr_img.width) // 2, y))
    y += qr_img.height + 60

    y = _centered(draw, y, "SCAN TO LOGIN/LOGOUT", 64, width)
    y = _centered(draw, y, f"WIFI: {office_ssid}".upper(), 48, width)
    _centered(draw, y, shift_schedule_line().upper(), 36, width)
    return poster
