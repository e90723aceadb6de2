from __future__ import annotations

import io

import qrcode


def build_qr_png(data: str, *, box_size: int = 10, border: int = 2) -> bytes:
    """Render ``data`` as a black-on-white QR code PNG."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf)
    return buf.getvalue()
