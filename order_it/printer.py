"""Printer sinks that accept a finished Receipt."""
import logging
import unicodedata
from pathlib import Path

from . import config

logger = logging.getLogger(__name__)

RECEIPT_WIDTH = 32  # columns on a 58mm roll

_ORDER_TYPE_LABELS = {
    "DINE_IN": "DINE-IN",
    "TAKE_OUT": "TAKE-OUT",
}

_LEFT_INDENT_PX = 8
_RIGHT_GUTTER_PX = 8
_ROW_EXTRA_PX = 10
_RULE = "-"
_KOREAN_FONT_FALLBACKS = (
    "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc",
    "/usr/share/fonts/noto-cjk/NotoSansCJK-Regular.ttc",
    "/usr/share/fonts/truetype/nanum/NanumGothic.ttf",
    "/usr/share/fonts/nanum/NanumGothic.ttf",
    "/System/Library/Fonts/AppleSDGothicNeo.ttc",
    "C:/Windows/Fonts/malgun.ttf",
)


def display_width(text):
    """Printed columns of text; wide (Hangul, CJK) characters take two."""
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


def _row(left, right, width=RECEIPT_WIDTH):
    gap = max(1, width - display_width(left) - display_width(right))
    return f"{left}{' ' * gap}{right}"


def receipt_rows(receipt):
    """(left, right) pairs in print order. A row of `_RULE` is a separator."""
    rows = [(_ORDER_TYPE_LABELS.get(receipt.order_type.value, receipt.order_type.value), ""), (_RULE, "")]
    for line in receipt.lines:
        rows.append((f"{line.name} x{line.quantity}", f"{line.price:,}"))
    rows.append((_RULE, ""))
    rows.append(("TOTAL", f"{receipt.total_price:,}"))
    return rows


def render_receipt_lines(receipt, width=RECEIPT_WIDTH):
    """Lay out a receipt as plain text rows for a fixed-width printer."""
    lines = []
    for left, right in receipt_rows(receipt):
        if left == _RULE:
            lines.append(_RULE * width)
        elif right:
            lines.append(_row(left, right, width))
        else:
            lines.append(left)
    return lines


def resolve_printer_font_path():
    """PRINTER_FONT_PATH if set, otherwise the first known Korean font on this machine."""
    candidates = [config.PRINTER_FONT_PATH] if config.PRINTER_FONT_PATH else []
    candidates.extend(_KOREAN_FONT_FALLBACKS)
    for candidate in candidates:
        if Path(candidate).is_file():
            return candidate
    raise RuntimeError(
        f"No printer font with Hangul glyphs found. Set PRINTER_FONT_PATH. Tried: {', '.join(candidates)}"
    )


def render_row(left, right, font, width_px=None):
    """Draw one receipt row as a 1-bit image: left text indented, right text flush right."""
    from PIL import Image, ImageDraw

    width_px = width_px or config.PRINTER_WIDTH_PX
    probe = ImageDraw.Draw(Image.new("1", (1, 1), color=1))
    left_box = probe.textbbox((0, 0), left or " ", font=font)
    height = max(12, left_box[3] - left_box[1] + _ROW_EXTRA_PX)

    img = Image.new("1", (width_px, height), color=1)
    draw = ImageDraw.Draw(img)
    if left == _RULE:
        y = height // 2
        draw.rectangle((0, y - 1, width_px - 1, y), fill=0)
        return img

    # offset by bbox top so descenders are not clipped
    y = (height - (left_box[3] - left_box[1])) // 2 - left_box[1]
    draw.text((_LEFT_INDENT_PX, y), left, font=font, fill=0)
    if right:
        right_box = draw.textbbox((0, 0), right, font=font)
        x = width_px - _RIGHT_GUTTER_PX - (right_box[2] - right_box[0]) - right_box[0]
        draw.text((x, y), right, font=font, fill=0)
    return img


class LogPrinter:
    """Writes the receipt to the log instead of paper."""

    def send(self, receipt):
        for row in render_receipt_lines(receipt):
            logger.info("%s", row)
        return True


class EscposPrinter:
    """ESC/POS thermal printer over USB or the network via python-escpos.

    Rows are sent as raster images, so Hangul item names print with any
    code page the printer happens to have.
    """

    def __init__(self, kind="usb", vendor_id=None, product_id=None, host=None, port=None):
        self.kind = kind
        self.vendor_id = vendor_id if vendor_id is not None else config.PRINTER_USB_VENDOR_ID
        self.product_id = product_id if product_id is not None else config.PRINTER_USB_PRODUCT_ID
        self.host = host or config.PRINTER_HOST
        self.port = port or config.PRINTER_PORT

    def _connect(self):
        try:
            from escpos.printer import Network, Usb
        except Exception as exc:
            raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc

        if self.kind == "network":
            return Network(self.host, port=self.port)
        return Usb(self.vendor_id, self.product_id)

    def _load_font(self, size):
        from PIL import ImageFont

        return ImageFont.truetype(resolve_printer_font_path(), size)

    def send(self, receipt):
        font = self._load_font(config.PRINTER_FONT_SIZE)
        header_font = self._load_font(config.PRINTER_FONT_SIZE * 3 // 2)
        rows = receipt_rows(receipt)

        device = self._connect()
        try:
            for index, (left, right) in enumerate(rows):
                device.image(render_row(left, right, header_font if index == 0 else font))
            device.cut()
        finally:
            device.close()
        return True


def create_printer(kind=None):
    kind = kind or config.PRINTER_KIND
    if kind == "log":
        return LogPrinter()
    if kind in ("usb", "network"):
        return EscposPrinter(kind=kind)
    raise RuntimeError(f"Unknown PRINTER_KIND '{kind}'. Use log, usb or network.")
