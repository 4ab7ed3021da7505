# order_it/config.py
import os

from dotenv import load_dotenv

# load .env
load_dotenv()

DB_URL = os.getenv("DB_URL")
if not DB_URL:
    raise RuntimeError("DB_URL is not set. Check your '.env' file.")

# CA bundle for MySQL over TLS (Azure etc.). Empty means no TLS args.
DB_SSL_CA = os.getenv("DB_SSL_CA", "")

IMAGE_DIR = os.getenv("IMAGE_DIR", "images")

# log | usb | network
PRINTER_KIND = os.getenv("PRINTER_KIND", "log")
PRINTER_USB_VENDOR_ID = int(os.getenv("PRINTER_USB_VENDOR_ID", "0x0525"), 16)
PRINTER_USB_PRODUCT_ID = int(os.getenv("PRINTER_USB_PRODUCT_ID", "0xA700"), 16)
PRINTER_HOST = os.getenv("PRINTER_HOST", "192.168.0.100")
PRINTER_PORT = int(os.getenv("PRINTER_PORT", "9100"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]

# Pixel rendering for ESC/POS. Needs a font with Hangul glyphs.
PRINTER_FONT_PATH = os.getenv("PRINTER_FONT_PATH", "")
PRINTER_FONT_SIZE = int(os.getenv("PRINTER_FONT_SIZE", "24"))
PRINTER_WIDTH_PX = int(os.getenv("PRINTER_WIDTH_PX", "384"))  # 58mm roll
