"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

from prayer_schedule import target_minutes

ICON_SIZE = 64


def icon_text(today: date | None = None) -> str:
    """Today's target minutes, or "-" when nothing is scheduled."""
    minutes = target_minutes(today or date.today())
    return str(minutes) if minutes > 0 else "-"


def create_icon_image(today: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA image: white target minutes on the accent colour."""
    size = ICON_SIZE
    img = Image.new("RGBA", (size, size), "#0078D4")
    draw = ImageDraw.Draw(img)
    text = icon_text(today)

    # Find the largest font size that fits the icon
    font_size = 120
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("segoeuib.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        tw = bbox[2] - bbox[0]
        th = bbox[3] - bbox[1]
        if tw <= size - 4 and th <= size - 4:
            break
        font_size -= 1

    # Centre the actual visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = (size - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="white", font=font)

    return img


def tray_title(today: date | None = None) -> str:
    minutes = target_minutes(today or date.today())
    if minutes:
        return f"Prayer Calendar - today {minutes} min"
    return "Prayer Calendar"


def refresh_tray(icon, today: date | None = None) -> None:
    """Redraw the tray image and tooltip for *today*, e.g. after a Sunday passes."""
    icon.icon = create_icon_image(today)
    icon.title = tray_title(today)
