"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

# Header band colour, matches the window accent
_BAND = "#0078D4"
_FONTS = ("segoeuib.ttf", "DejaVuSans-Bold.ttf", "Arial Bold.ttf")


def _load_font(size: int) -> ImageFont.ImageFont:
    for name in _FONTS:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def create_icon_image(day: date | None = None, size: int = 64) -> Image.Image:
    """Return a square RGBA calendar-sheet icon showing the day of month."""
    day = day or date.today()
    text = str(day.day)
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    band_h = size // 5
    draw.rectangle((0, 0, size - 1, band_h), fill=_BAND)
    draw.rectangle((0, 0, size - 1, size - 1), outline="black")

    # Largest font that fits below the band
    avail_h = size - band_h - 4
    font_size = size
    font = _load_font(font_size)
    while font_size > 8:
        font = _load_font(font_size)
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size - 4 and bbox[3] - bbox[1] <= avail_h:
            break
        font_size -= 1

    # Centre the visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = band_h + (size - band_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
