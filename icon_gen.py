"""Generate the calendar-button glyph (square PIL Image, in-memory)."""

from PIL import Image, ImageDraw, ImageFont

HEADER_FG = "#CC0000"


def _fit_font(draw: ImageDraw.ImageDraw, text: str, box_w: int, box_h: int):
    """Return the largest truetype font whose *text* fits the box."""
    font_size = box_h * 2
    font = None
    while font_size > 6:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            return ImageFont.load_default()
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= box_w and bbox[3] - bbox[1] <= box_h:
            break
        font_size -= 1
    return font


def create_calendar_icon(day: int, size: int = 24) -> Image.Image:
    """Return a *size*×*size* RGBA calendar page showing *day*.

    A red band across the top stands for the binding; the day number is
    centred in the remaining page area.
    """
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    edge = max(1, size // 16)
    band = max(2, size // 4)
    draw.rectangle((0, 0, size - 1, size - 1), fill="white", outline="black", width=edge)
    draw.rectangle((0, 0, size - 1, band), fill=HEADER_FG, outline="black", width=edge)

    text = str(day)
    page_h = size - band - 2 * edge
    font = _fit_font(draw, text, size - 4 * edge, page_h)

    # Centre the visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = band + (size - band - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
