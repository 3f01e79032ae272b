# Display colors derived from the secret (title, favicon-style swatch)

# "#" glyph drawn on a 16x16 canvas
HASH_PATH = (
    "M8.54762 13L10.5476 3H11.7381L9.7381 13H8.54762ZM3 10.2266L3.19048 "
    "9.25H12.2857L12.0952 10.2266H3ZM4.2619 13L6.2619 3H7.45238L5.45238 "
    "13H4.2619ZM3.71429 6.75L3.90476 5.77344H13L12.8095 6.75H3.71429Z"
)


def display_color(secret: str) -> str:
    """'a1b2c3' -> '#a1b2c3'."""
    return "#" + secret.lstrip("#").lower()


def contrast_color(color: str) -> str:
    """
    Pick black or white text for a background color.

    Uses YIQ perceived brightness; bright colors get black text.

    Args:
        color (str): '#rrggbb' or 'rrggbb'.

    Returns:
        str: '#000000' or '#ffffff'.
    """
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a 6-digit hex color, got '{color}'.")
    r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    yiq = (r * 299 + g * 587 + b * 114) / 1000
    return "#000000" if yiq >= 128 else "#ffffff"


def swatch_svg(color: str, contrast: str = None, size: int = 16) -> str:
    contrast = contrast or contrast_color(color)
    return (
        f'<svg width="{size}" height="{size}" viewBox="0 0 16 16" '
        f'xmlns="http://www.w3.org/2000/svg">'
        f'<rect width="16" height="16" fill="{color}" />'
        f'<path d="{HASH_PATH}" fill="{contrast}" />'
        f"</svg>"
    )
