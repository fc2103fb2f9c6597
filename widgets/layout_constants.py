SPACING = 10


font_size = 14


def get_font_size():
    return font_size
