"""Named RGBA colours; a colour is a Vector4 of (r, g, b, a)."""

from __future__ import annotations

from dgengine.vectors import Vector4

Color = Vector4

ALICE_BLUE = Vector4(0.941176534, 0.972549081, 1.0, 1.0)
ANTIQUE_WHITE = Vector4(0.980392218, 0.921568692, 0.843137324, 1.0)
AQUA = Vector4(0.0, 1.0, 1.0, 1.0)
AQUAMARINE = Vector4(0.498039246, 1.0, 0.831372619, 1.0)
AZURE = Vector4(0.941176534, 1.0, 1.0, 1.0)
BEIGE = Vector4(0.960784376, 0.960784376, 0.862745166, 1.0)
BISQUE = Vector4(1.0, 0.894117713, 0.768627524, 1.0)
BLACK = Vector4(0.0, 0.0, 0.0, 1.0)
BLANCHED_ALMOND = Vector4(1.0, 0.921568692, 0.803921640, 1.0)
BLUE = Vector4(0.0, 0.0, 1.0, 1.0)
BLUE_VIOLET = Vector4(0.541176498, 0.168627456, 0.886274576, 1.0)
BROWN = Vector4(0.647058845, 0.164705887, 0.164705887, 1.0)
BURLY_WOOD = Vector4(0.870588303, 0.721568644, 0.529411793, 1.0)
CADET_BLUE = Vector4(0.372549027, 0.619607866, 0.627451003, 1.0)
CHARTREUSE = Vector4(0.498039246, 1.0, 0.0, 1.0)
CHOCOLATE = Vector4(0.823529482, 0.411764741, 0.117647067, 1.0)
CORAL = Vector4(1.0, 0.498039246, 0.313725501, 1.0)
CORNFLOWER_BLUE = Vector4(0.392156899, 0.584313750, 0.929411829, 1.0)
CORNSILK = Vector4(1.0, 0.972549081, 0.862745166, 1.0)
CRIMSON = Vector4(0.862745166, 0.078431375, 0.235294133, 1.0)
CYAN = Vector4(0.0, 1.0, 1.0, 1.0)
DARK_BLUE = Vector4(0.0, 0.0, 0.545098066, 1.0)
DARK_CYAN = Vector4(0.0, 0.545098066, 0.545098066, 1.0)
DARK_GOLDENROD = Vector4(0.721568644, 0.525490224, 0.043137256, 1.0)
DARK_GRAY = Vector4(0.662745118, 0.662745118, 0.662745118, 1.0)
DARK_GREEN = Vector4(0.0, 0.392156899, 0.0, 1.0)
DARK_KHAKI = Vector4(0.741176486, 0.717647076, 0.419607878, 1.0)
DARK_MAGENTA = Vector4(0.545098066, 0.0, 0.545098066, 1.0)
DARK_OLIVE_GREEN = Vector4(0.333333343, 0.419607878, 0.184313729, 1.0)
DARK_ORANGE = Vector4(1.0, 0.549019635, 0.0, 1.0)
DARK_ORCHID = Vector4(0.600000024, 0.196078449, 0.800000072, 1.0)
DARK_RED = Vector4(0.545098066, 0.0, 0.0, 1.0)
DARK_SALMON = Vector4(0.913725555, 0.588235319, 0.478431404, 1.0)
DARK_SEA_GREEN = Vector4(0.560784340, 0.737254918, 0.545098066, 1.0)
DARK_SLATE_BLUE = Vector4(0.282352954, 0.239215702, 0.545098066, 1.0)
DARK_SLATE_GRAY = Vector4(0.184313729, 0.309803933, 0.309803933, 1.0)
DARK_TURQUOISE = Vector4(0.0, 0.807843208, 0.819607913, 1.0)
DARK_VIOLET = Vector4(0.580392182, 0.0, 0.827451050, 1.0)
DEEP_PINK = Vector4(1.0, 0.078431375, 0.576470613, 1.0)
DEEP_SKY_BLUE = Vector4(0.0, 0.749019623, 1.0, 1.0)
DIM_GRAY = Vector4(0.411764741, 0.411764741, 0.411764741, 1.0)
DODGER_BLUE = Vector4(0.117647067, 0.564705908, 1.0, 1.0)
FIREBRICK = Vector4(0.698039234, 0.133333340, 0.133333340, 1.0)
FLORAL_WHITE = Vector4(1.0, 0.980392218, 0.941176534, 1.0)
FOREST_GREEN = Vector4(0.133333340, 0.545098066, 0.133333340, 1.0)
FUCHSIA = Vector4(1.0, 0.0, 1.0, 1.0)
GAINSBORO = Vector4(0.862745166, 0.862745166, 0.862745166, 1.0)
GHOST_WHITE = Vector4(0.972549081, 0.972549081, 1.0, 1.0)
GOLD = Vector4(1.0, 0.843137324, 0.0, 1.0)
GOLDENROD = Vector4(0.854902029, 0.647058845, 0.125490203, 1.0)
GRAY = Vector4(0.501960814, 0.501960814, 0.501960814, 1.0)
GREEN = Vector4(0.0, 0.501960814, 0.0, 1.0)
GREEN_YELLOW = Vector4(0.678431392, 1.0, 0.184313729, 1.0)
HONEYDEW = Vector4(0.941176534, 1.0, 0.941176534, 1.0)
HOT_PINK = Vector4(1.0, 0.411764741, 0.705882370, 1.0)
INDIAN_RED = Vector4(0.803921640, 0.360784322, 0.360784322, 1.0)
INDIGO = Vector4(0.294117659, 0.0, 0.509803951, 1.0)
IVORY = Vector4(1.0, 1.0, 0.941176534, 1.0)
KHAKI = Vector4(0.941176534, 0.901960850, 0.549019635, 1.0)
LAVENDER = Vector4(0.901960850, 0.901960850, 0.980392218, 1.0)
LAVENDER_BLUSH = Vector4(1.0, 0.941176534, 0.960784376, 1.0)
LAWN_GREEN = Vector4(0.486274540, 0.988235354, 0.0, 1.0)
LEMON_CHIFFON = Vector4(1.0, 0.980392218, 0.803921640, 1.0)
LIGHT_BLUE = Vector4(0.678431392, 0.847058892, 0.901960850, 1.0)
LIGHT_CORAL = Vector4(0.941176534, 0.501960814, 0.501960814, 1.0)
LIGHT_CYAN = Vector4(0.878431439, 1.0, 1.0, 1.0)
LIGHT_GOLDENROD_YELLOW = Vector4(0.980392218, 0.980392218, 0.823529482, 1.0)
LIGHT_GREEN = Vector4(0.564705908, 0.933333397, 0.564705908, 1.0)
LIGHT_GRAY = Vector4(0.827451050, 0.827451050, 0.827451050, 1.0)
LIGHT_PINK = Vector4(1.0, 0.713725507, 0.756862819, 1.0)
LIGHT_SALMON = Vector4(1.0, 0.627451003, 0.478431404, 1.0)
LIGHT_SEA_GREEN = Vector4(0.125490203, 0.698039234, 0.666666687, 1.0)
LIGHT_SKY_BLUE = Vector4(0.529411793, 0.807843208, 0.980392218, 1.0)
LIGHT_SLATE_GRAY = Vector4(0.466666698, 0.533333361, 0.600000024, 1.0)
LIGHT_STEEL_BLUE = Vector4(0.690196097, 0.768627524, 0.870588303, 1.0)
LIGHT_YELLOW = Vector4(1.0, 1.0, 0.878431439, 1.0)
LIME = Vector4(0.0, 1.0, 0.0, 1.0)
LIME_GREEN = Vector4(0.196078449, 0.803921640, 0.196078449, 1.0)
LINEN = Vector4(0.980392218, 0.941176534, 0.901960850, 1.0)
MAGENTA = Vector4(1.0, 0.0, 1.0, 1.0)
MAROON = Vector4(0.501960814, 0.0, 0.0, 1.0)
MEDIUM_AQUAMARINE = Vector4(0.400000036, 0.803921640, 0.666666687, 1.0)
MEDIUM_BLUE = Vector4(0.0, 0.0, 0.803921640, 1.0)
MEDIUM_ORCHID = Vector4(0.729411781, 0.333333343, 0.827451050, 1.0)
MEDIUM_PURPLE = Vector4(0.576470613, 0.439215720, 0.858823597, 1.0)
MEDIUM_SEA_GREEN = Vector4(0.235294133, 0.701960802, 0.443137288, 1.0)
MEDIUM_SLATE_BLUE = Vector4(0.482352972, 0.407843173, 0.933333397, 1.0)
MEDIUM_SPRING_GREEN = Vector4(0.0, 0.980392218, 0.603921592, 1.0)
MEDIUM_TURQUOISE = Vector4(0.282352954, 0.819607913, 0.800000072, 1.0)
MEDIUM_VIOLET_RED = Vector4(0.780392230, 0.082352944, 0.521568656, 1.0)
MIDNIGHT_BLUE = Vector4(0.098039225, 0.098039225, 0.439215720, 1.0)
MINT_CREAM = Vector4(0.960784376, 1.0, 0.980392218, 1.0)
MISTY_ROSE = Vector4(1.0, 0.894117713, 0.882353008, 1.0)
MOCCASIN = Vector4(1.0, 0.894117713, 0.709803939, 1.0)
NAVAJO_WHITE = Vector4(1.0, 0.870588303, 0.678431392, 1.0)
NAVY = Vector4(0.0, 0.0, 0.501960814, 1.0)
OLD_LACE = Vector4(0.992156923, 0.960784376, 0.901960850, 1.0)
OLIVE = Vector4(0.501960814, 0.501960814, 0.0, 1.0)
OLIVE_DRAB = Vector4(0.419607878, 0.556862772, 0.137254909, 1.0)
ORANGE = Vector4(1.0, 0.647058845, 0.0, 1.0)
ORANGE_RED = Vector4(1.0, 0.270588249, 0.0, 1.0)
ORCHID = Vector4(0.854902029, 0.439215720, 0.839215755, 1.0)
PALE_GOLDENROD = Vector4(0.933333397, 0.909803987, 0.666666687, 1.0)
PALE_GREEN = Vector4(0.596078455, 0.984313786, 0.596078455, 1.0)
PALE_TURQUOISE = Vector4(0.686274529, 0.933333397, 0.933333397, 1.0)
PALE_VIOLET_RED = Vector4(0.858823597, 0.439215720, 0.576470613, 1.0)
PAPAYA_WHIP = Vector4(1.0, 0.937254965, 0.835294187, 1.0)
PEACH_PUFF = Vector4(1.0, 0.854902029, 0.725490212, 1.0)
PERU = Vector4(0.803921640, 0.521568656, 0.247058839, 1.0)
PINK = Vector4(1.0, 0.752941251, 0.796078503, 1.0)
PLUM = Vector4(0.866666734, 0.627451003, 0.866666734, 1.0)
POWDER_BLUE = Vector4(0.690196097, 0.878431439, 0.901960850, 1.0)
PURPLE = Vector4(0.501960814, 0.0, 0.501960814, 1.0)
RED = Vector4(1.0, 0.0, 0.0, 1.0)
ROSY_BROWN = Vector4(0.737254918, 0.560784340, 0.560784340, 1.0)
ROYAL_BLUE = Vector4(0.254901975, 0.411764741, 0.882353008, 1.0)
SADDLE_BROWN = Vector4(0.545098066, 0.270588249, 0.074509807, 1.0)
SALMON = Vector4(0.980392218, 0.501960814, 0.447058856, 1.0)
SANDY_BROWN = Vector4(0.956862807, 0.643137276, 0.376470625, 1.0)
SEA_GREEN = Vector4(0.180392161, 0.545098066, 0.341176480, 1.0)
SEA_SHELL = Vector4(1.0, 0.960784376, 0.933333397, 1.0)
SIENNA = Vector4(0.627451003, 0.321568638, 0.176470593, 1.0)
SILVER = Vector4(0.752941251, 0.752941251, 0.752941251, 1.0)
SKY_BLUE = Vector4(0.529411793, 0.807843208, 0.921568692, 1.0)
SLATE_BLUE = Vector4(0.415686309, 0.352941185, 0.803921640, 1.0)
SLATE_GRAY = Vector4(0.439215720, 0.501960814, 0.564705908, 1.0)
SNOW = Vector4(1.0, 0.980392218, 0.980392218, 1.0)
SPRING_GREEN = Vector4(0.0, 1.0, 0.498039246, 1.0)
STEEL_BLUE = Vector4(0.274509817, 0.509803951, 0.705882370, 1.0)
TAN = Vector4(0.823529482, 0.705882370, 0.549019635, 1.0)
TEAL = Vector4(0.0, 0.501960814, 0.501960814, 1.0)
THISTLE = Vector4(0.847058892, 0.749019623, 0.847058892, 1.0)
TOMATO = Vector4(1.0, 0.388235331, 0.278431386, 1.0)
TRANSPARENT = Vector4(0.0, 0.0, 0.0, 0.0)
TURQUOISE = Vector4(0.250980407, 0.878431439, 0.815686345, 1.0)
VIOLET = Vector4(0.933333397, 0.509803951, 0.933333397, 1.0)
WHEAT = Vector4(0.960784376, 0.870588303, 0.701960802, 1.0)
WHITE = Vector4(1.0, 1.0, 1.0, 1.0)
WHITE_SMOKE = Vector4(0.960784376, 0.960784376, 0.960784376, 1.0)
YELLOW = Vector4(1.0, 1.0, 0.0, 1.0)
YELLOW_GREEN = Vector4(0.603921592, 0.803921640, 0.196078449, 1.0)

_NAMED = {
    "AliceBlue": ALICE_BLUE, "AntiqueWhite": ANTIQUE_WHITE, "Aqua": AQUA,
    "Aquamarine": AQUAMARINE, "Azure": AZURE, "Beige": BEIGE, "Bisque": BISQUE,
    "Black": BLACK, "BlanchedAlmond": BLANCHED_ALMOND, "Blue": BLUE,
    "BlueViolet": BLUE_VIOLET, "Brown": BROWN, "BurlyWood": BURLY_WOOD,
    "CadetBlue": CADET_BLUE, "Chartreuse": CHARTREUSE, "Chocolate": CHOCOLATE,
    "Coral": CORAL, "CornflowerBlue": CORNFLOWER_BLUE, "Cornsilk": CORNSILK,
    "Crimson": CRIMSON, "Cyan": CYAN, "DarkBlue": DARK_BLUE, "DarkCyan": DARK_CYAN,
    "DarkGoldenrod": DARK_GOLDENROD, "DarkGray": DARK_GRAY, "DarkGreen": DARK_GREEN,
    "DarkKhaki": DARK_KHAKI, "DarkMagenta": DARK_MAGENTA,
    "DarkOliveGreen": DARK_OLIVE_GREEN, "DarkOrange": DARK_ORANGE,
    "DarkOrchid": DARK_ORCHID, "DarkRed": DARK_RED, "DarkSalmon": DARK_SALMON,
    "DarkSeaGreen": DARK_SEA_GREEN, "DarkSlateBlue": DARK_SLATE_BLUE,
    "DarkSlateGray": DARK_SLATE_GRAY, "DarkTurquoise": DARK_TURQUOISE,
    "DarkViolet": DARK_VIOLET, "DeepPink": DEEP_PINK, "DeepSkyBlue": DEEP_SKY_BLUE,
    "DimGray": DIM_GRAY, "DodgerBlue": DODGER_BLUE, "Firebrick": FIREBRICK,
    "FloralWhite": FLORAL_WHITE, "ForestGreen": FOREST_GREEN, "Fuchsia": FUCHSIA,
    "Gainsboro": GAINSBORO, "GhostWhite": GHOST_WHITE, "Gold": GOLD,
    "Goldenrod": GOLDENROD, "Gray": GRAY, "Green": GREEN,
    "GreenYellow": GREEN_YELLOW, "Honeydew": HONEYDEW, "HotPink": HOT_PINK,
    "IndianRed": INDIAN_RED, "Indigo": INDIGO, "Ivory": IVORY, "Khaki": KHAKI,
    "Lavender": LAVENDER, "LavenderBlush": LAVENDER_BLUSH, "LawnGreen": LAWN_GREEN,
    "LemonChiffon": LEMON_CHIFFON, "LightBlue": LIGHT_BLUE,
    "LightCoral": LIGHT_CORAL, "LightCyan": LIGHT_CYAN,
    "LightGoldenrodYellow": LIGHT_GOLDENROD_YELLOW, "LightGreen": LIGHT_GREEN,
    "LightGray": LIGHT_GRAY, "LightPink": LIGHT_PINK, "LightSalmon": LIGHT_SALMON,
    "LightSeaGreen": LIGHT_SEA_GREEN, "LightSkyBlue": LIGHT_SKY_BLUE,
    "LightSlateGray": LIGHT_SLATE_GRAY, "LightSteelBlue": LIGHT_STEEL_BLUE,
    "LightYellow": LIGHT_YELLOW, "Lime": LIME, "LimeGreen": LIME_GREEN,
    "Linen": LINEN, "Magenta": MAGENTA, "Maroon": MAROON,
    "MediumAquamarine": MEDIUM_AQUAMARINE, "MediumBlue": MEDIUM_BLUE,
    "MediumOrchid": MEDIUM_ORCHID, "MediumPurple": MEDIUM_PURPLE,
    "MediumSeaGreen": MEDIUM_SEA_GREEN, "MediumSlateBlue": MEDIUM_SLATE_BLUE,
    "MediumSpringGreen": MEDIUM_SPRING_GREEN, "MediumTurquoise": MEDIUM_TURQUOISE,
    "MediumVioletRed": MEDIUM_VIOLET_RED, "MidnightBlue": MIDNIGHT_BLUE,
    "MintCream": MINT_CREAM, "MistyRose": MISTY_ROSE, "Moccasin": MOCCASIN,
    "NavajoWhite": NAVAJO_WHITE, "Navy": NAVY, "OldLace": OLD_LACE, "Olive": OLIVE,
    "OliveDrab": OLIVE_DRAB, "Orange": ORANGE, "OrangeRed": ORANGE_RED,
    "Orchid": ORCHID, "PaleGoldenrod": PALE_GOLDENROD, "PaleGreen": PALE_GREEN,
    "PaleTurquoise": PALE_TURQUOISE, "PaleVioletRed": PALE_VIOLET_RED,
    "PapayaWhip": PAPAYA_WHIP, "PeachPuff": PEACH_PUFF, "Peru": PERU, "Pink": PINK,
    "Plum": PLUM, "PowderBlue": POWDER_BLUE, "Purple": PURPLE, "Red": RED,
    "RosyBrown": ROSY_BROWN, "RoyalBlue": ROYAL_BLUE, "SaddleBrown": SADDLE_BROWN,
    "Salmon": SALMON, "SandyBrown": SANDY_BROWN, "SeaGreen": SEA_GREEN,
    "SeaShell": SEA_SHELL, "Sienna": SIENNA, "Silver": SILVER, "SkyBlue": SKY_BLUE,
    "SlateBlue": SLATE_BLUE, "SlateGray": SLATE_GRAY, "Snow": SNOW,
    "SpringGreen": SPRING_GREEN, "SteelBlue": STEEL_BLUE, "Tan": TAN, "Teal": TEAL,
    "Thistle": THISTLE, "Tomato": TOMATO, "Transparent": TRANSPARENT,
    "Turquoise": TURQUOISE, "Violet": VIOLET, "Wheat": WHEAT, "White": WHITE,
    "WhiteSmoke": WHITE_SMOKE, "Yellow": YELLOW, "YellowGreen": YELLOW_GREEN,
}


def _key(name: str) -> str:
    return "".join(ch for ch in name if ch not in " _-").lower()


_BY_KEY = {_key(name): color for name, color in _NAMED.items()}


def by_name(name: str) -> Vector4:
    """Look up a colour by name, ignoring case, spaces, hyphens and underscores.

    Raises KeyError for an unknown name.
    """
    try:
        return _BY_KEY[_key(name)]
    except KeyError:
        raise KeyError(f"unknown colour: {name!r}") from None