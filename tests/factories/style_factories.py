"""
Randomized style factories: anti-overfitting design.

Every factory call generates randomized colors, opacities and sizes so tests
cannot rely on specific default values. Opacities have two decimals so they
survive the rgba() string round trip exactly.
"""

import random
import string


def _random_suffix(length: int = 6) -> str:
    """Generate random alphanumeric suffix."""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def random_hex() -> str:
    """Random lowercase #rrggbb color."""
    return "#%06x" % random.randint(0, 0xFFFFFF)


def random_opacity() -> float:
    """Random opacity in (0, 1] with two decimals."""
    return random.randint(1, 100) / 100


def make_circle_symbolizer(**overrides):
    """
    Build a Circle symbolizer dict with randomized fields.

    Returns:
        dict suitable for CircleSymbolizer(**result)
    """
    base = {
        "kind": "Circle",
        "color": random_hex(),
        "opacity": random_opacity(),
        "radius": random.randint(1, 20),
        "strokeColor": random_hex(),
        "strokeWidth": random.randint(1, 5),
        "strokeOpacity": random_opacity(),
    }
    base.update(overrides)
    return base


def make_line_symbolizer(**overrides):
    """Build a Line symbolizer dict with randomized fields."""
    base = {
        "kind": "Line",
        "color": random_hex(),
        "opacity": random_opacity(),
        "width": random.randint(1, 10),
        "cap": random.choice(["butt", "round", "square"]),
        "join": random.choice(["bevel", "round", "miter"]),
        "dasharray": [random.randint(1, 6), random.randint(1, 6)],
    }
    base.update(overrides)
    return base


def make_fill_symbolizer(**overrides):
    """Build a Fill symbolizer dict with randomized fields."""
    base = {
        "kind": "Fill",
        "color": random_hex(),
        "opacity": random_opacity(),
        "outlineColor": random_hex(),
        "outlineWidth": random.randint(1, 4),
    }
    base.update(overrides)
    return base


def make_text_symbolizer(**overrides):
    """Build a Text symbolizer dict with randomized fields."""
    base = {
        "kind": "Text",
        "color": random_hex(),
        "field": f"label_{_random_suffix()}",
        "offset": [random.randint(-10, 10), random.randint(-10, 10)],
        "font": ["Arial", "sans-serif"],
        "size": random.randint(8, 24),
        "fontWeight": "bold",
    }
    base.update(overrides)
    return base


def make_style(style_type: str, *symbolizers, filters=None, **overrides):
    """
    Build a Style dict with one rule per symbolizer.

    Args:
        style_type: "Point", "Line" or "Fill"
        *symbolizers: Symbolizer dicts
        filters: Optional list of filters, aligned with symbolizers
        **overrides: Any top-level field override

    Returns:
        dict suitable for Style.model_validate(result)
    """
    filters = filters or [None] * len(symbolizers)
    rules = []
    for symbolizer, filter_ in zip(symbolizers, filters):
        rule = {"name": f"rule_{_random_suffix()}", "symbolizer": symbolizer}
        if filter_ is not None:
            rule["filter"] = filter_
        rules.append(rule)

    base = {
        "name": f"style_{_random_suffix()}",
        "type": style_type,
        "rules": rules,
    }
    base.update(overrides)
    return base
