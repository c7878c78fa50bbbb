"""Built-in unit table.

Factors are exact where a legal definition exists (international
yard and pound, nautical mile, Julian year); the US customary
volume and avoirdupois ounce/stone factors are rounded.
Digital storage uses 1024-based multiples.
"""

from omniconvert.catalog.models import CategoryDefinition, UnitDefinition
from omniconvert.constants import UnitCategory


def _unit(
    unit_id: str,
    name: str,
    symbol: str,
    factor: float,
    offset: float = 0.0,
) -> UnitDefinition:
    return UnitDefinition(
        id=unit_id, name=name, symbol=symbol, factor=factor, offset=offset
    )


LENGTH = CategoryDefinition(
    name=UnitCategory.LENGTH,
    base_unit_id="m",
    units=(
        _unit("km", "Kilometer", "km", 1000),
        _unit("m", "Meter", "m", 1),
        _unit("cm", "Centimeter", "cm", 0.01),
        _unit("mm", "Millimeter", "mm", 0.001),
        _unit("mi", "Mile", "mi", 1609.344),
        _unit("yd", "Yard", "yd", 0.9144),
        _unit("ft", "Foot", "ft", 0.3048),
        _unit("in", "Inch", "in", 0.0254),
        _unit("nmi", "Nautical Mile", "nmi", 1852),
    ),
)

MASS = CategoryDefinition(
    name=UnitCategory.MASS,
    base_unit_id="kg",
    units=(
        _unit("t", "Metric Ton", "t", 1000),
        _unit("kg", "Kilogram", "kg", 1),
        _unit("g", "Gram", "g", 0.001),
        _unit("mg", "Milligram", "mg", 0.000001),
        _unit("lb", "Pound", "lb", 0.45359237),
        _unit("oz", "Ounce", "oz", 0.0283495),
        _unit("st", "Stone", "st", 6.35029),
    ),
)

VOLUME = CategoryDefinition(
    name=UnitCategory.VOLUME,
    base_unit_id="l",
    units=(
        _unit("l", "Liter", "L", 1),
        _unit("ml", "Milliliter", "mL", 0.001),
        _unit("gal_us", "Gallon (US)", "gal", 3.78541),
        _unit("qt_us", "Quart (US)", "qt", 0.946353),
        _unit("pt_us", "Pint (US)", "pt", 0.473176),
        _unit("cup_us", "Cup (US)", "cup", 0.236588),
        _unit("fl_oz_us", "Fluid Ounce (US)", "fl oz", 0.0295735),
        _unit("m3", "Cubic Meter", "m³", 1000),
    ),
)

# factor/offset describe each scale against Celsius; the engine
# converts temperature by unit id and does not read them.
TEMPERATURE = CategoryDefinition(
    name=UnitCategory.TEMPERATURE,
    base_unit_id="c",
    units=(
        _unit("c", "Celsius", "°C", 1, 0),
        _unit("f", "Fahrenheit", "°F", 5 / 9, 32),
        _unit("k", "Kelvin", "K", 1, 273.15),
    ),
)

AREA = CategoryDefinition(
    name=UnitCategory.AREA,
    base_unit_id="m2",
    units=(
        _unit("km2", "Square Kilometer", "km²", 1_000_000),
        _unit("ha", "Hectare", "ha", 10_000),
        _unit("m2", "Square Meter", "m²", 1),
        _unit("cm2", "Square Centimeter", "cm²", 0.0001),
        _unit("mi2", "Square Mile", "mi²", 2_589_988.110336),
        _unit("ac", "Acre", "ac", 4046.8564224),
        _unit("yd2", "Square Yard", "yd²", 0.83612736),
        _unit("ft2", "Square Foot", "ft²", 0.09290304),
        _unit("in2", "Square Inch", "in²", 0.00064516),
    ),
)

TIME = CategoryDefinition(
    name=UnitCategory.TIME,
    base_unit_id="s",
    units=(
        _unit("y", "Year (avg)", "yr", 31_557_600),
        _unit("wk", "Week", "wk", 604_800),
        _unit("d", "Day", "d", 86_400),
        _unit("h", "Hour", "hr", 3600),
        _unit("min", "Minute", "min", 60),
        _unit("s", "Second", "s", 1),
        _unit("ms", "Millisecond", "ms", 0.001),
    ),
)

DIGITAL = CategoryDefinition(
    name=UnitCategory.DIGITAL,
    base_unit_id="byte",
    units=(
        _unit("tb", "Terabyte", "TB", 1024**4),
        _unit("gb", "Gigabyte", "GB", 1024**3),
        _unit("mb", "Megabyte", "MB", 1024**2),
        _unit("kb", "Kilobyte", "KB", 1024),
        _unit("byte", "Byte", "B", 1),
        _unit("bit", "Bit", "b", 0.125),
    ),
)

SPEED = CategoryDefinition(
    name=UnitCategory.SPEED,
    base_unit_id="mps",
    units=(
        _unit("mps", "Meter per Second", "m/s", 1),
        _unit("kph", "Kilometer per Hour", "km/h", 1000 / 3600),
        _unit("mph", "Mile per Hour", "mph", 0.44704),
        _unit("kn", "Knot", "kn", 1852 / 3600),
        _unit("fps", "Foot per Second", "ft/s", 0.3048),
    ),
)

DEFAULT_CATEGORIES: tuple[CategoryDefinition, ...] = (
    LENGTH,
    MASS,
    VOLUME,
    TEMPERATURE,
    AREA,
    TIME,
    DIGITAL,
    SPEED,
)
