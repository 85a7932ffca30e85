"""Static option lists offered by the search page."""

SORT_OPTIONS: tuple[tuple[str, str], ...] = (
    ("relevance", "Most Relevant"),
    ("price", "Price"),
    ("year", "Year"),
    ("mileage", "Mileage"),
    ("createdAt", "Date Listed"),
    ("views", "Most Viewed"),
)

LISTING_TYPES: tuple[tuple[str, str], ...] = (
    ("standard", "Standard"),
    ("featured", "Featured"),
    ("premium", "Premium"),
)

COMMON_FEATURES: tuple[str, ...] = (
    "Air Conditioning",
    "Power Steering",
    "Power Windows",
    "ABS Brakes",
    "Airbags",
    "Bluetooth",
    "GPS Navigation",
    "Backup Camera",
    "Sunroof",
    "Leather Seats",
    "Heated Seats",
    "Cruise Control",
    "Keyless Entry",
)
