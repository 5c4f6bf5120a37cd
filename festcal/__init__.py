"""Holiday definitions and occurrence calculations for a range of countries."""

__version__ = "2.0.0"

__all__ = [
    "holiday",
    "cz",
    "de",
    "dk",
    "ecb",
    "es",
    "fi",
    "fr",
    "gb",
    "gr",
    "hr",
    "ie",
    "it",
    "jp",
    "lt",
    "lv",
]