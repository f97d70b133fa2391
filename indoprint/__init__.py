"""Weather forecast building blocks for Indonesian cities: lookup, models, ensemble maths, caching."""

__version__ = "0.1.0"