"""School inventory tracker: an in-memory catalog of electronics and furniture with a Qt front end."""

__version__ = "0.1.0"
