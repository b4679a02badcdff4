"""Tournament management: domain model, business rules, controllers and a request router."""

__version__ = "0.1.0"