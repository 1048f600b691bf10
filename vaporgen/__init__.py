"""vaporgen -- scaffolds Fluent models, migrations and controllers for Vapor apps."""

__version__ = "0.1.0"
