"""topfill — seeded bars / faces pattern fills for garment silhouettes."""

__version__ = "0.1.0"
