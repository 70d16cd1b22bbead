"""Point-of-sale services backed by MongoDB: products, customers, categories, sales, logs, settings and notifications."""

__version__ = "0.1.0"