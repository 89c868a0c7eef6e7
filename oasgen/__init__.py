"""OpenAPI 3.1 document model with JSON/YAML rendering, 3.0 downgrade and a query parameter helper."""

__version__ = "0.1.0"

__all__ = ["components", "document", "info", "marshal", "media", "operations", "queryparam"]