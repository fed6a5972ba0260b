"""Portfolio site: static file server plus the page behaviour model."""

__version__ = '1.0.0'
