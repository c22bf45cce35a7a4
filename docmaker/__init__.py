"""Convert JSON record sets into downloadable CSV and XLSX files."""

__version__ = "1.0.0"
