"""Source format extractors."""

from .csv_extractor import CsvDataExtractor
from .json_extractor import JsonDataExtractor
from .xml_extractor import XmlDataExtractor

__all__ = [
    'CsvDataExtractor',
    'JsonDataExtractor',
    'XmlDataExtractor',
]
