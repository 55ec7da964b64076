"""
HelaType - Singlish to Sinhala Unicode transliteration service.
"""
__version__ = "1.0.0"
