from .csv import CsvColumnMap, CsvPriceHistory

__all__ = ["CsvColumnMap", "CsvPriceHistory"]
