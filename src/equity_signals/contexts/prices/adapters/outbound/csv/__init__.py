from .csv_price_history import CsvColumnMap, CsvPriceHistory

__all__ = ["CsvColumnMap", "CsvPriceHistory"]
