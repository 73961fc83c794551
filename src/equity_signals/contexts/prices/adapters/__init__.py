from .outbound import CsvColumnMap, CsvPriceHistory

__all__ = ["CsvColumnMap", "CsvPriceHistory"]
