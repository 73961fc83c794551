from .analysis_entry import AnalysisEntry
from .confirmation_entry import ConfirmationEntry
from .dated_signals import unique_by_date_and_direction
from .indicator_entry import IndicatorEntry
from .never_exit import NeverExit
from .operator_entry import AndOperator, Operator, OperatorEntry, OrOperator
from .periodic_entry import PeriodicEntry

__all__ = [
    "AnalysisEntry",
    "AndOperator",
    "ConfirmationEntry",
    "IndicatorEntry",
    "NeverExit",
    "Operator",
    "OperatorEntry",
    "OrOperator",
    "PeriodicEntry",
    "unique_by_date_and_direction",
]
