from .core.data import ReferenceTable, load_reference_table
from .core.dispatcher import dispatch
from .core.portfolio import get_portfolio_value
from .core.profit import best_single_trade, maximize_profit

__all__ = [
    "ReferenceTable",
    "load_reference_table",
    "dispatch",
    "get_portfolio_value",
    "maximize_profit",
    "best_single_trade",
]
