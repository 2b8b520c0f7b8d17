"""Public package interface for the WeightBot move chooser."""

from .bot import SearchSummary, WeightBot, choose_move
from .cache import MoveCache, MoveWeight
from .depth import DepthController
from .evaluation import MoveEvaluator
from .params import BotParams, ParamRegistry
from .search import Analyzer, highest_weight
from .selection import MoveSelector
from .utils import console_logger

__all__ = [
    "Analyzer",
    "BotParams",
    "DepthController",
    "MoveCache",
    "MoveEvaluator",
    "MoveSelector",
    "MoveWeight",
    "ParamRegistry",
    "SearchSummary",
    "WeightBot",
    "choose_move",
    "console_logger",
    "highest_weight",
]
