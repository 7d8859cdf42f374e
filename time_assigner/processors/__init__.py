"""Processors for task tree loading and time assignment passes."""

from .file_processor import TreeFileProcessor
from .parent_linker import ParentLinks
from .budget_classifier import BudgetClassifier
from .time_distributor import TimeDistributor
from .field_cleaner import FieldCleaner
from .tree_walker import walk_pre_order, iter_pre_order

__all__ = [
    "TreeFileProcessor",
    "ParentLinks",
    "BudgetClassifier",
    "TimeDistributor",
    "FieldCleaner",
    "walk_pre_order",
    "iter_pre_order",
]
