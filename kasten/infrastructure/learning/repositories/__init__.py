from .progress_repository import ProgressRepository
from .progress_view_repository import ProgressViewRepository, ProgressViews

__all__ = [
    "ProgressRepository",
    "ProgressViewRepository",
    "ProgressViews",
]
