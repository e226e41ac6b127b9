from .exceptions import CardSubjectNotFoundError, ProgressNotFoundError
from .progress_use_case import ProgressUseCase
from .record_answer_use_case import RecordAnswerUseCase

__all__ = [
    "CardSubjectNotFoundError",
    "ProgressNotFoundError",
    "ProgressUseCase",
    "RecordAnswerUseCase",
]
