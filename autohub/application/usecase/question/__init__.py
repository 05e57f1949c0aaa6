"""Question and answer use cases."""

from .accept_answer import AcceptAnswerRequest, AcceptAnswerUseCase
from .ask_question import AskQuestionRequest, AskQuestionUseCase
from .delete_answer import DeleteAnswerRequest, DeleteAnswerUseCase
from .delete_question import (
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
)
from .get_question import (
    AnswerResponse,
    GetQuestionRequest,
    GetQuestionUseCase,
    QuestionResponse,
)
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionListItem,
)
from .post_answer import PostAnswerRequest, PostAnswerUseCase
from .update_question import UpdateQuestionRequest, UpdateQuestionUseCase
from .vote import VoteRequest, VoteUseCase

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerUseCase",
    "AnswerResponse",
    "AskQuestionRequest",
    "AskQuestionUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionResponse",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "PostAnswerRequest",
    "PostAnswerUseCase",
    "QuestionListItem",
    "QuestionResponse",
    "UpdateQuestionRequest",
    "UpdateQuestionUseCase",
    "VoteRequest",
    "VoteUseCase",
]
