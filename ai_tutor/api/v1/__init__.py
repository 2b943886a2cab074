"""API router."""
from fastapi import APIRouter

from ai_tutor.api.v1 import analysis, auth, chat, quiz_results, quizzes, topics

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(topics.router, prefix="/topics", tags=["Topics"])
api_router.include_router(quizzes.router, prefix="/quizzes", tags=["Quizzes"])
api_router.include_router(quiz_results.router, prefix="/quiz-results", tags=["Quiz Results"])
api_router.include_router(analysis.router, prefix="/analysis", tags=["Analysis"])
api_router.include_router(chat.router, prefix="/chat", tags=["Chat"])
