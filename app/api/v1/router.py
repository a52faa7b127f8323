"""API V1 Router"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    submissions, leaderboard, points, notifications,
    assignments, quizzes, domains,
)

api_router = APIRouter()

api_router.include_router(submissions.router, prefix="/submissions", tags=["Submissions & Grading"])
api_router.include_router(leaderboard.router, prefix="/leaderboard", tags=["Leaderboard"])
api_router.include_router(points.router, prefix="/points", tags=["Points"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["Notifications"])
api_router.include_router(assignments.router, prefix="/assignments", tags=["Assignments"])
api_router.include_router(quizzes.router, prefix="/quizzes", tags=["Quizzes"])
api_router.include_router(domains.router, prefix="/domains", tags=["Domain Leads"])
