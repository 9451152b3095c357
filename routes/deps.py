"""Shared FastAPI dependencies."""

from fastapi import Request

from services.gym_service import GymService


def get_service(request: Request) -> GymService:
    """The gym service attached to the running application."""
    return request.app.state.gym
