from fastapi import Request

from ..config import Settings
from ..loader import GameStores


def get_stores(request: Request) -> GameStores:
    return request.app.state.stores


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
