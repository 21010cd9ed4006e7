from typing import Optional

from .base import CamelModel, ReadModel


class ProjectWrite(CamelModel):
    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    portfolio_user_id: Optional[int] = None
    version: Optional[int] = None


class ProjectRead(ReadModel):
    id: int
    title: str
    description: str
    image_url: Optional[str] = None
    portfolio_user_id: int
    version: int
