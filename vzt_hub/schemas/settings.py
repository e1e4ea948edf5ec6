from typing import Literal

from pydantic import BaseModel


Theme = Literal["light", "dark"]


class ThemeResponse(BaseModel):
    theme: Theme
