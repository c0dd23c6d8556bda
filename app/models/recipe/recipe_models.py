from typing import List, Optional

from pydantic import BaseModel, Field


class RecipeRequest(BaseModel):
    ingredients: List[str] = Field(..., min_length=1)
    personal: Optional[List[str]] = None


class RecipeResponse(BaseModel):
    recipe: str
