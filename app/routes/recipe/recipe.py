import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from openai import APIStatusError

from app.config import RECIPE_ERROR_MESSAGE, RECIPE_MAX_TOKENS, RECIPE_MODEL
from app.dependencies.completion import ChatCompletionClient, get_completion_client
from app.models.error_models import ErrorResponse
from app.models.recipe.recipe_models import RecipeRequest, RecipeResponse
from app.utils.prompt_utils import build_recipe_messages

router = APIRouter()


@router.post("/get-recipe", tags=["Recipe"], response_model=RecipeResponse,
             responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def get_recipe(request: RecipeRequest, completion_client: ChatCompletionClient = Depends(get_completion_client)):
    """
    주어진 재료 목록으로 만들 수 있는 레시피를 마크다운 형식으로 생성합니다.
    개인 요청 사항(알레르기, 선호 등)이 있으면 프롬프트에 함께 반영합니다.
    """
    try:
        messages = build_recipe_messages(request.ingredients, request.personal)

        recipe_response = await completion_client.complete(messages, RECIPE_MODEL, RECIPE_MAX_TOKENS)
        logging.info(f"Completion response: {recipe_response}")

        return RecipeResponse(recipe=recipe_response.choices[0].message.content)

    except Exception as e:
        logging.error(f"Error generating recipe: {e}", exc_info=True)
        # 제공자 오류 응답 본문은 로그에만 남깁니다.
        if isinstance(e, APIStatusError):
            logging.error(f"Error response data: {e.body}")
        return JSONResponse(status_code=500, content={"error": RECIPE_ERROR_MESSAGE})
