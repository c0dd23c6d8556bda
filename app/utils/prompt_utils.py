from typing import List, Optional

SYSTEM_PROMPT = (
    "You are an assistant that receives a list of ingredients that a user has and suggests a recipe "
    "they could make with some or all of those ingredients. You don't need to use every ingredient they "
    "mention in your recipe. The recipe can include additional ingredients they didn't mention, but try "
    "not to include too many extra ingredients. Format your response in markdown to make it easier to "
    "render to a web page."
)


def build_user_prompt(ingredients: List[str], personal: Optional[List[str]] = None) -> str:
    personal_clause = f"Also, {', '.join(personal)}. " if personal else ""
    return f"I have {', '.join(ingredients)}. {personal_clause}Please give me a recipe you'd recommend I make!"


def build_recipe_messages(ingredients: List[str], personal: Optional[List[str]] = None) -> List[dict]:
    """
    레시피 요청에 대한 system/user 메시지 두 개를 생성합니다.
    """
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(ingredients, personal)},
    ]
