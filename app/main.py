import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import CORS_ORIGINS
from app.routes import health, root
from app.routes.recipe import recipe

app = FastAPI(
    title="Recipe AI API",
    description="Suggests a recipe from the ingredients you have, powered by a hosted language model.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logging.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


# API routes
app.include_router(health.router)
app.include_router(recipe.router)

# Catch-all for the front-end bundle, must stay last
app.include_router(root.router)
