"""Article CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from article_world.application.schemas import ArticleCreate, ArticleUpdate, ArticleResponse
from article_world.application.services import ArticleService
from article_world.domain.exceptions import ArticleNotFoundError, PersistenceError
from article_world.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])

GENERIC_ERROR_MESSAGE = "Oops!, An error occurred."
ARTICLE_DELETED_MESSAGE = "Article deleted successfully"
NO_SUCH_ARTICLE_MESSAGE = "No such article exists"


def _server_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=GENERIC_ERROR_MESSAGE,
    )


def _invalid_article(e: ArticleNotFoundError) -> HTTPException:
    # Unknown ids are reported as 400, not 404.
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    try:
        article = await service.add_article(data)
    except PersistenceError:
        raise _server_error()
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve all articles, most recently posted first."""
    try:
        articles = await service.list_articles()
    except PersistenceError:
        raise _server_error()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except ArticleNotFoundError as e:
        raise _invalid_article(e)
    except PersistenceError:
        raise _server_error()
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Replace the title, content and author of an existing article."""
    try:
        article = await service.update_article(article_id, data)
    except ArticleNotFoundError as e:
        raise _invalid_article(e)
    except PersistenceError:
        raise _server_error()
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", status_code=status.HTTP_200_OK, response_class=PlainTextResponse)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> PlainTextResponse:
    """Delete an article by ID."""
    try:
        deleted = await service.delete_article(article_id)
    except PersistenceError:
        raise _server_error()
    if not deleted:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=NO_SUCH_ARTICLE_MESSAGE)
    return PlainTextResponse(ARTICLE_DELETED_MESSAGE)
