"""/v1/articles - blog publishing"""

import logging
import uuid
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.orm import Session

from exitum_gateway.api.v1.schemas import ArticleListResponse, ArticleRequest, ArticleSchema
from exitum_gateway.api.dependencies import get_request_id
from exitum_gateway.domain.exceptions import ArticleNotFoundError
from exitum_gateway.infrastructure.database.models import Article
from exitum_gateway.infrastructure.database.session import get_db
from exitum_gateway.infrastructure.database.repositories import ArticleRepository

router = APIRouter()


def _parse_article_id(article_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(article_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid article ID format")


def _to_schema(article: Article) -> ArticleSchema:
    return ArticleSchema(
        article_id=str(article.id),
        title=article.title,
        excerpt=article.excerpt,
        content=article.content,
        image=article.image,
        published_at=article.published_at.isoformat(),
    )


@router.get("/articles", response_model=ArticleListResponse)
def list_articles(
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
):
    """Publications, newest first"""
    articles = ArticleRepository(db).list_articles(limit=limit)
    return ArticleListResponse(articles=[_to_schema(article) for article in articles])


@router.get("/articles/{article_id}", response_model=ArticleSchema)
def get_article(article_id: str, db: Session = Depends(get_db)):
    try:
        article = ArticleRepository(db).get_article(_parse_article_id(article_id))
    except ArticleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _to_schema(article)


@router.post("/articles", response_model=ArticleSchema, status_code=201)
def create_article(request_body: ArticleRequest, request: Request, db: Session = Depends(get_db)):
    """Publish a new article"""
    db_article = ArticleRepository(db).create_article(
        title=request_body.title,
        content=request_body.content,
        excerpt=request_body.excerpt,
        image=request_body.image,
        published_at=request_body.published_at,
    )
    db.commit()
    db.refresh(db_article)

    logging.info(
        "Article published",
        extra={"request_id": get_request_id(request), "article_id": str(db_article.id)},
    )
    return _to_schema(db_article)


@router.put("/articles/{article_id}", response_model=ArticleSchema)
def update_article(article_id: str, request_body: ArticleRequest, db: Session = Depends(get_db)):
    """Replace title, text, excerpt and cover; the publication date stays"""
    article_uuid = _parse_article_id(article_id)

    try:
        db_article = ArticleRepository(db).update_article(
            article_uuid,
            title=request_body.title,
            content=request_body.content,
            excerpt=request_body.excerpt,
            image=request_body.image,
        )
    except ArticleNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))

    db.commit()
    db.refresh(db_article)
    return _to_schema(db_article)


@router.delete("/articles/{article_id}", status_code=204)
def delete_article(article_id: str, db: Session = Depends(get_db)):
    article_uuid = _parse_article_id(article_id)

    try:
        ArticleRepository(db).delete_article(article_uuid)
    except ArticleNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))

    db.commit()
    return Response(status_code=204)
