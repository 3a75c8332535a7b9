# =============================================================================
# app/routers/tweets.py - Tweet Endpoints
# =============================================================================
# Post, list, edit and delete tweets.
# Editing and deleting are by tweet ID and don't check the author.
# =============================================================================

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import validate_body, validate_params
from core.models.common import MessageResponse
from core.models.tweet import TweetCreate, TweetIdParams, TweetResponse, TweetUpdate
from core.services.tweet_service import TweetService

router = APIRouter()


@router.post(
    "/tweets",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
)
async def create_tweet(payload: TweetCreate = Depends(validate_body(TweetCreate))):
    """
    Post a tweet.

    The author must have signed up first; otherwise 401 is returned.
    """
    await TweetService.create_tweet(payload.username, payload.tweet)
    return MessageResponse(message="Tweet created successfully!")


@router.get("/tweets", response_model=list[TweetResponse])
async def list_tweets():
    """List all tweets, newest first, each with its author's avatar."""
    return await TweetService.list_tweets()


@router.get("/tweets/{username}", response_model=list[TweetResponse])
async def list_user_tweets(username: str):
    """List one user's tweets, newest first. 404 if the user doesn't exist."""
    return await TweetService.list_user_tweets(username)


# The ID is validated before the body, so a bad ID is reported on its own
@router.put("/tweets/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_tweet(
    params: TweetIdParams = Depends(validate_params(TweetIdParams)),
    payload: TweetUpdate = Depends(validate_body(TweetUpdate)),
):
    """Replace a tweet's text."""
    await TweetService.update_tweet(params.id, payload.tweet)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/tweets/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tweet(params: TweetIdParams = Depends(validate_params(TweetIdParams))):
    """Delete a tweet."""
    await TweetService.delete_tweet(params.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
