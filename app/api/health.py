# app/api/health.py

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/helloworld")
def hello_world():
    return {"hello": "world"}


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "hello world"
