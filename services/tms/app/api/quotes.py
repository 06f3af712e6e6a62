from fastapi import APIRouter
from app.application.quotes import get_quotes
from app.application.schemas import QuoteRead, QuoteRequest

router = APIRouter(prefix="/api/quotes", tags=["quotes"])

@router.post("/", response_model=list[QuoteRead])
def request_quotes(payload: QuoteRequest):
    return get_quotes(payload)
