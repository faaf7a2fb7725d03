from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from app.logger import logger
from app.utils import AmountError, format_inr, number_to_words

router = APIRouter()


@router.get("/api/amount-in-words")
async def amount_in_words(amount: float):
    try:
        words = number_to_words(amount)
        formatted = format_inr(amount)
    except AmountError as e:
        logger.warning(f"Rejected amount-in-words request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return JSONResponse(content={
        "amount": formatted,
        "english": words.english,
        "hindi": words.hindi,
    })
