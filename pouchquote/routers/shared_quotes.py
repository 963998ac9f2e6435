import logging
import secrets

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import models, schemas
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shared-quotes", tags=["shared-quotes"])

# No 0/O, 1/I/l/i: ids get read aloud and typed from screenshots
SHORT_ID_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZabcdefghjkmnpqrstuvwxyz23456789"
SHORT_ID_LENGTH = 8


def generate_short_id() -> str:
    return "".join(secrets.choice(SHORT_ID_ALPHABET) for _ in range(SHORT_ID_LENGTH))


@router.post("", response_model=schemas.SharedQuote)
def create_shared_quote(payload: schemas.SharedQuoteCreate, db: Session = Depends(get_db)):
    if not payload.quote_type or payload.config_data is None:
        raise HTTPException(status_code=400, detail="Missing required fields")

    quote_id = generate_short_id()
    while db.query(models.SharedQuote).filter(models.SharedQuote.id == quote_id).first():
        quote_id = generate_short_id()

    quote = models.SharedQuote(
        id=quote_id,
        quote_type=payload.quote_type,
        customer_name=payload.customer_name or "",
        config_data=payload.config_data,
    )
    db.add(quote)
    db.commit()
    db.refresh(quote)
    logger.info("Shared %s quote %s", quote.quote_type, quote.id)
    return quote


@router.get("/{quote_id}", response_model=schemas.SharedQuote)
def get_shared_quote(quote_id: str, db: Session = Depends(get_db)):
    quote = db.query(models.SharedQuote).filter(models.SharedQuote.id == quote_id).first()
    if not quote:
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote
