from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from . import config
from . import engine as engine_module
from .bank import DEFAULT_SIGNATURES
from .engine import SmsTransactionEngine
from .parse_outcome import ParseOutcome, RejectionReason

app = FastAPI(
    title="SMS Parser API",
    description="API for parsing banking SMS messages into structured transaction data.",
    version="1.0.0"
)


class SMSRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(default=None, alias="_id")
    date: int
    address: str
    body: str
    type: Optional[str] = None


class ParseResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(default=None, alias="_id")
    type: str
    amount_minor: int
    amount: str
    channel: str
    merchant: Optional[str] = None
    account_tail: str
    bank: str
    is_transfer: bool = False
    reference: Optional[str] = None
    balance_minor: Optional[int] = None
    currency: str = "INR"
    timestamp: int
    status: str = "success"


def get_engine() -> SmsTransactionEngine:
    if engine_module.is_initialized():
        return engine_module.get_engine()
    return engine_module.initialize(DEFAULT_SIGNATURES)


def format_parsed_txn(outcome: ParseOutcome, request: SMSRequest) -> dict:
    result = outcome.transaction.to_dict()
    del result["raw_sender"]
    del result["raw_body"]
    result["_id"] = request.id
    result["status"] = "success"
    return result


def rejection_message(outcome: ParseOutcome, request: SMSRequest) -> str:
    if outcome.rejection is RejectionReason.UNKNOWN_BANK:
        return f"No parser found for sender: {request.address}"
    return f"Could not extract transaction data ({outcome.rejection.value})."


@app.post("/parse", response_model=ParseResponse)
async def parse_sms(request: SMSRequest):
    """
    Parse a single SMS message with the custom JSON format.
    """
    outcome = get_engine().evaluate(request.address, request.body, request.date)
    if outcome.rejection is RejectionReason.UNKNOWN_BANK:
        raise HTTPException(status_code=404, detail=rejection_message(outcome, request))
    if not outcome.accepted:
        raise HTTPException(
            status_code=422,
            detail={"reason": outcome.rejection.value, "message": rejection_message(outcome, request)},
        )
    return format_parsed_txn(outcome, request)


@app.post("/parse-batch", response_model=List[dict])
async def parse_sms_batch(requests: List[SMSRequest]):
    """
    Parse multiple SMS messages in one request using the custom JSON format.
    """
    engine = get_engine()
    results = []
    for request in requests:
        outcome = engine.evaluate(request.address, request.body, request.date)
        if outcome.accepted:
            results.append(format_parsed_txn(outcome, request))
            continue

        results.append({
            "_id": request.id,
            "status": "error" if outcome.rejection is RejectionReason.UNKNOWN_BANK else "unparsed",
            "reason": outcome.rejection.value,
            "message": rejection_message(outcome, request),
        })

    return results


@app.get("/health")
async def health_check():
    return {"status": "healthy", "banks": get_engine().registry.codes()}


def serve(host: str = config.API_HOST, port: int = config.API_PORT) -> None:
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    serve()
