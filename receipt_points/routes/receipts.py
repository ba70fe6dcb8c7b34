from html import escape
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from ..models import ReceiptFields
from ..rules.ruleset import Rule
from ..schemas import PointsResponse, ProcessResponse, ReceiptInput
from ..services.receipts import ReceiptNotFound, get_points, submit_receipt
from ..store.repository import ReceiptRepository

router = APIRouter(prefix="/receipts", tags=["receipts"])

PROCESSED_PAGE = "<html><body><h1>Receipt processed successfully!</h1><p>ID: {id}</p></body></html>"

def get_repository(request: Request) -> ReceiptRepository:
    return request.app.state.repository

def get_rules(request: Request) -> List[Rule]:
    return request.app.state.rules

def _wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "").lower()

@router.post("/process", response_model=ProcessResponse)
def process_receipt(payload: ReceiptInput, request: Request,
                    repository: ReceiptRepository = Depends(get_repository)):
    fields: ReceiptFields = payload.to_fields()
    receipt_id = submit_receipt(repository, fields)
    if _wants_html(request):
        return HTMLResponse(PROCESSED_PAGE.format(id=escape(receipt_id)))
    return ProcessResponse(id=receipt_id)

@router.get("/{receipt_id}/points", response_model=PointsResponse)
def points_for_receipt(receipt_id: str,
                       repository: ReceiptRepository = Depends(get_repository),
                       rules: List[Rule] = Depends(get_rules)):
    try:
        points = get_points(repository, receipt_id, rules)
    except ReceiptNotFound:
        raise HTTPException(status_code=404, detail="Receipt not found")
    return PointsResponse(points=points)
