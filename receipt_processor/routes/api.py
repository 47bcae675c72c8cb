# receipt_processor/routes/api.py

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import request_validation_exception_handler
from receipt_processor.models.receipt import Receipt, ProcessResponse, PointsResponse
from receipt_processor.services.processor import ReceiptProcessor
from receipt_processor.services.store import ResultStore
from typing import Optional
import logging

logger = logging.getLogger("receipt_processor.api")

UNKNOWN_POINTS = "Unknown"


def get_processor(request: Request) -> ReceiptProcessor:
    return request.app.state.processor


def create_app(processor: Optional[ReceiptProcessor] = None) -> FastAPI:
    """Build the application with its own result store"""
    app = FastAPI(title="Receipt Processor")
    app.state.processor = processor or ReceiptProcessor(ResultStore())

    @app.exception_handler(RequestValidationError)
    async def log_validation_error(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return await request_validation_exception_handler(request, exc)

    @app.post("/receipts/process", response_model=ProcessResponse)
    async def process_receipt(
        receipt: Receipt,
        processor: ReceiptProcessor = Depends(get_processor),
    ):
        receipt_id = processor.process(receipt)
        return ProcessResponse(id=receipt_id)

    @app.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
    async def get_receipt_points(
        receipt_id: str,
        processor: ReceiptProcessor = Depends(get_processor),
    ):
        points = processor.get_points(receipt_id)
        if points is None:
            return PointsResponse(points=UNKNOWN_POINTS)
        return PointsResponse(points=str(points))

    return app


app = create_app()
