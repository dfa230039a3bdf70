from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.deps import get_payment_service
from app.schemas.payment import OrderCreate, PaymentVerification, PaymentVerificationResult
from app.services.payment_service import PaymentService

router = APIRouter()


@router.post("/create-order")
def create_order(payload: OrderCreate, payments: PaymentService = Depends(get_payment_service)):
    return payments.create_order(payload.amount, payload.currency, payload.receipt)


@router.post(
    "/verify-payment",
    response_model=PaymentVerificationResult,
    responses={400: {"description": "Payment Verification Failed"}},
)
def verify_payment(
    payload: PaymentVerification,
    payments: PaymentService = Depends(get_payment_service),
):
    verified = payments.verify(
        payload.razorpay_order_id,
        payload.razorpay_payment_id,
        payload.razorpay_signature,
    )
    if not verified:
        return JSONResponse(
            status_code=400,
            content={"verified": False, "message": "Payment Verification Failed"},
        )
    return PaymentVerificationResult(verified=True, message="Payment Verified")
