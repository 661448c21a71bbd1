from fastapi import APIRouter, Header, Request

from trophy_cabinet.services.billing_service import BillingService

router = APIRouter()


@router.post("/webhook")
async def stripe_webhook(
    request: Request,
    stripe_signature: str | None = Header(None, alias="stripe-signature"),
):
    """
    Receive a Stripe webhook.

    The signature is verified and the event acknowledged; no tenant state
    is changed here.
    """
    payload = await request.body()
    BillingService().handle_webhook(payload, stripe_signature)
    return {"received": True}
