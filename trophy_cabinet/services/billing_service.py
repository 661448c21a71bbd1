import logging
import stripe

from trophy_cabinet.config import settings
from trophy_cabinet.core.exceptions import ValidationException

logger = logging.getLogger(__name__)

# Events the billing provider is configured to send. They are acknowledged
# and logged; subscription state is managed outside this API.
KNOWN_EVENT_TYPES = {
    "checkout.session.completed",
    "customer.subscription.created",
    "customer.subscription.updated",
    "customer.subscription.deleted",
    "invoice.paid",
    "invoice.payment_failed",
}


class BillingService:
    """Receives and acknowledges billing webhooks"""

    def __init__(self, webhook_secret: str | None = None):
        self.webhook_secret = (
            webhook_secret if webhook_secret is not None else settings.STRIPE_WEBHOOK_SECRET
        )

    def handle_webhook(self, payload: bytes, signature: str | None) -> str:
        """
        Verify a Stripe webhook and acknowledge it.

        Args:
            payload: Raw request body
            signature: Value of the stripe-signature header

        Returns:
            The event type

        Raises:
            ValidationException: If the signature is missing or invalid
        """
        if not signature:
            raise ValidationException("Missing stripe-signature header")

        try:
            event = stripe.Webhook.construct_event(payload, signature, self.webhook_secret)
        except (ValueError, stripe.SignatureVerificationError) as e:
            logger.warning("Webhook signature verification failed: %s", e)
            raise ValidationException(f"Webhook Error: {e}")

        event_type = event["type"]
        if event_type in KNOWN_EVENT_TYPES:
            logger.info("Billing event %s received (%s)", event_type, event["id"])
        else:
            logger.info("Unhandled billing event type: %s", event_type)
        return event_type
