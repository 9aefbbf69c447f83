from pydantic import BaseModel, ConfigDict, Field

from features.chat.telegram.model.user import User


class Invoice(BaseModel):
    """https://core.telegram.org/bots/api#invoice"""
    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class SuccessfulPayment(BaseModel):
    """https://core.telegram.org/bots/api#successfulpayment"""
    currency: str
    total_amount: int
    invoice_payload: str
    telegram_payment_charge_id: str
    provider_payment_charge_id: str
    shipping_option_id: str | None = None


class RefundedPayment(BaseModel):
    """https://core.telegram.org/bots/api#refundedpayment"""
    currency: str
    total_amount: int
    invoice_payload: str
    telegram_payment_charge_id: str
    provider_payment_charge_id: str | None = None


class ShippingAddress(BaseModel):
    """https://core.telegram.org/bots/api#shippingaddress"""
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class ShippingQuery(BaseModel):
    """https://core.telegram.org/bots/api#shippingquery"""
    model_config = ConfigDict(populate_by_name = True)

    id: str
    from_user: User = Field(alias = "from")
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(BaseModel):
    """https://core.telegram.org/bots/api#precheckoutquery"""
    model_config = ConfigDict(populate_by_name = True)

    id: str
    from_user: User = Field(alias = "from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: str | None = None
