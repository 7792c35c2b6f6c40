# storefront/domain/schemas.py
from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from decimal import Decimal


ThemeType = Literal["dark", "light"]
TicketStatus = Literal["new", "replied"]


class Product(BaseModel):
    """Pakiet waluty w katalogu."""

    id: int
    name: str
    amount: int = Field(..., description="Ilosc waluty (G) w pakiecie")
    price: Decimal = Field(..., description="Cena w rublach")
    image: str
    badge: Optional[str] = None


class CartItem(Product):
    quantity: int = Field(1, ge=1)


class Review(BaseModel):
    id: int
    user: str
    text: str
    rating: int = Field(..., ge=1, le=5)
    date: str


class SupportMessage(BaseModel):
    id: int
    contact: str
    text: str
    date: str
    status: TicketStatus = "new"


# ---- inputs ----

class ProductCreate(BaseModel):
    """Formularz admina dla nowego pakietu."""

    name: str = Field(..., min_length=1, max_length=100)
    amount: int = Field(..., gt=0, description="Ilosc G (musi byc > 0)")
    price: Decimal = Field(..., ge=0, description="Cena (nie moze byc ujemna)")
    image: Optional[str] = None


class CartItemIn(BaseModel):
    product_id: int


class QuantityDelta(BaseModel):
    delta: int


class PromoIn(BaseModel):
    code: str = Field(..., min_length=1)


class OrderIn(BaseModel):
    """Dane platnosci z formularza zamowienia."""

    buyer_id: str = Field(..., min_length=1, description="ID gracza w grze")
    email: str = Field(..., min_length=3)
    payment_method: str = Field("SBP", min_length=1)


class TicketIn(BaseModel):
    contact: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)


class ReviewIn(BaseModel):
    user: str = Field(..., min_length=1, max_length=100)
    text: str = Field(..., min_length=1)
    rating: int = Field(5, ge=1, le=5)


class AdminLogin(BaseModel):
    password: str


# ---- outputs ----

class PromoResult(BaseModel):
    code: str
    found: bool
    discount_percent: int = 0


class BonusProgress(BaseModel):
    goal: Decimal
    progress: Decimal = Field(..., description="0..100 (%)")
    remaining: Decimal
    unlocked: bool
    reward: str


class CartSummary(BaseModel):
    items: List[CartItem]
    item_count: int
    subtotal: Decimal
    applied_code: Optional[str] = None
    discount_percent: int = 0
    discount_amount: int = 0
    total: int
    bonus: BonusProgress


class OrderReceipt(BaseModel):
    buyer_id: str
    email: str
    payment_method: str
    items: List[CartItem]
    subtotal: Decimal
    discount_percent: int
    total: int
    status: str = "accepted"


class TicketList(BaseModel):
    tickets: List[SupportMessage]
    new_count: int


class TicketReply(BaseModel):
    ticket: SupportMessage
    reply_url: str


class ThemeOut(BaseModel):
    theme: ThemeType
