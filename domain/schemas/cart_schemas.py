from pydantic import BaseModel, Field, field_validator


class Item(BaseModel):
    """A product placed in the shopping cart"""

    name: str = Field(..., min_length=1, description="Product name")
    price: int = Field(..., ge=0, description="Price in whole dollars")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Item name must not be blank")
        return v


class CheckoutLine(BaseModel):
    """One item line printed at checkout"""

    name: str
    price: int

    @classmethod
    def from_item(cls, item: Item) -> "CheckoutLine":
        return cls(name=item.name, price=item.price)

    def render(self) -> str:
        return f"Item: {self.name}, Price: {self.price}"
