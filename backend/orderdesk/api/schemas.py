from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

# Matches any string with at least one non-whitespace character
NOT_BLANK = r"\S"


# Products

class CreateProductDto(BaseModel):
    product_name: str = Field(..., pattern=NOT_BLANK, examples=["Espresso Machine"])
    product_type: int = Field(..., ge=0, examples=[2])
    product_price: float = Field(..., ge=0, examples=[249.9])
    product_qnt: int = Field(..., ge=0, examples=[10])


class UpdateProductDto(BaseModel):
    id: int
    product_name: Optional[str] = Field(None, pattern=NOT_BLANK)
    product_type: Optional[int] = Field(None, ge=0)
    product_price: Optional[float] = Field(None, ge=0)
    product_qnt: Optional[int] = Field(None, ge=0)


class ProductDto(BaseModel):
    id: Optional[int] = None
    product_name: str = ""
    product_type: int = 0
    product_price: float = 0.0
    product_qnt: int = 0


# Addresses

class CreateAddressDto(BaseModel):
    user_id: int
    street: str = Field(..., pattern=NOT_BLANK, examples=["Hauptstrasse"])
    house_number: str = Field(..., pattern=NOT_BLANK, examples=["12a"])
    city: str = Field(..., pattern=NOT_BLANK, examples=["Cologne"])
    state: Optional[str] = None
    zip: str = Field(..., pattern=NOT_BLANK, examples=["50667"])
    country: str = Field(..., pattern=NOT_BLANK, examples=["DE"])


class UpdateAddressDto(BaseModel):
    id: int
    user_id: Optional[int] = None
    street: Optional[str] = Field(None, pattern=NOT_BLANK)
    house_number: Optional[str] = Field(None, pattern=NOT_BLANK)
    city: Optional[str] = Field(None, pattern=NOT_BLANK)
    state: Optional[str] = None
    zip: Optional[str] = Field(None, pattern=NOT_BLANK)
    country: Optional[str] = Field(None, pattern=NOT_BLANK)


class AddressDto(BaseModel):
    id: Optional[int] = None
    user_id: Optional[int] = None
    street: str = ""
    house_number: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = ""


# Users

class CreateUserDto(BaseModel):
    first_name: str = Field(..., pattern=NOT_BLANK, examples=["Ada"])
    last_name: str = Field(..., pattern=NOT_BLANK, examples=["Lovelace"])
    email: EmailStr = Field(..., examples=["ada@example.com"])
    raw_password: str = Field(..., min_length=8, pattern=NOT_BLANK)


class UpdateUserDto(BaseModel):
    id: int
    first_name: Optional[str] = Field(None, pattern=NOT_BLANK)
    last_name: Optional[str] = Field(None, pattern=NOT_BLANK)
    email: Optional[EmailStr] = None


class UserDto(BaseModel):
    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""


# Orders

class CreateOrderDto(BaseModel):
    order_owner: int = Field(..., examples=[1])
    order_products: List[int] = Field(default_factory=list, examples=[[101, 102, 101]])


class UpdateOrderDto(BaseModel):
    id: int
    order_owner: int
    order_products: List[int] = Field(...)


class OrderView(BaseModel):
    id: Optional[int] = None
    order_owner: Optional[UserDto] = None
    order_products: List[ProductDto] = []
    issue_date: datetime
