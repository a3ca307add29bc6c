"""
Database Schemas for the shop administration backend

Each Pydantic model represents a collection in MongoDB.
Collection name is the lowercase of the class name.
"""
from typing import List, Literal, Optional

from bson import ObjectId
from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

OrderStatus = Literal["pending", "shipped", "delivered"]
PaymentStatus = Literal["unpaid", "paid"]


class ArticleBlock(BaseModel):
    id: Optional[str] = Field(None, description="Stable block id, kept across edits")
    type: Literal["text", "image"]
    content: str = Field(..., description="Text, or image filename / 'placeholder'")

    @field_validator("id", mode="before")
    @classmethod
    def id_as_string(cls, v):
        return None if v is None or v == "" else str(v)


class Article(BaseModel):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, description="URL-safe identifier")
    mainImage: Optional[str] = None
    published: bool = False
    blocks: List[ArticleBlock] = []


class Category(BaseModel):
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, description="URL-safe identifier, lower-case")
    description: str = Field(..., min_length=1)
    img: str = Field(..., description="Image filename")
    parentCategory: Optional[str] = Field(None, description="Parent category id, None for a root")

    @field_validator("slug")
    @classmethod
    def lower_slug(cls, v: str) -> str:
        return v.strip().lower()


class Dimensions(BaseModel):
    length: float = 0
    width: float = 0
    height: float = 0


class VariantOption(BaseModel):
    option: str = Field(..., description="e.g., Size or Color")
    values: List[str] = []


class Product(BaseModel):
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    shortDescription: Optional[str] = None
    content: Optional[str] = None
    price: float = Field(..., ge=0)
    discountPrice: float = Field(0, ge=0)
    tax: float = 0
    stock: int = 0
    sku: Optional[str] = None
    sizes: Optional[str] = None
    weight: float = 0
    dimensions: Dimensions = Dimensions()
    material: List[str] = []
    category: List[str] = Field([], description="Category ids")
    tags: List[str] = []
    variants: List[VariantOption] = []
    metaSlug: Optional[str] = None
    metaTitle: Optional[str] = None
    metaDescription: Optional[str] = None
    images: List[str] = []
    seoImages: List[str] = []
    relatedProducts: List[str] = Field([], description="Product ids")
    isPublished: bool = False


class Partner(BaseModel):
    name: str = Field(..., min_length=1)
    image: str = Field(..., description="Image filename")


class OrderVariants(BaseModel):
    Size: Optional[str] = None
    Color: Optional[str] = None


class OrderLine(BaseModel):
    """Point-in-time copy of a product as it was ordered."""
    productId: str = Field(..., validation_alias=AliasChoices("productId", "_id", "id"))
    name: Optional[str] = None
    image: Optional[str] = None
    price: float = Field(0, ge=0)
    discountPrice: Optional[float] = Field(None, ge=0)
    quantity: int = Field(1, ge=1)
    stock: Optional[int] = None
    variants: OrderVariants = OrderVariants()

    @field_validator("productId")
    @classmethod
    def valid_product_id(cls, v: str) -> str:
        if not ObjectId.is_valid(v):
            raise ValueError("Invalid product id")
        return v


class Order(BaseModel):
    clientName: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    email: EmailStr
    phoneNumber: str = Field(..., min_length=1)
    shippingAddress: str = Field(..., min_length=1)
    products: List[OrderLine] = Field(..., min_length=1)
    totalAmount: float = Field(..., gt=0)
    shippingCost: float = Field(0, ge=0)
    code: str = "N/A"
    date: Optional[str] = Field(None, description="Order date shown to the client, defaults to the day it was placed")
    status: OrderStatus = "pending"
    paymentStatus: PaymentStatus = "unpaid"


class OrderUpdate(BaseModel):
    status: Optional[OrderStatus] = None
    paymentStatus: Optional[PaymentStatus] = None
