import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from fastapi import BackgroundTasks, Depends, FastAPI, File, Form, HTTPException, Query, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError, PyMongoError

from blocks import UnknownImageError, UnresolvedPlaceholderError, article_files, assign_ids, check_images, merge_blocks
from database import connect, create_document, ensure_indexes, get_documents, serialize, update_document
from forms import FormFieldError, parse_blocks, parse_bool, product_fields
from mailer import Mailer, send_order_confirmation
from media import UPLOAD_DIR, URL_PREFIX, MediaStore
from schemas import (
    Article as ArticleSchema,
    Category as CategorySchema,
    Order as OrderSchema,
    OrderUpdate,
    Partner as PartnerSchema,
    Product as ProductSchema,
)

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = [
    o.strip()
    for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:3001").split(",")
    if o.strip()
]

# Per-request upload caps
MAX_ARTICLE_IMAGES = 20
MAX_PRODUCT_IMAGES = 10
MAX_SEO_IMAGES = 5


@asynccontextmanager
async def lifespan(app: FastAPI):
    client, app.state.db = connect()
    if app.state.db is not None:
        try:
            ensure_indexes(app.state.db)
        except PyMongoError:
            logger.exception("Could not create indexes")
    app.state.media = MediaStore(UPLOAD_DIR)
    app.state.mailer = Mailer()
    yield
    if client is not None:
        client.close()
        logger.info("MongoDB connection closed")


app = FastAPI(title="Shop Admin API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount(URL_PREFIX, StaticFiles(directory=UPLOAD_DIR, check_dir=False), name="uploads")


# Dependencies
def get_db(request: Request):
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise HTTPException(500, "Database not configured")
    return db


def get_media(request: Request) -> MediaStore:
    return request.app.state.media


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer


# Error handling
def _first_error(errors: List[Dict[str, Any]]) -> str:
    if not errors:
        return "Invalid request"
    err = errors[0]
    loc = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path", "form"))
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": _first_error(exc.errors())})


@app.exception_handler(ValidationError)
async def schema_validation_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": _first_error(exc.errors())})


@app.exception_handler(FormFieldError)
@app.exception_handler(UnresolvedPlaceholderError)
@app.exception_handler(UnknownImageError)
async def bad_input_handler(request: Request, exc: ValueError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(DuplicateKeyError)
async def duplicate_key_handler(request: Request, exc: DuplicateKeyError):
    key_value = (getattr(exc, "details", None) or {}).get("keyValue") or {}
    key = next(iter(key_value), "slug")
    return JSONResponse(status_code=400, content={"detail": f"{key} already exists"})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# Helpers
def to_oid(oid: Optional[str]) -> ObjectId:
    if not oid or not ObjectId.is_valid(oid):
        raise HTTPException(status_code=400, detail="Invalid ID")
    return ObjectId(oid)


def new_block_id() -> str:
    return str(ObjectId())


def find_or_404(db, collection: str, oid: ObjectId, label: str) -> Dict[str, Any]:
    doc = db[collection].find_one({"_id": oid})
    if not doc:
        raise HTTPException(404, f"{label} not found")
    return doc


def single_upload(media: MediaStore, upload: Optional[UploadFile]) -> Optional[str]:
    if upload is None or not upload.filename:
        return None
    return media.save(upload)


def check_upload_count(field: str, uploads: Optional[List[UploadFile]], limit: int) -> None:
    count = len([u for u in uploads or [] if u is not None and u.filename])
    if count > limit:
        raise HTTPException(400, f"Too many files in {field}: {count} (max {limit})")


@app.get("/")
def read_root():
    return {"message": "Shop admin backend is running"}


@app.get("/test")
def test_database(request: Request):
    db = getattr(request.app.state, "db", None)
    response = {
        "backend": "✅ Running",
        "database": "❌ Not Available",
        "database_url": "✅ Set" if os.getenv("DATABASE_URL") else "❌ Not Set",
        "database_name": "✅ Set" if os.getenv("DATABASE_NAME") else "❌ Not Set",
        "connection_status": "Not Connected",
        "collections": []
    }
    if db is not None:
        response["database"] = "✅ Available"
        response["connection_status"] = "Connected"
        try:
            response["collections"] = db.list_collection_names()[:10]
            response["database"] = "✅ Connected & Working"
        except PyMongoError as e:
            response["database"] = f"⚠️ Connected but Error: {str(e)[:50]}"
    return response


# Articles
@app.post("/api/articles", status_code=201)
def create_article(
    title: Optional[str] = Form(None),
    slug: Optional[str] = Form(None),
    blocks: Optional[str] = Form(None),
    published: Optional[str] = Form(None),
    mainImage: Optional[UploadFile] = File(None),
    images: Optional[List[UploadFile]] = File(None),
    db=Depends(get_db),
    media: MediaStore = Depends(get_media),
):
    if not title or not slug:
        raise HTTPException(400, "Title and slug are required")
    if db["article"].find_one({"title": title}):
        raise HTTPException(400, "Title already exists")
    check_upload_count("images", images, MAX_ARTICLE_IMAGES)
    incoming = assign_ids(parse_blocks(blocks), new_block_id)

    uploaded = media.save_all(images)
    main_image = single_upload(media, mainImage)
    try:
        resolved = merge_blocks([], incoming, uploaded)
        check_images(resolved, lambda f: f in uploaded or media.exists(f))
        article = ArticleSchema(
            title=title,
            slug=slug,
            published=parse_bool(published),
            mainImage=main_image,
            blocks=resolved,
        )
        article_id = create_document(db, "article", article)
    except Exception:
        media.delete_all(uploaded + [main_image])
        raise

    saved = db["article"].find_one({"_id": ObjectId(article_id)})
    used = set(article_files(saved))
    media.delete_all(f for f in uploaded if f not in used)
    logger.info("Created article %s (%s)", article_id, slug)
    return {"message": "Article created", "article": serialize(saved)}


@app.put("/api/articles/{article_id}")
def update_article(
    article_id: str,
    title: Optional[str] = Form(None),
    slug: Optional[str] = Form(None),
    blocks: Optional[str] = Form(None),
    published: Optional[str] = Form(None),
    mainImage: Optional[UploadFile] = File(None),
    images: Optional[List[UploadFile]] = File(None),
    db=Depends(get_db),
    media: MediaStore = Depends(get_media),
):
    oid = to_oid(article_id)
    if not title or not slug or not blocks or not published:
        raise HTTPException(400, "Title, slug, blocks and published are required")
    existing = find_or_404(db, "article", oid, "Article")
    if db["article"].find_one({"title": title, "_id": {"$ne": oid}}):
        raise HTTPException(400, "Title already exists")
    check_upload_count("images", images, MAX_ARTICLE_IMAGES)
    incoming = assign_ids(parse_blocks(blocks), new_block_id)

    uploaded = media.save_all(images)
    main_image = single_upload(media, mainImage)
    try:
        merged = merge_blocks(existing.get("blocks") or [], incoming, uploaded)
        known = set(uploaded) | set(article_files(existing))
        check_images(merged, lambda f: f in known or media.exists(f))
        article = ArticleSchema(
            title=title,
            slug=slug,
            published=published != "false",
            mainImage=main_image or existing.get("mainImage"),
            blocks=merged,
        )
        updated = update_document(db, "article", oid, article.model_dump())
    except Exception:
        media.delete_all(uploaded + [main_image])
        raise
    if updated is None:
        raise HTTPException(404, "Article not found")

    # Drop files the article no longer points at
    used = set(article_files(updated))
    media.delete_all(f for f in article_files(existing) + uploaded if f not in used)
    return serialize(updated)


@app.get("/api/articles")
def list_articles(db=Depends(get_db)):
    return [serialize(a) for a in get_documents(db, "article")]


@app.get("/api/articles/slug/{slug}")
def get_article_by_slug(slug: str, db=Depends(get_db)):
    article = db["article"].find_one({"slug": slug})
    if not article:
        raise HTTPException(404, "Article not found")
    return serialize(article)


@app.get("/api/articles/{article_id}")
def get_article(article_id: str, db=Depends(get_db)):
    return serialize(find_or_404(db, "article", to_oid(article_id), "Article"))


@app.delete("/api/articles/{article_id}")
def delete_article(article_id: str, db=Depends(get_db), media: MediaStore = Depends(get_media)):
    oid = to_oid(article_id)
    article = find_or_404(db, "article", oid, "Article")
    media.delete_all(article_files(article))
    db["article"].delete_one({"_id": oid})
    return {"message": "Article deleted"}


# Categories
def category_filter(parent: Optional[str]) -> Dict[str, Any]:
    """Unset: every category. "null": roots only. An id: its direct children."""
    if parent is None:
        return {}
    if parent == "null":
        return {"parentCategory": None}
    return {"parentCategory": to_oid(parent)}


def resolve_parent(db, raw: Optional[str], category_id: Optional[ObjectId] = None) -> Optional[ObjectId]:
    if raw is None or raw == "" or raw == "null":
        return None
    parent_id = to_oid(raw)
    if category_id is not None and parent_id == category_id:
        raise HTTPException(400, "A category cannot be its own parent")
    parent = db["category"].find_one({"_id": parent_id})
    if not parent:
        raise HTTPException(400, "Parent category not found")
    if category_id is not None:
        # Walk up from the new parent; meeting ourselves means a cycle
        seen = {parent_id}
        ancestor = parent.get("parentCategory")
        while ancestor is not None and ancestor not in seen:
            if ancestor == category_id:
                raise HTTPException(400, "A category cannot be moved under its own subcategory")
            seen.add(ancestor)
            doc = db["category"].find_one({"_id": ancestor}, {"parentCategory": 1})
            ancestor = doc.get("parentCategory") if doc else None
    return parent_id


@app.get("/api/categories")
def list_categories(parentCategory: Optional[str] = Query(None), db=Depends(get_db)):
    return [serialize(c) for c in get_documents(db, "category", category_filter(parentCategory))]


@app.post("/api/categories", status_code=201)
def create_category(
    name: Optional[str] = Form(None),
    slug: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    parentCategory: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db=Depends(get_db),
    media: MediaStore = Depends(get_media),
):
    if image is None or not image.filename:
        raise HTTPException(400, "Image is required")
    if not name or not slug or not description:
        raise HTTPException(400, "Name, slug and description are required")
    if db["category"].find_one({"name": name}):
        raise HTTPException(400, "The name is already used")
    parent_id = resolve_parent(db, parentCategory)

    img = media.save(image)
    try:
        data = CategorySchema(name=name, slug=slug, description=description, img=img).model_dump()
        data["parentCategory"] = parent_id
        category_id = create_document(db, "category", data)
    except Exception:
        media.delete(img)
        raise
    return serialize(db["category"].find_one({"_id": ObjectId(category_id)}))


@app.get("/api/categories/slug/{slug}")
def get_category_by_slug(slug: str, db=Depends(get_db)):
    category = db["category"].find_one({"slug": slug.lower()})
    if not category:
        raise HTTPException(404, "Category not found")
    return serialize(category)


@app.get("/api/categories/{category_id}")
def get_category(category_id: str, db=Depends(get_db)):
    return serialize(find_or_404(db, "category", to_oid(category_id), "Category"))


@app.put("/api/categories/{category_id}")
def update_category(
    category_id: str,
    name: Optional[str] = Form(None),
    slug: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    parentCategory: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db=Depends(get_db),
    media: MediaStore = Depends(get_media),
):
    oid = to_oid(category_id)
    category = find_or_404(db, "category", oid, "Category")
    if name and db["category"].find_one({"name": name, "_id": {"$ne": oid}}):
        raise HTTPException(400, "The name is already used")
    parent_id = category.get("parentCategory")
    if parentCategory is not None:
        parent_id = resolve_parent(db, parentCategory, oid)

    new_img = single_upload(media, image)
    try:
        data = CategorySchema(
            name=name or category["name"],
            slug=slug or category["slug"],
            description=description or category["description"],
            img=new_img or category["img"],
        ).model_dump()
        data["parentCategory"] = parent_id
        updated = update_document(db, "category", oid, data)
    except Exception:
        media.delete(new_img)
        raise
    if updated is None:
        raise HTTPException(404, "Category not found")
    if new_img:
        media.delete(category.get("img"))
    return serialize(updated)


@app.delete("/api/categories/{category_id}")
def delete_category(category_id: str, db=Depends(get_db), media: MediaStore = Depends(get_media)):
    oid = to_oid(category_id)
    category = find_or_404(db, "category", oid, "Category")
    if db["category"].count_documents({"parentCategory": oid}):
        raise HTTPException(400, "Category has subcategories")
    db["category"].delete_one({"_id": oid})
    media.delete(category.get("img"))
    return {"success": True}


# Products
def product_form(
    name: Optional[str] = Form(None),
    shortDescription: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    stock: Optional[str] = Form(None),
    sku: Optional[str] = Form(None),
    sizes: Optional[str] = Form(None),
    weight: Optional[str] = Form(None),
    dimensions: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    discountPrice: Optional[str] = Form(None),
    tax: Optional[str] = Form(None),
    material: Optional[str] = Form(None),
    category: Optional[List[str]] = Form(None),
    metaSlug: Optional[str] = Form(None),
    metaTitle: Optional[str] = Form(None),
    metaDescription: Optional[str] = Form(None),
    slug: Optional[str] = Form(None),
    isPublished: Optional[str] = Form(None),
    variants: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    relatedProducts: Optional[List[str]] = Form(None),
) -> Dict[str, Any]:
    return {
        "name": name,
        "shortDescription": shortDescription,
        "content": content,
        "stock": stock,
        "sku": sku,
        "sizes": sizes,
        "weight": weight,
        "dimensions": dimensions,
        "price": price,
        "discountPrice": discountPrice,
        "tax": tax,
        "material": material,
        "category": category,
        "metaSlug": metaSlug,
        "metaTitle": metaTitle,
        "metaDescription": metaDescription,
        "slug": slug,
        "isPublished": isPublished,
        "variants": variants,
        "tags": tags,
        "relatedProducts": relatedProducts,
    }


def product_document(fields: Dict[str, Any], images: List[str], seo_images: List[str]) -> Dict[str, Any]:
    """Validate normalized fields and return them in stored form (ObjectId references)."""
    if not fields.get("name") or not fields.get("slug"):
        raise HTTPException(400, "Name and slug are required")
    product = ProductSchema(
        **{
            **fields,
            "category": [str(c) for c in fields["category"]],
            "relatedProducts": [str(p) for p in fields["relatedProducts"]],
            "images": images,
            "seoImages": seo_images,
        }
    )
    data = product.model_dump()
    data["category"] = list(fields["category"])
    data["relatedProducts"] = list(fields["relatedProducts"])
    return data


def present_products(db, docs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Categories as id strings, related products as short summaries."""
    related_ids = {rid for d in docs for rid in d.get("relatedProducts") or []}
    summaries = {}
    if related_ids:
        for r in db["product"].find({"_id": {"$in": list(related_ids)}}, {"name": 1, "images": 1, "slug": 1}):
            summaries[r["_id"]] = serialize(r)
    out = []
    for doc in docs:
        item = serialize(doc)
        item["category"] = [str(c) for c in doc.get("category") or []]
        item["relatedProducts"] = [summaries[r] for r in doc.get("relatedProducts") or [] if r in summaries]
        out.append(item)
    return out


def present_product(db, doc: Dict[str, Any]) -> Dict[str, Any]:
    return present_products(db, [doc])[0]


@app.get("/api/products")
def list_products(db=Depends(get_db)):
    return present_products(db, get_documents(db, "product"))


@app.get("/api/products/slug/{slug}")
def get_product_by_slug(slug: str, db=Depends(get_db)):
    product = db["product"].find_one({"slug": slug})
    if not product:
        raise HTTPException(404, "Product not found")
    return present_product(db, product)


@app.get("/api/products/{product_id}")
def get_product(product_id: str, db=Depends(get_db)):
    return present_product(db, find_or_404(db, "product", to_oid(product_id), "Product"))


@app.post("/api/products", status_code=201)
def create_product(
    form: Dict[str, Any] = Depends(product_form),
    images: Optional[List[UploadFile]] = File(None),
    seoImages: Optional[List[UploadFile]] = File(None),
    db=Depends(get_db),
    media: MediaStore = Depends(get_media),
):
    fields = product_fields(form)
    if fields["name"] and db["product"].find_one({"name": fields["name"]}):
        raise HTTPException(400, "A product with this name already exists.")

    check_upload_count("images", images, MAX_PRODUCT_IMAGES)
    check_upload_count("seoImages", seoImages, MAX_SEO_IMAGES)
    saved_images = media.save_all(images)
    saved_seo = media.save_all(seoImages)
    try:
        product_id = create_document(db, "product", product_document(fields, saved_images, saved_seo))
    except Exception:
        media.delete_all(saved_images + saved_seo)
        raise
    product = db["product"].find_one({"_id": ObjectId(product_id)})
    return {"message": "Product created successfully", "product": present_product(db, product)}


@app.put("/api/products/{product_id}")
def update_product(
    product_id: str,
    form: Dict[str, Any] = Depends(product_form),
    images: Optional[List[UploadFile]] = File(None),
    seoImages: Optional[List[UploadFile]] = File(None),
    db=Depends(get_db),
    media: MediaStore = Depends(get_media),
):
    oid = to_oid(product_id)
    existing = find_or_404(db, "product", oid, "Product")
    fields = product_fields(form)
    if fields["name"] and db["product"].find_one({"name": fields["name"], "_id": {"$ne": oid}}):
        raise HTTPException(400, "A product with this name already exists.")

    check_upload_count("images", images, MAX_PRODUCT_IMAGES)
    check_upload_count("seoImages", seoImages, MAX_SEO_IMAGES)
    saved_images = media.save_all(images)
    saved_seo = media.save_all(seoImages)
    try:
        data = product_document(
            fields,
            saved_images or existing.get("images") or [],
            saved_seo or existing.get("seoImages") or [],
        )
        updated = update_document(db, "product", oid, data)
    except Exception:
        media.delete_all(saved_images + saved_seo)
        raise
    if updated is None:
        raise HTTPException(404, "Product not found")

    if saved_images:
        media.delete_all(existing.get("images") or [])
    if saved_seo:
        media.delete_all(existing.get("seoImages") or [])
    return {"message": "Product updated successfully", "product": present_product(db, updated)}


@app.delete("/api/products/{product_id}")
def delete_product(product_id: str, db=Depends(get_db), media: MediaStore = Depends(get_media)):
    oid = to_oid(product_id)
    product = find_or_404(db, "product", oid, "Product")
    db["product"].delete_one({"_id": oid})
    db["product"].update_many({"relatedProducts": oid}, {"$pull": {"relatedProducts": oid}})
    media.delete_all((product.get("images") or []) + (product.get("seoImages") or []))
    return {"message": "Product deleted"}


# Orders
@app.post("/api/orders", status_code=201)
def create_order(
    order: OrderSchema,
    background_tasks: BackgroundTasks,
    db=Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
):
    data = order.model_dump()
    data["status"] = "pending"
    if not data.get("date"):
        data["date"] = datetime.now(timezone.utc).strftime("%d/%m/%Y")
    order_id = create_document(db, "order", data)
    saved = serialize(db["order"].find_one({"_id": ObjectId(order_id)}))
    logger.info("Order %s placed (%d line(s), total %.2f)", order_id, len(order.products), order.totalAmount)
    if saved.get("email"):
        background_tasks.add_task(send_order_confirmation, mailer, saved)
    return saved


@app.get("/api/orders")
def list_orders(db=Depends(get_db)):
    return [serialize(o) for o in get_documents(db, "order")]


@app.get("/api/orders/{order_id}")
def get_order(order_id: str, db=Depends(get_db)):
    return serialize(find_or_404(db, "order", to_oid(order_id), "Order"))


@app.put("/api/orders/{order_id}")
def update_order(order_id: str, payload: OrderUpdate, db=Depends(get_db)):
    oid = to_oid(order_id)
    changes = payload.model_dump(exclude_none=True)
    if not changes:
        raise HTTPException(400, "Nothing to update: send status and/or paymentStatus")
    updated = update_document(db, "order", oid, changes)
    if updated is None:
        raise HTTPException(404, "Order not found")
    return serialize(updated)


@app.delete("/api/orders/{order_id}")
def delete_order(order_id: str, db=Depends(get_db)):
    result = db["order"].delete_one({"_id": to_oid(order_id)})
    if result.deleted_count == 0:
        raise HTTPException(404, "Order not found")
    return {"message": "Order deleted successfully"}


# Partners
@app.get("/api/partenaires")
def list_partners(db=Depends(get_db)):
    return [serialize(p) for p in get_documents(db, "partner")]


@app.get("/api/partenaires/{partner_id}")
def get_partner(partner_id: str, db=Depends(get_db)):
    return serialize(find_or_404(db, "partner", to_oid(partner_id), "Partner"))


@app.post("/api/partenaires", status_code=201)
def create_partner(
    name: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db=Depends(get_db),
    media: MediaStore = Depends(get_media),
):
    if not name or image is None or not image.filename:
        raise HTTPException(400, "Name and image are required.")
    filename = media.save(image)
    try:
        partner_id = create_document(db, "partner", PartnerSchema(name=name, image=filename))
    except Exception:
        media.delete(filename)
        raise
    return serialize(db["partner"].find_one({"_id": ObjectId(partner_id)}))


@app.put("/api/partenaires/{partner_id}")
def update_partner(
    partner_id: str,
    name: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db=Depends(get_db),
    media: MediaStore = Depends(get_media),
):
    oid = to_oid(partner_id)
    if not name:
        raise HTTPException(400, "Name is required.")
    partner = find_or_404(db, "partner", oid, "Partner")
    new_image = single_upload(media, image)
    changes = PartnerSchema(name=name, image=new_image or partner["image"]).model_dump()
    updated = update_document(db, "partner", oid, changes)
    if updated is None:
        media.delete(new_image)
        raise HTTPException(404, "Partner not found")
    if new_image:
        media.delete(partner.get("image"))
    return serialize(updated)


@app.delete("/api/partenaires/{partner_id}")
def delete_partner(partner_id: str, db=Depends(get_db), media: MediaStore = Depends(get_media)):
    oid = to_oid(partner_id)
    partner = find_or_404(db, "partner", oid, "Partner")
    db["partner"].delete_one({"_id": oid})
    media.delete(partner.get("image"))
    return {"message": "Deleted successfully."}


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
