"""
Decoding of multipart form fields.

Admin forms are sent as multipart/form-data, so nested values (blocks,
dimensions, variants, tags...) arrive as JSON text and numbers arrive as
strings. These helpers turn them into plain Python values or raise
``FormFieldError``.
"""
import json
import math
from typing import Any, Dict, Iterable, List, Optional, Union

from bson import ObjectId
from pydantic import TypeAdapter, ValidationError

from schemas import ArticleBlock, Dimensions, VariantOption

# Largest integer BSON can store
INT64_MAX = 2 ** 63 - 1


class FormFieldError(ValueError):
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


def parse_json(field: str, raw: Optional[str], default: Any = None) -> Any:
    if raw is None or raw == "":
        return default
    try:
        return json.loads(raw)
    except ValueError:
        raise FormFieldError(field, "malformed JSON")


def parse_bool(raw: Any, default: bool = False) -> bool:
    if raw is None or raw == "":
        return default
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in ("true", "1", "yes", "on")


def to_number(raw: Any) -> Optional[float]:
    """``float(raw)`` or None for blanks, non-numbers, NaN and infinities."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def coerce_number(raw: Any, default: float = 0) -> float:
    value = to_number(raw)
    return default if value is None else value


def coerce_int(raw: Any, default: int = 0, field: str = "value") -> int:
    """Integer from ``raw``; blanks fall back to ``default``, values past int64 are rejected."""
    value = to_number(raw)
    if value is None:
        return default
    if abs(value) > INT64_MAX:
        raise FormFieldError(field, "number out of range")
    return int(value)


def require_number(field: str, raw: Any) -> float:
    value = to_number(raw)
    if value is None:
        raise FormFieldError(field, "a number is required")
    return value


def parse_refs(raw: Union[None, str, Iterable[str]]) -> List[ObjectId]:
    """Collect object ids from a single id, a list of ids, or JSON text of either.

    Anything that is not a valid ObjectId is dropped. Duplicates are removed,
    first occurrence wins.
    """
    if raw is None:
        return []
    values = [raw] if isinstance(raw, str) else list(raw)

    candidates = []
    for value in values:
        if isinstance(value, str):
            text = value.strip()
            if text.startswith("[") or text.startswith('"'):
                try:
                    decoded = json.loads(text)
                except ValueError:
                    decoded = text
            else:
                decoded = text
        else:
            decoded = value
        if isinstance(decoded, list):
            candidates.extend(decoded)
        else:
            candidates.append(decoded)

    refs = []
    for candidate in candidates:
        if isinstance(candidate, ObjectId):
            oid = candidate
        elif isinstance(candidate, str) and ObjectId.is_valid(candidate):
            oid = ObjectId(candidate)
        else:
            continue
        if oid not in refs:
            refs.append(oid)
    return refs


def _validated(field: str, adapter: TypeAdapter, value: Any) -> Any:
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        raise FormFieldError(field, e.errors()[0].get("msg", "invalid value"))


_string_list = TypeAdapter(List[str])
_variants = TypeAdapter(List[VariantOption])
_dimensions = TypeAdapter(Dimensions)
_blocks = TypeAdapter(List[ArticleBlock])


def parse_string_list(field: str, raw: Optional[str]) -> List[str]:
    value = parse_json(field, raw, default=[])
    if isinstance(value, str):
        value = [value]
    return _validated(field, _string_list, value)


def parse_variants(raw: Optional[str]) -> List[Dict[str, Any]]:
    value = parse_json("variants", raw, default=[])
    return [v.model_dump() for v in _validated("variants", _variants, value)]


def parse_dimensions(raw: Optional[str]) -> Dict[str, float]:
    value = parse_json("dimensions", raw, default={})
    if not isinstance(value, dict):
        raise FormFieldError("dimensions", "an object is required")
    value = {k: coerce_number(v) for k, v in value.items() if k in Dimensions.model_fields}
    return _validated("dimensions", _dimensions, value).model_dump()


def parse_blocks(raw: Optional[str]) -> List[Dict[str, Any]]:
    value = parse_json("blocks", raw, default=[])
    return [b.model_dump(exclude_none=True) for b in _validated("blocks", _blocks, value)]


def product_fields(form: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize the product form into the stored product shape (minus images)."""
    return {
        "name": form.get("name"),
        "shortDescription": form.get("shortDescription"),
        "content": form.get("content"),
        "stock": coerce_int(form.get("stock"), field="stock"),
        "sku": form.get("sku"),
        "sizes": form.get("sizes"),
        "weight": coerce_number(form.get("weight")),
        "dimensions": parse_dimensions(form.get("dimensions")),
        "price": require_number("price", form.get("price")),
        "discountPrice": coerce_number(form.get("discountPrice")),
        "tax": coerce_number(form.get("tax")),
        "material": parse_string_list("material", form.get("material")),
        "category": parse_refs(form.get("category")),
        "metaSlug": form.get("metaSlug"),
        "metaTitle": form.get("metaTitle"),
        "metaDescription": form.get("metaDescription"),
        "tags": parse_string_list("tags", form.get("tags")),
        "slug": form.get("slug"),
        "isPublished": parse_bool(form.get("isPublished")),
        "variants": parse_variants(form.get("variants")),
        "relatedProducts": parse_refs(form.get("relatedProducts")),
    }
