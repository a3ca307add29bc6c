"""
Article block reconciliation.

An article body is an ordered list of blocks, each ``{"id", "type", "content"}``
where ``type`` is ``"text"`` or ``"image"``. Image blocks submitted by the
admin UI carry ``content == "placeholder"`` when the image is being uploaded
alongside the request; uploaded files arrive unlabeled and are matched to
placeholders by position.

Everything here is pure: no I/O, no clock, no randomness.
"""
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

PLACEHOLDER = "placeholder"

Block = Dict[str, Any]


class UnresolvedPlaceholderError(ValueError):
    """More placeholder image blocks than uploaded files."""

    def __init__(self, missing: int):
        self.missing = missing
        super().__init__(f"{missing} image block(s) have no uploaded file")


class UnknownImageError(ValueError):
    """Image blocks pointing at files that are not in the media store."""

    def __init__(self, filenames: List[str]):
        self.filenames = filenames
        super().__init__(f"Unknown image file(s): {', '.join(filenames)}")


def is_placeholder(block: Block) -> bool:
    return block.get("type") == "image" and block.get("content") == PLACEHOLDER


def merge_blocks(existing: Sequence[Block], incoming: Sequence[Block],
                 uploaded: Sequence[str] = ()) -> List[Block]:
    """Merge an incoming block list against the stored one.

    Each incoming block is laid over a copy of the stored block with the same
    ``id``. An image block still marked as a placeholder keeps the stored
    image when the stored block with that id is an image. Remaining
    placeholders then take the uploaded filenames in document order.

    Raises ``UnresolvedPlaceholderError`` when the uploads run out.
    """
    by_id = {b["id"]: b for b in existing if b.get("id") is not None}

    merged = []
    for new in incoming:
        old = by_id.get(new.get("id")) if new.get("id") is not None else None
        block = dict(old or {})
        block.update(new)
        if is_placeholder(new) and old and old.get("type") == "image" and old.get("content"):
            block["content"] = old["content"]
        merged.append(block)

    return resolve_placeholders(merged, uploaded)


def resolve_placeholders(blocks: Sequence[Block], uploaded: Sequence[str]) -> List[Block]:
    files = iter(uploaded)
    resolved = []
    missing = 0
    for block in blocks:
        block = dict(block)
        if is_placeholder(block):
            filename = next(files, None)
            if filename is None:
                missing += 1
            else:
                block["content"] = filename
        resolved.append(block)
    if missing:
        raise UnresolvedPlaceholderError(missing)
    return resolved


def image_files(blocks: Iterable[Block]) -> List[str]:
    """Filenames referenced by image blocks."""
    return [b["content"] for b in blocks
            if b.get("type") == "image" and b.get("content") and b["content"] != PLACEHOLDER]


def assign_ids(blocks: Sequence[Block], new_id) -> List[Block]:
    """Give every block without an ``id`` one from ``new_id()``."""
    out = []
    for block in blocks:
        if not block.get("id"):
            block = {**block, "id": new_id()}
        out.append(block)
    return out


def article_files(article: Optional[Dict[str, Any]]) -> List[str]:
    """Every media file owned by a stored article: main image first, then block images."""
    if not article:
        return []
    files = []
    if article.get("mainImage"):
        files.append(article["mainImage"])
    files.extend(image_files(article.get("blocks") or []))
    return files


def check_images(blocks: Iterable[Block], is_known: Callable[[str], bool]) -> None:
    """Raise ``UnknownImageError`` unless every image block names a known file."""
    unknown = [f for f in image_files(blocks) if not is_known(f)]
    if unknown:
        raise UnknownImageError(unknown)
