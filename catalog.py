import math
from typing import Any, Dict, List, Optional

SORT_KEYS = ("title", "price-low", "price-high")


def _contains(needle: str, *haystacks: str) -> bool:
    needle = needle.lower()
    return any(needle in (h or "").lower() for h in haystacks)


def filter_products(
    products: List[Dict[str, Any]],
    category: Optional[str] = None,
    search: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
) -> List[Dict[str, Any]]:
    filtered = list(products)
    if category:
        filtered = [p for p in filtered if p.get("category") == category]
    if search:
        filtered = [
            p for p in filtered
            if _contains(search, p.get("title"), p.get("description")) or _contains(search, *p.get("tags", []))
        ]
    if min_price is not None:
        filtered = [p for p in filtered if p["price"] >= min_price]
    if max_price is not None:
        filtered = [p for p in filtered if p["price"] <= max_price]
    return filtered


def sort_products(products: List[Dict[str, Any]], sort: Optional[str]) -> List[Dict[str, Any]]:
    if not sort:
        return list(products)
    if sort == "title":
        return sorted(products, key=lambda p: p["title"].lower())
    if sort == "price-low":
        return sorted(products, key=lambda p: p["price"])
    if sort == "price-high":
        return sorted(products, key=lambda p: p["price"], reverse=True)
    raise ValueError(f"Unknown sort: {sort}")


def paginate(items: List[Any], page: int, limit: int) -> Dict[str, Any]:
    start = (page - 1) * limit
    return {
        "items": items[start:start + limit],
        "total": len(items),
        "page": page,
        "total_pages": math.ceil(len(items) / limit),
    }


def with_default_stars(product: Dict[str, Any]) -> Dict[str, Any]:
    # Products added from the storefront may arrive without a rating
    product = dict(product)
    if not isinstance(product.get("stars"), (int, float)):
        product["stars"] = 5
    return product


def filter_posts(posts: List[Dict[str, Any]], category: Optional[str] = None, search: Optional[str] = None) -> List[Dict[str, Any]]:
    filtered = list(posts)
    if search:
        filtered = [
            p for p in filtered
            if _contains(search, p["title"], p["excerpt"]) or _contains(search, *p.get("tags", []))
        ]
    if category:
        filtered = [p for p in filtered if p["category"] == category]
    return filtered
