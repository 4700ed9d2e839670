"""Product catalog: loads, validates, and normalizes toys for the match engine.

The default catalog is data/products.json; the TOYMATCH_CATALOG environment
variable points at another JSON file. Records may use the storefront's
camelCase keys (ageRange, originalPrice, isActive) or snake_case; the
normalizer flattens both into the snake_case shape the engine reads and
fills defaults so scoring never hits missing keys.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from config import CATALOG_ENV_VAR, GENDERS_SET, SKILL_GOAL_MAP, TAG_INTEREST_MAP, Gender

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"id", "name"}

_CAMEL_KEYS = {
    "ageRange": "age_range",
    "originalPrice": "original_price",
    "isActive": "is_active",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


class CatalogError(ValueError):
    pass


def _validate_product(product: Dict, index: int) -> List[str]:
    """Validate a normalized product. Returns a list of warnings."""
    warnings = []
    name = product.get("name") or f"product[{index}]"

    for field in sorted(_REQUIRED_FIELDS):
        if product.get(field) in (None, ""):
            warnings.append(f"{name}: missing required field '{field}'")
    if not product["price"]:
        warnings.append(f"{name}: missing required field 'price'")

    age_range = product["age_range"]
    low, high = age_range.get("min"), age_range.get("max")
    if low is None or high is None:
        warnings.append(f"{name}: incomplete age range {age_range}")
    elif low > high:
        warnings.append(f"{name}: age range min {low} > max {high}")

    if product["gender"] not in GENDERS_SET:
        warnings.append(f"{name}: unknown gender '{product['gender']}'")

    if not product["skills"]:
        warnings.append(f"{name}: no skills, growth-goal fit will be 0")
    if not product["tags"]:
        warnings.append(f"{name}: no tags, interest fit will be 0")

    unmapped = [s for s in product["skills"] if s not in SKILL_GOAL_MAP]
    if unmapped:
        logger.debug("%s: skills without a growth goal: %s", name, unmapped)
    unmapped = [t for t in product["tags"] if t not in TAG_INTEREST_MAP]
    if unmapped:
        logger.debug("%s: tags without an interest: %s", name, unmapped)

    return warnings


def normalize_product_for_scoring(product: Dict) -> Dict:
    out = {_CAMEL_KEYS.get(key, key): value for key, value in product.items()}

    age_range = out.get("age_range") or {}
    out["age_range"] = {"min": age_range.get("min"), "max": age_range.get("max")}

    if out.get("id") is not None:
        out["id"] = str(out["id"])
    out["gender"] = str(out.get("gender") or Gender.UNISEX.value).lower()
    out["skills"] = [s.strip() for s in out.get("skills") or [] if isinstance(s, str) and s.strip()]
    out["tags"] = [t.strip() for t in out.get("tags") or [] if isinstance(t, str) and t.strip()]

    out.setdefault("name", "")
    out.setdefault("description", "")
    out.setdefault("category", "")
    out.setdefault("brand", "")
    if out.get("price") is None:
        out["price"] = 0
    out.setdefault("rating", 0.0)
    out.setdefault("stock", 0)
    out.setdefault("images", [])
    out.setdefault("is_active", True)

    return out


def _catalog_path(base_dir: Path) -> Path:
    override = os.getenv(CATALOG_ENV_VAR)
    if override:
        return Path(override)
    return base_dir / "data" / "products.json"


def load_catalog(base_dir: Path, include_inactive: bool = False) -> Tuple[List[Dict], Path]:
    path = _catalog_path(base_dir)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    products = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(products, list):
        raise CatalogError(f"{path.name} must contain a JSON list of products.")

    normalized = [normalize_product_for_scoring(p) for p in products]
    if not include_inactive:
        normalized = [p for p in normalized if p["is_active"]]

    # Validate all products and log warnings (non-blocking)
    all_warnings = []
    for i, product in enumerate(normalized):
        all_warnings.extend(_validate_product(product, i))
    if all_warnings:
        logger.warning("Product catalog validation found %d issues:", len(all_warnings))
        for w in all_warnings[:20]:  # cap log output
            logger.warning("  - %s", w)

    logger.info("Loaded %d products from %s", len(normalized), path)
    return normalized, path


def filter_products(
    products: List[Dict],
    search: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    gender: Optional[str] = None,
    min_rating: Optional[float] = None,
) -> List[Dict]:
    """Storefront filter; every argument left as None is ignored."""
    out = list(products)

    if search:
        term = search.lower()
        out = [
            p for p in out
            if term in p.get("name", "").lower()
            or term in p.get("description", "").lower()
            or any(term in tag.lower() for tag in p.get("tags", []))
        ]
    if category:
        out = [p for p in out if p.get("category") == category]
    if min_price is not None:
        out = [p for p in out if p.get("price", 0) >= min_price]
    if max_price is not None:
        out = [p for p in out if p.get("price", 0) <= max_price]
    if gender:
        wanted = Gender(gender).value
        out = [p for p in out if p.get("gender") in (wanted, Gender.UNISEX.value)]
    if min_rating is not None:
        out = [p for p in out if p.get("rating", 0) >= min_rating]

    return out


def _distinct(values) -> List[str]:
    return list(dict.fromkeys(v for v in values if v))


def list_categories(products: List[Dict]) -> List[str]:
    return _distinct(p.get("category") for p in products)


def list_brands(products: List[Dict]) -> List[str]:
    return _distinct(p.get("brand") for p in products)


def list_skills(products: List[Dict]) -> List[str]:
    return _distinct(skill for p in products for skill in p.get("skills", []))
