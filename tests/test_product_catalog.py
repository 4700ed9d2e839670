from __future__ import annotations

import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from components.product_catalog import (
    CatalogError,
    filter_products,
    list_brands,
    list_categories,
    list_skills,
    load_catalog,
    normalize_product_for_scoring,
)
from config import CATALOG_ENV_VAR
from scoring.criteria import Budget

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class ProductCatalogTests(unittest.TestCase):
    def setUp(self) -> None:
        env = patch.dict(os.environ)
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop(CATALOG_ENV_VAR, None)
        self.products, self.path = load_catalog(PROJECT_ROOT)

    def _write_catalog(self, payload) -> Path:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        path = Path(tmp.name) / "toys.json"
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path

    def test_default_catalog_skips_inactive(self) -> None:
        self.assertEqual(self.path.name, "products.json")
        self.assertEqual(len(self.products), 8)
        self.assertNotIn("9", [p["id"] for p in self.products])

    def test_camel_case_keys_are_flattened(self) -> None:
        lego = self.products[0]
        self.assertEqual(lego["age_range"], {"min": 6, "max": 10})
        self.assertEqual(lego["original_price"], 300000)
        self.assertNotIn("ageRange", lego)

    def test_normalize_fills_defaults(self) -> None:
        out = normalize_product_for_scoring({"id": 7, "name": "توپ", "skills": [" حرکتی ", "", 3]})
        self.assertEqual(out["id"], "7")
        self.assertEqual(out["gender"], "unisex")
        self.assertEqual(out["skills"], ["حرکتی"])
        self.assertEqual(out["tags"], [])
        self.assertEqual(out["age_range"], {"min": None, "max": None})
        self.assertTrue(out["is_active"])

    def test_env_override_and_validation_warnings(self) -> None:
        path = self._write_catalog([
            {"id": "a", "name": "عروسک", "price": 1000, "ageRange": {"min": 9, "max": 3},
             "gender": "alien", "skills": [], "tags": []},
        ])
        os.environ[CATALOG_ENV_VAR] = str(path)
        with self.assertLogs("components.product_catalog", level="WARNING") as logs:
            products, chosen = load_catalog(PROJECT_ROOT)
        self.assertEqual(chosen, path)
        self.assertEqual(len(products), 1)
        joined = "\n".join(logs.output)
        self.assertIn("min 9 > max 3", joined)
        self.assertIn("unknown gender 'alien'", joined)
        self.assertIn("no skills", joined)

    def test_null_price_is_normalized_and_flagged(self) -> None:
        out = normalize_product_for_scoring({"id": 3, "name": "پازل", "price": None})
        self.assertEqual(out["price"], 0)
        self.assertFalse(Budget(min=0, max=100).contains(None))

        path = self._write_catalog([
            {"id": "p", "name": "پازل", "price": None, "ageRange": {"min": 3, "max": 6},
             "skills": ["منطق"], "tags": ["پازل"]},
        ])
        os.environ[CATALOG_ENV_VAR] = str(path)
        with self.assertLogs("components.product_catalog", level="WARNING") as logs:
            products, _ = load_catalog(PROJECT_ROOT)
        self.assertEqual(products[0]["price"], 0)
        self.assertIn("پازل: missing required field 'price'", "\n".join(logs.output))

    def test_non_list_catalog_is_rejected(self) -> None:
        os.environ[CATALOG_ENV_VAR] = str(self._write_catalog({"products": []}))
        with self.assertRaises(CatalogError):
            load_catalog(PROJECT_ROOT)

    def test_missing_catalog_file(self) -> None:
        os.environ[CATALOG_ENV_VAR] = str(PROJECT_ROOT / "data" / "nope.json")
        with self.assertRaises(FileNotFoundError):
            load_catalog(PROJECT_ROOT)

    def test_filter_by_search_term(self) -> None:
        names = [p["name"] for p in filter_products(self.products, search="عروسک")]
        self.assertEqual(names, ["عروسک باربی"])
        # tags are searched too
        ids = [p["id"] for p in filter_products(self.products, search="حیوانات")]
        self.assertEqual(ids, ["4"])

    def test_filter_by_gender_keeps_unisex(self) -> None:
        ids = [p["id"] for p in filter_products(self.products, gender="male")]
        self.assertIn("3", ids)
        self.assertIn("1", ids)
        self.assertNotIn("2", ids)

    def test_filter_by_price_category_and_rating(self) -> None:
        cheap = filter_products(self.products, min_price=100000, max_price=150000)
        self.assertEqual([p["id"] for p in cheap], ["5", "8"])
        learning = filter_products(self.products, category="آموزشی")
        self.assertEqual([p["id"] for p in learning], ["1", "7"])
        top = filter_products(self.products, min_rating=4.5)
        self.assertEqual([p["id"] for p in top], ["1", "3", "5", "7"])

    def test_distinct_lists(self) -> None:
        self.assertEqual(list_categories(self.products)[:3], ["آموزشی", "عروسک", "ماشین کنترلی"])
        self.assertEqual(len(list_categories(self.products)), 7)
        self.assertIn("لگو", list_brands(self.products))
        skills = list_skills(self.products)
        self.assertEqual(len(skills), len(set(skills)))
        self.assertEqual(skills[:3], ["ریاضی", "منطق", "خلاقیت"])


if __name__ == "__main__":
    unittest.main()
