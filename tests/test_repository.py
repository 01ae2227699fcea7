"""Unit tests for mersalg.storage.repository: CSV product store."""

import pytest

from mersalg.processing.specs import ExtractedSpecs
from mersalg.storage.repository import ProductRepository, product_to_row, row_to_product


class TestRowMapping:
    def test_round_trip(self, make_product):
        p = make_product(price=4998, ram_gb=16, storage_gb=512, cpu_tier=6,
                         cpu="Intel Core i5-1340P", features=["USB-C"], is_high_margin=True)
        assert row_to_product(product_to_row(p)) == p

    def test_specs_stored_as_json(self, make_product):
        row = product_to_row(make_product(ram_gb=8))
        assert row["specs"] == '{"ram": "8 GB", "ram_gb": 8}'


class TestProductRepository:
    def test_empty_store(self, repo):
        assert repo.count() == 0
        assert repo.all_products() == []
        assert repo.search("asus") == []
        assert repo.get("x") is None
        assert repo.high_margin_count() == 0

    def test_upsert_and_get(self, repo, make_product):
        p = make_product(price=5998, ram_gb=16, storage_gb=512, product_id="123")
        assert repo.upsert([p]) == 1
        got = repo.get("123")
        assert got == p
        assert got.specs.ram_gb == 16

    def test_upsert_replaces_by_id(self, repo, make_product):
        repo.upsert([make_product(price=5000, product_id="1")])
        repo.upsert([make_product(price=4500, product_id="1"), make_product(product_id="2")])
        assert repo.count() == 2
        assert repo.get("1").price == 4500

    def test_upsert_nothing(self, repo):
        assert repo.upsert([]) == 0
        assert not repo.path.exists()

    def test_numeric_looking_ids_stay_strings(self, repo, make_product):
        repo.upsert([make_product(product_id="007")])
        assert repo.get("007").id == "007"

    def test_search_case_insensitive(self, repo, make_product):
        repo.upsert([
            make_product(name="ASUS Zenbook 14", brand="ASUS"),
            make_product(name="Lenovo IdeaPad 5", brand="Lenovo"),
        ])
        hits = repo.search("zenbook")
        assert [p.name for p in hits] == ["ASUS Zenbook 14"]
        assert len(repo.search("LENOVO")) == 1
        assert repo.search("   ") == []

    def test_search_by_sku(self, repo, make_product):
        p = make_product()
        p.sku = "4711387000000"
        repo.upsert([p])
        assert repo.search("47113")[0].id == p.id

    def test_search_is_not_regex(self, repo, make_product):
        repo.upsert([make_product(name="HP 15s (i5/16/512 GB)")])
        assert len(repo.search("(i5/16")) == 1

    def test_high_margin_count(self, repo, make_product):
        repo.upsert([make_product(is_high_margin=True), make_product(), make_product(is_high_margin=True)])
        assert repo.high_margin_count() == 2

    def test_clear(self, repo, make_product):
        repo.upsert([make_product()])
        repo.clear()
        assert repo.count() == 0
        repo.clear()

    def test_unreadable_file_is_empty_store(self, tmp_path):
        path = tmp_path / "products.csv"
        path.write_bytes(b"\xff\xfe\x00garbage")
        assert ProductRepository(path).count() == 0

    def test_empty_file(self, tmp_path):
        path = tmp_path / "products.csv"
        path.write_text("", encoding="utf-8")
        assert ProductRepository(path).all_products() == []

    def test_bad_specs_json(self, tmp_path):
        path = tmp_path / "products.csv"
        path.write_text("id,name,brand,price,specs\n1,X,Y,100,{not json\n", encoding="utf-8")
        p = ProductRepository(path).get("1")
        assert p.specs == ExtractedSpecs()
        assert p.price == 100

    def test_missing_price_stays_missing(self, tmp_path):
        path = tmp_path / "products.csv"
        path.write_text("id,name,brand,price,specs\n1,X,Y,,{}\n2,Z,Y,999,{}\n", encoding="utf-8")
        repo = ProductRepository(path)
        assert repo.get("1").price is None
        assert repo.get("2").price == 999
