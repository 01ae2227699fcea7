"""Unit tests for mersalg.processing.specs: full spec extraction."""

import pytest

from mersalg.processing.specs import ExtractedSpecs, extract_specs


class TestExtractSpecs:
    def test_sales_text_laptop(self):
        specs = extract_specs(
            "ASUS Zenbook 14 OLED UX3405MA",
            "Intel® Core™ Ultra 9 185H / 32 GB RAM / 1 TB SSD / 3K 120 Hz OLED touchskærm",
        )
        assert specs.cpu == "Intel Core Ultra 9 185H"
        assert specs.cpu_tier == 10
        assert specs.ram_gb == 32
        assert specs.ram == "32 GB"
        assert specs.storage_gb == 1024
        assert specs.storage == "1 TB"
        assert specs.screen_size == 14.0
        assert specs.screen_type == "OLED"
        assert "Touchskærm" in specs.features
        assert specs.gpu is None
        assert specs.gpu_tier is None

    @pytest.mark.parametrize("title,cpu,tier", [
        ("Lenovo IdeaPad Slim 3 (Core 5/16/512)", "Intel Core 5", 6),
        ("ASUS Zenbook 14 (Ultra 7/16/1TB)", "Intel Core Ultra 7", 8),
        ("HP OmniBook (Core Ultra 5/16/512 GB)", "Intel Core Ultra 5", 6),
    ])
    def test_combined_notation_series_naming(self, title, cpu, tier):
        specs = extract_specs(title)
        assert specs.cpu == cpu
        assert specs.cpu_tier == tier
        assert specs.ram_gb == 16

    def test_combined_notation_unknown_code_kept(self):
        specs = extract_specs("Acer Swift (N200/8/256)")
        assert specs.cpu == "N200"
        assert specs.cpu_tier == 0
        assert specs.ram_gb == 8
        assert specs.storage_gb == 256

    def test_dedicated_gpu(self):
        specs = extract_specs(
            "Lenovo LOQ 15IRH8",
            "Intel Core i5-12500H / 16 GB RAM / 512 GB SSD / NVIDIA GeForce RTX 4050 6 GB",
        )
        assert specs.cpu == "Intel Core i5-12500H"
        assert specs.cpu_tier == 6
        assert specs.gpu == "NVIDIA GeForce RTX 4050"
        assert specs.gpu_tier == 7
        assert specs.gpu_vram_gb == 6
        assert specs.ram_gb == 16
        assert specs.storage_gb == 512

    def test_title_only(self):
        specs = extract_specs('HP 15s Intel Core i5-1335U 8GB DDR4 256GB SSD 15,6"')
        assert specs.cpu_tier == 4
        assert specs.ram_gb == 8
        assert specs.storage_gb == 256
        assert specs.screen_size == 15.6

    def test_combined_notation_with_shorthand_cpu(self):
        specs = extract_specs("Lenovo IdeaPad 1 (i5/16/512 GB)")
        assert specs.cpu == "Intel Core i5"
        assert specs.cpu_tier == 5
        assert specs.ram_gb == 16
        assert specs.storage_gb == 512

    def test_combined_notation_keeps_full_cpu_name(self):
        specs = extract_specs("HP Pavilion AMD Ryzen 7 7730U (R7/16GB/1TB)")
        assert specs.cpu == "AMD Ryzen 7 7730U"
        assert specs.cpu_tier == 6
        assert specs.storage_gb == 1024

    def test_tier_set_whenever_cpu_found(self):
        specs = extract_specs("Intel Core i5 Bærbar")
        assert specs.cpu == "Intel Core i5"
        assert specs.cpu_tier == 5
        specs = extract_specs("Qualcomm Snapdragon X X1-26-100 8 GB RAM")
        assert specs.cpu is not None
        assert specs.cpu_tier == 0

    def test_nothing_found(self):
        specs = extract_specs("Laptoptaske sort")
        assert specs.cpu is None
        assert specs.cpu_tier is None
        assert specs.ram_gb is None
        assert specs.storage_gb is None
        assert specs.screen_size is None
        assert specs.is_empty()

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_empty_input(self, title):
        assert extract_specs(title).is_empty()


class TestIdempotence:
    @pytest.mark.parametrize("name", [
        "Intel Core i7-13700H / 16 GB RAM / 512 GB SSD",
        "Apple M3 chip 8 GB 256 GB",
        "AMD Ryzen 5 7530U 32GB DDR5 1TB SSD",
        "Acer Aspire (i3/8/256 GB)",
        "Dell XPS 64 GB RAM 2 TB SSD",
    ])
    def test_display_strings_reparse(self, name):
        first = extract_specs(name)
        assert first.ram and first.storage
        again = extract_specs(f"{first.ram} {first.storage}")
        assert again.ram_gb == first.ram_gb
        assert again.storage_gb == first.storage_gb


class TestSpecsDict:
    def test_to_dict_omits_unset(self):
        specs = ExtractedSpecs(cpu="Intel Core i5", cpu_tier=0)
        assert specs.to_dict() == {"cpu": "Intel Core i5", "cpu_tier": 0}

    def test_from_dict_accepts_camel_case(self):
        specs = ExtractedSpecs.from_dict({
            "cpu": "Apple M2", "cpuTier": 6, "ramGB": 8, "storageGB": 256,
            "screenSize": 13.6, "gpuVram": None, "unknownKey": "x",
        })
        assert specs.cpu_tier == 6
        assert specs.ram_gb == 8
        assert specs.storage_gb == 256
        assert specs.screen_size == 13.6
        assert specs.gpu_vram_gb is None

    def test_round_trip(self):
        specs = extract_specs("Intel Core i7-13700H / 16 GB RAM / 512 GB SSD / USB-C")
        assert ExtractedSpecs.from_dict(specs.to_dict()) == specs

    def test_from_empty(self):
        assert ExtractedSpecs.from_dict(None) == ExtractedSpecs()
