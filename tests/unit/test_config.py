"""
Tests for configuration schemas and loading.
"""

import pytest
import yaml
from pydantic import ValidationError as PydanticValidationError

from knapsack_bnb.config import (
    CatalogueConfig,
    GeneratorConfig,
    SolveConfig,
    build_catalogue,
    load_config,
    parse_config,
    save_config,
    validate_config_file,
)
from knapsack_bnb.data.access import CountingItems
from knapsack_bnb.data.items import Item
from knapsack_bnb.utils.error_handler import ConfigurationError, SizeMismatchError

SCENARIO_CONFIG = {
    "strategy": "sorted",
    "count_accesses": True,
    "catalogue": {
        "capacity": 40,
        "weights": [8, 7, 6, 2, 10, 11, 15, 12],
        "prices": [10, 6, 8, 12, 5, 9, 20, 30],
    },
}


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data))
    return path


class TestSchemas:
    """Test suite for Pydantic schemas."""

    def test_strategy_alias_resolved(self):
        config = SolveConfig(**SCENARIO_CONFIG)
        assert config.strategy == "pruned"

    def test_unknown_strategy(self):
        with pytest.raises(PydanticValidationError):
            SolveConfig(strategy="greedy", catalogue={"capacity": 1, "items": []})

    def test_requires_exactly_one_source(self):
        with pytest.raises(PydanticValidationError):
            SolveConfig()
        with pytest.raises(PydanticValidationError):
            SolveConfig(catalogue={"capacity": 1, "items": []}, generator={})

    def test_size_mismatch(self):
        with pytest.raises(PydanticValidationError, match="Size mismatch"):
            CatalogueConfig(capacity=10, weights=[1, 2], prices=[3])

    def test_weights_without_prices(self):
        with pytest.raises(PydanticValidationError):
            CatalogueConfig(capacity=10, weights=[1, 2])

    def test_items_and_arrays_exclusive(self):
        with pytest.raises(PydanticValidationError):
            CatalogueConfig(
                capacity=10, items=[{"weight": 1, "price": 2}], weights=[1], prices=[2]
            )

    @pytest.mark.parametrize(
        "item",
        [{"weight": 0, "price": 1}, {"weight": 1, "price": -1}, {"weight": 1}],
    )
    def test_invalid_items(self, item):
        with pytest.raises(PydanticValidationError):
            CatalogueConfig(capacity=10, items=[item])

    def test_negative_capacity(self):
        with pytest.raises(PydanticValidationError):
            CatalogueConfig(capacity=-1, items=[])

    def test_extra_fields_forbidden(self):
        with pytest.raises(PydanticValidationError):
            SolveConfig(**SCENARIO_CONFIG, verbose=True)

    def test_generator_ranges(self):
        with pytest.raises(PydanticValidationError):
            GeneratorConfig(weight_range=(0, 10))
        with pytest.raises(PydanticValidationError):
            GeneratorConfig(price_range=(10, 1))
        with pytest.raises(PydanticValidationError):
            GeneratorConfig(capacity_ratio=2.0)

    def test_logging_level_case_insensitive(self):
        config = SolveConfig(**SCENARIO_CONFIG, logging={"level": "debug"})
        assert config.logging.level == "DEBUG"


class TestLoader:
    """Test suite for YAML loading and catalogue building."""

    def test_load_config(self, tmp_path):
        path = write_yaml(tmp_path / "scenario.yaml", SCENARIO_CONFIG)
        config = load_config(path)
        assert config.count_accesses
        assert config.catalogue.capacity == 40

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("catalogue: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ConfigurationError, match="Empty"):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)

    def test_parse_config_lists_errors(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config({"catalogue": {"capacity": -3, "items": []}}, source="inline")
        assert "inline" in exc_info.value.message
        assert "catalogue -> capacity" in exc_info.value.message

    def test_validate_config_file(self, tmp_path):
        good = write_yaml(tmp_path / "good.yaml", SCENARIO_CONFIG)
        bad = write_yaml(tmp_path / "bad.yaml", {"strategy": "pruned"})

        is_valid, message = validate_config_file(good)
        assert is_valid
        assert message.startswith("✓")

        is_valid, message = validate_config_file(bad)
        assert not is_valid
        assert message.startswith("✗")

    def test_save_and_reload(self, tmp_path):
        config = SolveConfig(generator={"seed": 3, "n_items": 6, "weight_range": (2, 9)})
        path = tmp_path / "nested" / "saved.yaml"
        save_config(config, path)

        reloaded = load_config(path)
        assert reloaded == config
        assert "catalogue" not in yaml.safe_load(path.read_text())

    def test_build_catalogue_from_arrays(self):
        catalogue = build_catalogue(parse_config(SCENARIO_CONFIG))
        assert len(catalogue) == 8
        assert isinstance(catalogue.items, CountingItems)
        assert catalogue.items[3] == Item(2, 12)

    def test_build_catalogue_from_items(self):
        config = parse_config(
            {"catalogue": {"capacity": 5, "items": [{"weight": 2, "price": 3.5}]}}
        )
        catalogue = build_catalogue(config)
        assert list(catalogue) == [Item(2, 3.5)]
        assert type(catalogue.items) is list

    def test_build_catalogue_from_generator(self):
        config = parse_config({"generator": {"seed": 11, "n_items": 9}})
        catalogue = build_catalogue(config)
        assert len(catalogue) == 9

    def test_mismatched_lists_raise_size_mismatch(self, tmp_path):
        data = {"catalogue": {"capacity": 10, "weights": [1, 2, 3], "prices": [4, 5]}}
        path = write_yaml(tmp_path / "mismatch.yaml", data)

        with pytest.raises(SizeMismatchError, match="3 weights and 2 prices"):
            load_config(path)

        is_valid, message = validate_config_file(path)
        assert not is_valid
        assert "catalogue" in message

    def test_build_catalogue_without_source(self):
        config = SolveConfig.model_construct(
            strategy="pruned",
            count_accesses=False,
            catalogue=None,
            generator=None,
        )
        with pytest.raises(ConfigurationError, match="neither"):
            build_catalogue(config)
