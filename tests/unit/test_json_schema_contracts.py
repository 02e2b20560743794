"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов сериализованных Tuple и Matrix:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Интеграция с Tuple/Matrix
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    MatrixValidator,
    SchemaLoader,
    TupleValidator,
    validate_matrix,
    validate_tuple,
)
from src.core.math import Matrix, point


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_tuple():
    return {"x": 1.0, "y": -2.0, "z": 3.5, "w": 1.0}


@pytest.fixture
def valid_matrix():
    return {
        "width": 2,
        "height": 2,
        "rows": [[1.0, 0.0], [0.0, 1.0]],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schemas_load(self):
        loader = SchemaLoader()
        assert loader.load_schema("tuple")["title"] == "Tuple"
        assert loader.load_schema("matrix")["title"] == "Matrix"

    def test_schema_is_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("tuple") is loader.load_schema("tuple")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# TUPLE CONTRACT
# =============================================================================


class TestTupleContract:
    """Тесты контракта tuple.json"""

    def test_valid(self, valid_tuple):
        validate_tuple(valid_tuple)
        assert TupleValidator().is_valid(valid_tuple)

    def test_integers_allowed(self):
        validate_tuple({"x": 1, "y": 2, "z": 3, "w": 0})

    @pytest.mark.parametrize("missing", ["x", "y", "z", "w"])
    def test_missing_component(self, valid_tuple, missing):
        del valid_tuple[missing]
        with pytest.raises(ValidationError):
            validate_tuple(valid_tuple)

    def test_extra_property(self, valid_tuple):
        valid_tuple["v"] = 0.0
        assert not TupleValidator().is_valid(valid_tuple)

    def test_boolean_is_not_a_number(self, valid_tuple):
        valid_tuple["w"] = True
        assert not TupleValidator().is_valid(valid_tuple)

    def test_model_dump_matches_contract(self):
        validate_tuple(point(1, 2, 3).to_dict())


# =============================================================================
# MATRIX CONTRACT
# =============================================================================


class TestMatrixContract:
    """Тесты контракта matrix.json"""

    def test_valid(self, valid_matrix):
        validate_matrix(valid_matrix)
        assert MatrixValidator().is_valid(valid_matrix)

    def test_zero_width_rejected(self, valid_matrix):
        valid_matrix["width"] = 0
        with pytest.raises(ValidationError):
            validate_matrix(valid_matrix)

    def test_empty_rows_rejected(self, valid_matrix):
        valid_matrix["rows"] = []
        with pytest.raises(ValidationError):
            validate_matrix(valid_matrix)

    def test_non_numeric_element(self, valid_matrix):
        valid_matrix["rows"][1][0] = "1"
        errors = list(MatrixValidator().iter_errors(valid_matrix))
        assert len(errors) == 1

    def test_identity_dump_matches_contract(self):
        validate_matrix(Matrix.identity().to_dict())
