"""Tests for locations, error shapes and merge semantics."""

from __future__ import annotations

import pytest

from validatree.models.errors import ERRORS_KEY, Structured, Unstructured, ValidationError, merge
from validatree.models.location import Index, Key, Named


class TestLocation:
    def test_equal_locations_hash_identically(self) -> None:
        assert Named("a") == Named("a")
        assert hash(Index(3)) == hash(Index(3))
        assert {Key("k"): 1}[Key("k")] == 1

    def test_variants_never_compare_equal(self) -> None:
        assert Named("x") != Key("x")
        assert Named("0") != Index(0)

    def test_string_forms(self) -> None:
        assert str(Named("field")) == "field"
        assert str(Key("a place")) == "a place"
        assert str(Index(7)) == "7"

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Index(-1)

    @pytest.mark.parametrize(
        "build",
        [lambda: Key(5), lambda: Named(None), lambda: Index(1.0), lambda: Index(True)],
    )
    def test_wrong_payload_types_rejected(self, build) -> None:
        with pytest.raises(TypeError, match="location must be"):
            build()

    def test_locations_are_immutable(self) -> None:
        loc = Named("a")
        with pytest.raises(AttributeError):
            loc.name = "b"  # type: ignore[misc]


class TestErrorShapes:
    def test_new_is_single_reason(self) -> None:
        assert ValidationError.new("boom") == Unstructured(["boom"])

    def test_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            ValidationError()  # type: ignore[abstract]

    def test_empty_unstructured_rejected(self) -> None:
        with pytest.raises(ValueError):
            Unstructured([])

    def test_empty_structured_rejected(self) -> None:
        with pytest.raises(ValueError):
            Structured({})

    def test_structured_requires_location_keys(self) -> None:
        with pytest.raises(TypeError):
            Structured({"a": Unstructured(["x"])})  # type: ignore[dict-item]

    def test_structured_mapping_is_read_only(self) -> None:
        err = Structured({Named("a"): Unstructured(["x"])})
        with pytest.raises(TypeError):
            err.errors[Named("b")] = Unstructured(["y"])  # type: ignore[index]

    def test_structured_copies_input(self) -> None:
        source = {Named("a"): Unstructured(["x"])}
        err = Structured(source)
        source[Named("b")] = Unstructured(["y"])
        assert list(err.errors) == [Named("a")]

    def test_walk_yields_paths(self) -> None:
        err = Structured(
            {
                Named("a"): Unstructured(["x", "y"]),
                Named("b"): Structured({Index(2): Unstructured(["z"])}),
            }
        )
        assert list(err.walk()) == [
            ((Named("a"),), "x"),
            ((Named("a"),), "y"),
            ((Named("b"), Index(2)), "z"),
        ]


class TestMerge:
    def test_unstructured_concatenates_in_order(self) -> None:
        assert merge(Unstructured(["a"]), Unstructured(["b"])) == Unstructured(["a", "b"])

    def test_method_form_matches_function(self) -> None:
        a, b = Unstructured(["a"]), Unstructured(["b"])
        assert a.merge(b) == merge(a, b)

    def test_merge_does_not_mutate_inputs(self) -> None:
        a = Structured({Named("x"): Unstructured(["1"])})
        b = Structured({Named("x"): Unstructured(["2"])})
        merge(a, b)
        assert a == Structured({Named("x"): Unstructured(["1"])})
        assert b == Structured({Named("x"): Unstructured(["2"])})

    def test_structured_union_with_recursive_merge(self) -> None:
        a = Structured({Named("x"): Unstructured(["1"]), Named("y"): Unstructured(["y"])})
        b = Structured({Named("x"): Unstructured(["2"]), Index(0): Unstructured(["i"])})
        merged = merge(a, b)
        assert merged == Structured(
            {
                Named("x"): Unstructured(["1", "2"]),
                Named("y"): Unstructured(["y"]),
                Index(0): Unstructured(["i"]),
            }
        )
        assert list(merged.errors) == [Named("x"), Named("y"), Index(0)]

    def test_unstructured_into_structured(self) -> None:
        structured = Structured({Named("dummy"): Unstructured(["x"])})
        merged = merge(structured, Unstructured(["b"]))
        assert merged == Structured(
            {
                Named("dummy"): Unstructured(["x"]),
                Key(ERRORS_KEY): Unstructured(["b"]),
            }
        )

    def test_structured_into_unstructured(self) -> None:
        merged = merge(Unstructured(["b"]), Structured({Named("dummy"): Unstructured(["x"])}))
        assert merged == Structured(
            {
                Key("errors"): Unstructured(["b"]),
                Named("dummy"): Unstructured(["x"]),
            }
        )

    def test_repeated_bare_reasons_accumulate_under_errors_key(self) -> None:
        merged = merge(
            merge(Structured({Named("a"): Unstructured(["x"])}), Unstructured(["b"])),
            Unstructured(["c"]),
        )
        assert merged.errors[Key("errors")] == Unstructured(["b", "c"])

    def test_nested_mixed_shapes_merge_at_depth(self) -> None:
        a = Structured({Named("a"): Unstructured(["bare"])})
        b = Structured({Named("a"): Structured({Index(1): Unstructured(["deep"])})})
        assert merge(a, b) == Structured(
            {
                Named("a"): Structured(
                    {
                        Key("errors"): Unstructured(["bare"]),
                        Index(1): Unstructured(["deep"]),
                    }
                )
            }
        )

    def test_associative_for_same_location(self) -> None:
        a, b, c = Unstructured(["a"]), Unstructured(["b"]), Unstructured(["c"])
        assert merge(merge(a, b), c) == merge(a, merge(b, c))

    def test_merge_rejects_non_errors(self) -> None:
        with pytest.raises(TypeError):
            merge(Unstructured(["a"]), "b")  # type: ignore[arg-type]
