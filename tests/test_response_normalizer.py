"""
Unit tests for extracting results from Weaviate GraphQL responses.
"""

import logging

import pytest

from weaviate_console.domain.models import (
    AggregateCountIntent,
    HybridSearchIntent,
    ListIntent,
    SchemaIntrospectionIntent,
)
from weaviate_console.infrastructure.weaviate.normalize import (
    extract_aggregate_count,
    extract_class_names,
    extract_objects,
    flatten_record,
    graphql_errors,
    normalize,
)


@pytest.mark.unit
class TestExtractObjects:
    """Test Get.<class> extraction."""

    def test_single_record_flattened(self):
        payload = {"data": {"Get": {"Doc": [{"query": "q", "content": "c", "_additional": {"id": "x"}}]}}}
        assert extract_objects(payload, "Doc") == [{"query": "q", "content": "c", "id": "x"}]

    @pytest.mark.parametrize("payload", [
        {"data": {"Get": {}}},
        {"data": {}},
        {},
        {"data": {"Get": {"Doc": None}}},
        {"data": None},
        None,
    ])
    def test_missing_path_means_no_results(self, payload):
        assert extract_objects(payload, "Doc") == []

    def test_other_class_not_returned(self):
        payload = {"data": {"Get": {"Other": [{"content": "c"}]}}}
        assert extract_objects(payload, "Doc") == []

    def test_score_and_certainty_lifted(self):
        rec = {"content": "c", "_additional": {"id": "1", "score": "0.9", "certainty": 0.8}}
        assert flatten_record(rec) == {"content": "c", "id": "1", "score": "0.9", "certainty": 0.8}

    def test_record_without_additional(self):
        assert flatten_record({"content": "c"}) == {"content": "c"}


@pytest.mark.unit
class TestExtractClassNames:
    """Test GetObjectsObj introspection extraction."""

    def test_field_names_of_objects_type(self):
        payload = {"data": {"__schema": {"types": [
            {"name": "Query", "fields": [{"name": "Get"}]},
            {"name": "GetObjectsObj", "fields": [{"name": "Doc"}, {"name": "Note"}]},
        ]}}}
        assert extract_class_names(payload) == ["Doc", "Note"]

    def test_absent_type_is_none(self):
        payload = {"data": {"__schema": {"types": [{"name": "Query", "fields": []}]}}}
        assert extract_class_names(payload) is None

    def test_absent_schema_is_none(self):
        assert extract_class_names({"data": {}}) is None
        assert extract_class_names({"errors": [{"message": "boom"}]}) is None


@pytest.mark.unit
class TestExtractAggregateCount:
    """Test Aggregate.<class>[0].meta.count extraction."""

    def test_numeric_count(self):
        payload = {"data": {"Aggregate": {"Doc": [{"meta": {"count": 42}}]}}}
        assert extract_aggregate_count(payload, "Doc") == 42

    def test_zero_is_a_real_count(self):
        payload = {"data": {"Aggregate": {"Doc": [{"meta": {"count": 0}}]}}}
        assert extract_aggregate_count(payload, "Doc") == 0

    def test_integral_float_count_is_int(self):
        payload = {"data": {"Aggregate": {"Doc": [{"meta": {"count": 42.0}}]}}}
        count = extract_aggregate_count(payload, "Doc")
        assert count == 42
        assert isinstance(count, int)

    @pytest.mark.parametrize("payload", [
        {"data": {"Aggregate": {"Doc": [{"meta": {}}]}}},
        {"data": {"Aggregate": {"Doc": [{}]}}},
        {"data": {"Aggregate": {"Doc": []}}},
        {"data": {"Aggregate": {}}},
        {"data": {"Aggregate": {"Doc": [{"meta": {"count": "42"}}]}}},
        {"data": {"Aggregate": {"Doc": [{"meta": {"count": True}}]}}},
        {"data": {"Aggregate": {"Doc": [{"meta": {"count": float("nan")}}]}}},
    ])
    def test_unknown_is_none_not_zero(self, payload):
        assert extract_aggregate_count(payload, "Doc") is None


@pytest.mark.unit
class TestGraphQLErrors:
    """Test non-fatal error detection."""

    def test_errors_logged_not_raised(self, caplog):
        payload = {"errors": [{"message": "bad field"}], "data": {"Get": {"Doc": [{"content": "c"}]}}}
        with caplog.at_level(logging.WARNING):
            assert graphql_errors(payload, "/list") is True
        assert "bad field" in caplog.text

    def test_empty_errors_ignored(self):
        assert graphql_errors({"errors": []}, "/list") is False
        assert graphql_errors({"data": {}}, "/list") is False

    def test_partial_data_still_extracted(self):
        payload = {"errors": [{"message": "bad field"}], "data": {"Get": {"Doc": [{"content": "c"}]}}}
        assert normalize(payload, ListIntent("Doc")) == [{"content": "c"}]


@pytest.mark.unit
class TestNormalizeDispatch:
    """Test intent-based normalization."""

    def test_search_intent(self):
        payload = {"data": {"Get": {"Doc": [{"content": "c", "_additional": {"id": "1", "score": "0.5"}}]}}}
        assert normalize(payload, HybridSearchIntent("Doc", "q")) == [{"content": "c", "id": "1", "score": "0.5"}]

    def test_schema_intent(self):
        payload = {"data": {"__schema": {"types": [{"name": "GetObjectsObj", "fields": [{"name": "Doc"}]}]}}}
        assert normalize(payload, SchemaIntrospectionIntent()) == ["Doc"]

    def test_aggregate_intent(self):
        payload = {"data": {"Aggregate": {"Doc": [{"meta": {"count": 3}}]}}}
        assert normalize(payload, AggregateCountIntent("Doc")) == 3
