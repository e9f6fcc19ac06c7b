import json
import logging
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests
from prometheus_client import REGISTRY

from trivia.quiz.adapters.dataset_loader import DatasetError, DatasetLoader, DatasetParser
from trivia.quiz.adapters.fallback_dataset import FALLBACK_DATASET
from trivia.shared.telemetry import Telemetry

URL = "https://example.com/questions.json"
SHIPPED_DATASET = Path(__file__).resolve().parents[3] / "data" / "questions.json"

VALID_Q = {"question": "Q?", "options": ["a", "b", "c", "d"], "answer": 1}

NESTED_DOC = {
    "categories": [
        {
            "id": "science",
            "name": "Science",
            "image": "science.png",
            "subcategories": [
                {"id": "space", "name": "Space", "questions": [VALID_Q, VALID_Q]},
            ],
        },
        {"id": "history", "name": "History", "questions": [VALID_Q]},
    ]
}


def _fallbacks() -> float:
    return REGISTRY.get_sample_value("trivia_dataset_fallbacks_total") or 0.0


def _remote_loader(response=None, error=None):
    session = Mock(spec=requests.Session)
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return DatasetLoader(URL, timeout=2.0, session=session), session


def _response(payload=None, status_error=None, json_error=None):
    response = Mock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class TestRemoteSource:
    def test_success_uses_remote_data(self):
        loader, session = _remote_loader(_response(NESTED_DOC))

        categories = loader.load()

        session.get.assert_called_once_with(URL, timeout=2.0)
        assert loader.used_fallback is False
        assert [c.id for c in categories] == ["science", "history"]
        assert categories[0].subcategories[0].id == "space"
        # Flat category normalized
        assert categories[1].subcategories[0].id == "history_sub"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"error": requests.ConnectionError("offline")},
            {"error": requests.Timeout("slow")},
            {"response": _response(status_error=requests.HTTPError("404"))},
            {"response": _response(json_error=ValueError("not json"))},
            {"response": _response({"nope": []})},
        ],
    )
    def test_failures_fall_back(self, kwargs, caplog):
        loader, _ = _remote_loader(**kwargs)
        before = _fallbacks()

        with caplog.at_level(logging.WARNING, logger="trivia.DatasetLoader"):
            categories = loader.load()

        assert loader.used_fallback is True
        assert [c.id for c in categories] == [
            c["id"] for c in FALLBACK_DATASET["categories"]
        ]
        assert _fallbacks() == before + 1
        assert "Using fallback questions" in caplog.text


class TestLocalSource:
    def test_reads_json_file(self, tmp_path):
        path = tmp_path / "questions.json"
        path.write_text(json.dumps(NESTED_DOC), encoding="utf-8")

        loader = DatasetLoader(str(path))
        categories = loader.load()

        assert loader.used_fallback is False
        assert len(categories) == 2

    def test_missing_file_falls_back(self, tmp_path):
        loader = DatasetLoader(str(tmp_path / "missing.json"))
        categories = loader.load()

        assert loader.used_fallback is True
        assert len(categories) == 6

    def test_invalid_json_falls_back(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{ not json", encoding="utf-8")

        loader = DatasetLoader(str(path))
        loader.load()

        assert loader.used_fallback is True

    def test_non_utf8_file_falls_back(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"categories": [{"id": "x", "name": "\xff\xfe"}]}')

        loader = DatasetLoader(str(path))
        categories = loader.load()

        assert loader.used_fallback is True
        assert len(categories) == 6

    def test_numeric_question_id_is_kept(self, tmp_path):
        question = {"id": 1, "question": "Q", "options": ["a", "b", "c", "d"], "answer": 0}
        path = tmp_path / "numeric.json"
        path.write_text(
            json.dumps({"categories": [{"id": "c", "name": "C", "questions": [question]}]}),
            encoding="utf-8",
        )

        loader = DatasetLoader(str(path))
        categories = loader.load()

        assert loader.used_fallback is False
        assert [q.id for q in categories[0].all_questions()] == ["1"]


class TestFallbackDataset:
    def test_fallback_is_normalized_and_complete(self):
        loader = DatasetLoader(URL, session=Mock(get=Mock(side_effect=requests.ConnectionError())))
        categories = loader.load()

        assert {c.id for c in categories} == {
            "history",
            "geography",
            "science",
            "literature",
            "sports",
            "technology",
        }
        for category in categories:
            assert len(category.subcategories) == 1
            assert category.subcategories[0].id == f"{category.id}_sub"
            assert len(category.all_questions()) == 6

    def test_shipped_questions_file_is_valid(self):
        categories = DatasetLoader(str(SHIPPED_DATASET)).load()
        assert categories
        assert all(c.subcategories for c in categories)


class TestDatasetParser:
    @pytest.fixture
    def parser(self):
        return DatasetParser(Telemetry("ParserTest"))

    def test_malformed_questions_are_dropped(self, parser, caplog):
        doc = {
            "categories": [
                {
                    "id": "c",
                    "name": "C",
                    "questions": [
                        VALID_Q,
                        {"question": "no options", "answer": 0},
                        {"question": "3 options", "options": ["a", "b", "c"], "answer": 0},
                        {"question": "bad answer", "options": ["a", "b", "c", "d"], "answer": 7},
                        "not even a dict",
                    ],
                }
            ]
        }

        with caplog.at_level(logging.WARNING, logger="trivia.ParserTest"):
            categories = parser.parse(doc)

        assert len(categories[0].all_questions()) == 1
        assert caplog.text.count("Skipping") == 4

    def test_question_ids_are_derived(self, parser):
        categories = parser.parse(NESTED_DOC)
        assert [q.id for q in categories[0].all_questions()] == ["space-1", "space-2"]

    def test_malformed_category_is_skipped(self, parser):
        doc = {"categories": [{"name": "no id"}, {"id": "ok", "name": "OK", "questions": [VALID_Q]}]}
        assert [c.id for c in parser.parse(doc)] == ["ok"]

    @pytest.mark.parametrize("doc", [None, [], {"categories": "x"}, {"other": []}])
    def test_wrong_document_shape(self, parser, doc):
        with pytest.raises(DatasetError):
            parser.parse(doc)

    def test_no_usable_questions(self, parser):
        doc = {"categories": [{"id": "c", "name": "C", "questions": [{"question": "?"}]}]}
        with pytest.raises(DatasetError):
            parser.parse(doc)
