"""
Integration tests for the HTTP API.

Runs complete requests through the FastAPI app.
"""

import pytest
from fastapi.testclient import TestClient

from evaluators.scoring import evaluate_share_code, generate_screening_result
from main import app
from models.templates import INVALID_SUMMARY
from utils.cache import get_cache_stats
from utils.codec import encode


# Test client
client = TestClient(app)


def _payload(answers):
    return {"answers": {str(k): v for k, v in answers.items()}}


class TestHealthEndpoint:
    """Tests for health endpoint."""

    def test_health_returns_ok(self):
        """Health endpoint should return healthy status."""
        response = client.get("/screening/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["question_count"] == 112
        assert data["services"]["thresholds"] == "default"


class TestQuestionsEndpoint:

    def test_lists_all_questions(self):
        response = client.get("/screening/questions")
        assert response.status_code == 200

        data = response.json()
        assert data["total_questions"] == 112
        assert [q["id"] for q in data["questions"]] == list(range(112))
        assert set(data["answer_scale"]) == {"0", "1", "2", "3", "4"}


class TestSubmitEndpoint:
    """Tests for POST /screening/submit."""

    def test_all_zero(self, make_answers):
        answers = make_answers()
        response = client.post("/screening/submit", json=_payload(answers))
        assert response.status_code == 200

        data = response.json()
        assert data["validity"] == {"is_valid": True, "warnings": []}
        assert data["answered_count"] == 112
        assert data["total_questions"] == 112
        assert data["share_code"] == "0" * 112
        assert data["flags"] == []
        assert "generated_at" in data
        for scale in data["scales"].values():
            assert scale["sum"] == 0
            assert scale["zone"]["key"] == "low"
        for block in data["interpretation"]["condition_blocks"].values():
            assert block["present"] is False

    def test_two_conditions(self, make_answers):
        answers = make_answers({"A": 4, "B": 4, "D": 4, "E": 4, "F": 4})
        data = client.post("/screening/submit", json=_payload(answers)).json()

        blocks = data["interpretation"]["condition_blocks"]
        assert blocks["adhd"]["present"] is True
        assert blocks["adhd"]["confidence"] == "high"
        assert blocks["asd"]["present"] is True
        assert [b["key"] for b in data["interpretation"]["comorbidity_blocks"]] == ["adhd_asd"]

    def test_empty_submission(self):
        data = client.post("/screening/submit", json={"answers": {}}).json()
        assert data["answered_count"] == 0
        assert data["share_code"] == "-" * 112

    def test_invalid_profile(self, make_answers):
        answers = make_answers({"A": 4})
        for qid in (7, 39, 71, 103):
            answers[qid] = 4
        data = client.post("/screening/submit", json=_payload(answers)).json()

        assert data["validity"]["is_valid"] is False
        assert data["interpretation"]["summary"] == INVALID_SUMMARY
        assert data["interpretation"]["condition_blocks"] == {}

    def test_out_of_range_value_returns_400(self):
        response = client.post("/screening/submit", json={"answers": {"3": 9}})
        assert response.status_code == 400

        data = response.json()
        assert data["error_code"] == "INVALID_ANSWER_VALUE"
        assert data["details"]["question_id"] == 3

    def test_boolean_value_returns_400(self):
        response = client.post("/screening/submit", json={"answers": {"0": True}})
        assert response.status_code == 400

        data = response.json()
        assert data["error_code"] == "INVALID_ANSWER_VALUE"
        assert data["details"] == {"question_id": 0, "value": "True"}

    def test_float_value_returns_400(self):
        response = client.post("/screening/submit", json={"answers": {"0": 2.0}})
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_ANSWER_VALUE"

    def test_text_value_returns_400(self):
        response = client.post("/screening/submit", json={"answers": {"3": "often"}})
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_ANSWER_VALUE"

    def test_malformed_body_returns_400(self):
        response = client.post("/screening/submit", json={"answers": [1, 2]})
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"


class TestResultsEndpoint:
    """Tests for GET /screening/results/{code}."""

    def test_share_code_reproduces_submission(self, make_answers):
        answers = make_answers({"D": 3, "G": 4})
        submitted = client.post("/screening/submit", json=_payload(answers)).json()

        shared = client.get(f"/screening/results/{submitted['share_code']}").json()
        submitted.pop("generated_at")
        shared.pop("generated_at")
        assert shared == submitted

    def test_short_code_returns_400(self):
        response = client.get("/screening/results/" + "0" * 111)
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_ENCODING"

    def test_bad_character_returns_400(self):
        response = client.get("/screening/results/" + "9" * 112)
        assert response.status_code == 400
        assert response.json()["details"] == {"position": 0}


class TestEncodeEndpoint:

    def test_encode(self):
        response = client.post("/screening/encode", json={"answers": {"0": 2, "111": 4}})
        assert response.status_code == 200

        data = response.json()
        assert data["code"] == encode({0: 2, 111: 4})
        assert data["fragment"] == "r=" + data["code"]

    def test_encode_rejects_boolean(self):
        response = client.post("/screening/encode", json={"answers": {"5": False}})
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_ANSWER_VALUE"

    def test_encode_rejects_bad_value(self):
        response = client.post("/screening/encode", json={"answers": {"0": -1}})
        assert response.status_code == 400


class TestPipeline:
    """Direct pipeline calls."""

    def test_result_matches_code(self, make_answers):
        answers = make_answers({"H": 4})
        result = generate_screening_result(answers)
        assert evaluate_share_code(result.share_code) == result

    def test_share_code_results_cached(self):
        code = encode({0: 1})
        first = evaluate_share_code(code)
        second = evaluate_share_code(code)

        assert first is second
        assert get_cache_stats("screening")["size"] == 1

    def test_invalid_code_not_cached(self):
        with pytest.raises(ValueError):
            evaluate_share_code("bad")
        assert get_cache_stats("screening")["size"] == 0
