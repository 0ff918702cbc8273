import json

import pytest

import cv_pipeline.text_extractor as text_extractor
import evaluation.evaluator as evaluator
from conftest import build_docx
from evaluation.errors import (
    ExtractionError,
    InputError,
    MalformedModelResponseError,
    ModelCallError,
    SchemaValidationError,
)
from evaluation.evaluator import prepare_request, run_evaluation
from evaluation.llm_client import create_client
from schemas.evaluation import EvaluationRequest


class TestPrepareRequest:
    def test_pasted_text(self, sample_cv):
        request = prepare_request("data_science", text=sample_cv)
        assert request == EvaluationRequest(role="data_science", cv_text=sample_cv.strip())

    def test_pasted_text_is_cleaned_and_capped(self, monkeypatch):
        monkeypatch.setattr(text_extractor, "MAX_CV_CHARS", 500)
        pasted = "Led   growth\t\tmarketing\n\n\n\n" + "x" * 2000
        request = prepare_request("digital_marketing", text=pasted)
        assert request.cv_text.startswith("Led growth marketing\n\nxxx")
        assert request.cv_text.endswith("[Content truncated.]")
        assert len(request.cv_text) < 600

    def test_whitespace_only_paste_is_too_short(self):
        with pytest.raises(InputError, match="too short"):
            prepare_request("data_science", text=" " * 300)

    def test_file_takes_precedence_over_text(self, sample_cv):
        data = build_docx([sample_cv])
        request = prepare_request("digital_marketing", file_bytes=data, filename="cv.docx", text="ignored")
        assert "LangChain" in request.cv_text
        assert "ignored" not in request.cv_text

    def test_no_content(self):
        with pytest.raises(InputError, match="No CV content provided"):
            prepare_request("data_science")

    def test_empty_text_is_no_content(self):
        with pytest.raises(InputError, match="No CV content provided"):
            prepare_request("data_science", text="")

    def test_too_short(self):
        with pytest.raises(InputError, match="too short"):
            prepare_request("data_science", text="x" * 99)

    def test_exactly_minimum_length_accepted(self):
        assert prepare_request("data_science", text="x" * 100).cv_text == "x" * 100

    @pytest.mark.parametrize("role", [None, "", "sales", "Data_Science"])
    def test_invalid_role(self, role, sample_cv):
        with pytest.raises(InputError, match="valid role"):
            prepare_request(role, text=sample_cv)

    def test_content_checked_before_role(self):
        with pytest.raises(InputError, match="too short"):
            prepare_request("sales", text="short")

    def test_oversized_upload(self, monkeypatch, sample_cv):
        monkeypatch.setattr(evaluator, "MAX_UPLOAD_BYTES", 10)
        with pytest.raises(InputError, match="File too large"):
            prepare_request("data_science", file_bytes=sample_cv.encode(), filename="cv.txt")

    def test_extraction_error_propagates(self):
        with pytest.raises(ExtractionError):
            prepare_request("data_science", file_bytes=b"garbage", filename="cv.docx")


class TestRunEvaluation:
    def test_success_sends_role_prompt(self, fake_client_cls, valid_result, sample_cv):
        client = fake_client_cls(content=json.dumps(valid_result))
        request = EvaluationRequest(role="data_science", cv_text=sample_cv)
        result = run_evaluation(request, client=client)

        assert result.to_wire()["overallScore"] == 58
        call = client.calls[0]
        system, user = call["messages"]
        assert system["role"] == "system"
        assert "Data Science role" in system["content"]
        assert sample_cv in user["content"]

    def test_model_exception(self, fake_client_cls, sample_cv):
        client = fake_client_cls(exc=RuntimeError("quota exceeded"))
        request = EvaluationRequest(role="data_science", cv_text=sample_cv)
        with pytest.raises(ModelCallError) as exc:
            run_evaluation(request, client=client)
        assert exc.value.debug["name"] == "RuntimeError"
        assert exc.value.debug["message"] == "quota exceeded"

    def test_empty_reply(self, fake_client_cls, sample_cv):
        client = fake_client_cls(choices=False)
        request = EvaluationRequest(role="data_science", cv_text=sample_cv)
        with pytest.raises(MalformedModelResponseError):
            run_evaluation(request, client=client)

    def test_inconsistent_scores_warn_by_default(self, fake_client_cls, valid_result, sample_cv, caplog):
        valid_result["overallScore"] = 90
        client = fake_client_cls(content=json.dumps(valid_result))
        request = EvaluationRequest(role="data_science", cv_text=sample_cv)
        result = run_evaluation(request, client=client)
        assert result.overall_score == 90
        assert "Score discrepancy" in caplog.text

    def test_inconsistent_scores_rejected_in_strict_mode(self, monkeypatch, fake_client_cls, valid_result, sample_cv):
        monkeypatch.setattr(evaluator, "SCORE_CHECK_MODE", "strict")
        valid_result["overallScore"] = 90
        client = fake_client_cls(content=json.dumps(valid_result))
        request = EvaluationRequest(role="data_science", cv_text=sample_cv)
        with pytest.raises(SchemaValidationError) as exc:
            run_evaluation(request, client=client)
        assert exc.value.debug["discrepancies"]


def test_create_client_requires_key():
    with pytest.raises(ModelCallError) as exc:
        create_client(api_key="")
    assert "OPENAI_API_KEY" in exc.value.debug["message"]


def test_create_client_uses_base_url():
    client = create_client(api_key="sk-test", base_url="https://example.test/v1/")
    assert str(client.base_url).startswith("https://example.test/v1")
    assert client.max_retries == 0


def test_run_evaluation_closes_the_client_it_builds(monkeypatch, fake_client_cls, sample_cv):
    built = fake_client_cls(exc=RuntimeError("connection refused"))
    monkeypatch.setattr(evaluator, "create_client", lambda: built)
    request = EvaluationRequest(role="data_science", cv_text=sample_cv)
    with pytest.raises(ModelCallError):
        run_evaluation(request)
    assert built.closed


def test_run_evaluation_leaves_caller_client_open(fake_client_cls, valid_result, sample_cv):
    client = fake_client_cls(content=json.dumps(valid_result))
    run_evaluation(EvaluationRequest(role="data_science", cv_text=sample_cv), client=client)
    assert not client.closed
