import pytest

from models.record_schema import ReportUpload
from services.llm_service import LLMService, ReportAnalysisError, parse_analysis, set_llm_service
from services.report_service import (
    ReportService,
    clean_for_analysis,
    strip_non_printable,
    truncate_at_sentence,
)
from tests.conftest import analysis_json


@pytest.fixture
def service():
    return ReportService()


def upload(service, content="Patient: A. Kumar\nHb 11.2 g/dL. Platelets normal."):
    return service.upload(ReportUpload(title="CBC", type="Blood Test", content=content))


# ============================================================
# Text preparation
# ============================================================

def test_strip_non_printable_keeps_newlines():
    assert strip_non_printable("Hb 11.2\x00\nOK\t") == "Hb 11.2\nOK"


def test_clean_for_analysis_collapses_whitespace():
    assert clean_for_analysis("  Hb 11.2\n\n  Platelets   normal  ") == "Hb 11.2 Platelets normal"


def test_truncate_backs_off_to_last_sentence():
    text = "First finding. Second finding! Third finding goes on and on"
    assert truncate_at_sentence(text, max_chars=40) == "First finding. Second finding!"


def test_truncate_without_sentence_end_cuts_hard():
    assert truncate_at_sentence("x" * 50, max_chars=20) == "x" * 20


def test_truncate_leaves_short_text_alone():
    assert truncate_at_sentence("Short.", max_chars=100) == "Short."


# ============================================================
# Parsing the model answer
# ============================================================

def test_parse_analysis_accepts_fenced_json():
    analysis = parse_analysis("```json\n" + analysis_json(needs_review=True) + "\n```")
    assert analysis.needs_review is True
    assert analysis.key_findings == ["Haemoglobin 11.2 g/dL"]


def test_parse_analysis_rejects_garbage():
    with pytest.raises(ReportAnalysisError):
        parse_analysis("The report looks fine.")
    with pytest.raises(ReportAnalysisError):
        parse_analysis("")


# ============================================================
# Service
# ============================================================

def test_upload_stores_processing_report(service, settings, monkeypatch):
    monkeypatch.setattr(settings, "REPORT_CONTENT_MAX_BYTES", 10)

    report = upload(service, content="\x00ABCDEFGHIJKLMNOP")

    assert report["status"] == "Processing"
    assert report["content"] == "ABCDEFGHIJ"
    assert report["ai_analysis"] is None
    assert report["created_at"] == report["updated_at"]


def test_analyze_stores_normal_result(service, fake_llm):
    report = upload(service)

    analyzed = service.analyze(report["id"])

    assert analyzed["status"] == "Normal"
    assert analyzed["ai_analysis"]["summary"].startswith("Haemoglobin")
    prompt = fake_llm.calls[0][1].content
    assert "\n" not in prompt


def test_analyze_flags_review(service, fake_llm):
    fake_llm.content = analysis_json(needs_review=True)
    report = upload(service)

    assert service.analyze(report["id"])["status"] == "Review Required"


def test_analyze_without_api_key_marks_failure(service, settings, monkeypatch):
    monkeypatch.setattr(settings, "KLUSTER_API_KEY", None)
    monkeypatch.setattr(settings, "OPENAI_API_KEY", None)
    set_llm_service(LLMService())
    report = upload(service)

    with pytest.raises(ReportAnalysisError):
        service.analyze(report["id"])

    assert service.get_report(report["id"])["status"] == "Analysis Failed: API key not configured"


def test_analyze_model_error_marks_failure(service, fake_llm):
    fake_llm.content = RuntimeError("upstream 502")
    report = upload(service)

    service.run_analysis_task(report["id"])

    assert service.get_report(report["id"])["status"] == "Analysis Failed: upstream 502"


def test_background_analysis_of_deleted_report_is_quiet(service, fake_llm):
    report = upload(service)
    service.delete_report(report["id"])

    service.run_analysis_task(report["id"])

    assert fake_llm.calls == []
    assert service.list_reports() == []


def test_report_deleted_during_analysis_is_quiet(service, fake_llm):
    report = upload(service)

    class DeletingModel:
        def invoke(self, messages):
            service.delete_report(report["id"])
            return fake_llm.invoke(messages)

    set_llm_service(LLMService(client=DeletingModel()))

    service.run_analysis_task(report["id"])

    assert service.list_reports() == []


def test_generate_insights_returns_current_analysis(service, fake_llm):
    report = upload(service)
    assert service.generate_insights(report["id"]) is None

    service.analyze(report["id"])
    assert service.generate_insights(report["id"])["confidence"] == 0.9


# ============================================================
# Router
# ============================================================

def test_upload_endpoint_runs_analysis_in_background(client, fake_llm):
    response = client.post("/reports", json={
        "title": "Lipid profile",
        "type": "Blood Test",
        "content": "LDL 170 mg/dL. HDL 38 mg/dL.",
    })

    assert response.status_code == 202
    body = response.json()
    assert body["status"] == "Processing"

    stored = client.get(f"/reports/{body['id']}").json()
    assert stored["status"] == "Normal"
    assert stored["ai_analysis"]["key_findings"] == ["Haemoglobin 11.2 g/dL"]


def test_report_list_and_delete(client, fake_llm):
    first = client.post("/reports", json={"title": "A", "type": "X-Ray", "content": "Clear."}).json()
    second = client.post("/reports", json={"title": "B", "type": "X-Ray", "content": "Clear."}).json()

    listed = [r["id"] for r in client.get("/reports").json()]
    assert set(listed) == {first["id"], second["id"]}

    assert client.delete(f"/reports/{first['id']}").status_code == 200
    assert client.get(f"/reports/{first['id']}").status_code == 404
    assert client.delete(f"/reports/{first['id']}").status_code == 404


def test_insights_endpoint_unknown_report(client):
    assert client.post("/reports/missing/insights").status_code == 404
