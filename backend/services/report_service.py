# services/report_service.py
"""
Report Service

Medical report upload, background AI analysis and listing.

upload → clean + cap at 900 KiB → status "Processing"
       → (background) clean → truncate at sentence boundary → LLM
       → status "Normal" / "Review Required" / "Analysis Failed: <error>"
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from models.record_schema import ReportUpload
from services.llm_service import ReportAnalysisError, get_llm_service
from utils.config import get_settings
from utils.logger import logger
from utils.store import RecordNotFoundError, get_collection

STATUS_PROCESSING = "Processing"
STATUS_NORMAL = "Normal"
STATUS_REVIEW = "Review Required"
FAILED_PREFIX = "Analysis Failed: "

# Printable ASCII plus newline
_NON_PRINTABLE = re.compile(r"[^\x20-\x7E\n]")
_WHITESPACE = re.compile(r"\s+")
_LAST_SENTENCE = re.compile(r".*[.!?]", re.DOTALL)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def strip_non_printable(text: str) -> str:
    return _NON_PRINTABLE.sub("", text)


def clean_for_analysis(text: str) -> str:
    """Printable characters only, whitespace collapsed to single spaces"""
    return _WHITESPACE.sub(" ", strip_non_printable(text)).strip()


def truncate_at_sentence(text: str, max_chars: Optional[int] = None) -> str:
    """
    Cut to max_chars, backing off to the last sentence end inside the limit

    Text with no sentence end in the first max_chars is cut hard.
    """
    limit = max_chars if max_chars is not None else get_settings().REPORT_MAX_CHARS
    if len(text) <= limit:
        return text

    logger.info(f"✂️ [Report] content too long ({len(text)} chars), truncating to {limit}")
    head = text[:limit]
    match = _LAST_SENTENCE.match(head)
    return match.group(0) if match else head


class ReportService:
    """Report records + analysis orchestration"""

    def __init__(self):
        self.reports = get_collection("reports")

    def upload(self, upload: ReportUpload) -> Dict[str, Any]:
        """
        Store a new report in "Processing" state

        The caller schedules `analyze` afterwards (BackgroundTasks).
        """
        max_bytes = get_settings().REPORT_CONTENT_MAX_BYTES
        content = strip_non_printable(upload.content)
        if len(content) > max_bytes:
            logger.info(f"✂️ [Report] content over {max_bytes} bytes, keeping the head")
            content = content[:max_bytes]

        now = _now()
        report = self.reports.insert({
            "title": upload.title,
            "type": upload.type,
            "content": content,
            "file_url": upload.file_url,
            "status": STATUS_PROCESSING,
            "created_at": now,
            "updated_at": now,
            "ai_analysis": None,
        })
        logger.info(f"📄 [Report] uploaded: {report['id']} '{upload.title}'")
        return report

    def analyze(self, report_id: str) -> Dict[str, Any]:
        """
        Run the AI analysis for one report and store the outcome

        Failures are written to the report status and re-raised.
        """
        report = self.reports.get(report_id)

        try:
            if not report.get("content"):
                raise ReportAnalysisError("Report content is missing")

            text = truncate_at_sentence(clean_for_analysis(report["content"]))
            analysis = get_llm_service().analyze_report(text)

        except ReportAnalysisError as e:
            logger.error(f"❌ [Report] analysis failed for {report_id}: {e}")
            self.reports.patch(report_id, {"status": f"{FAILED_PREFIX}{e}", "updated_at": _now()})
            raise

        status = STATUS_REVIEW if analysis["needs_review"] else STATUS_NORMAL
        updated = self.reports.patch(report_id, {
            "ai_analysis": analysis,
            "status": status,
            "updated_at": _now(),
        })
        logger.info(f"✅ [Report] analyzed: {report_id} → {status}")
        return updated

    def run_analysis_task(self, report_id: str):
        """BackgroundTasks entry point: failures are already on the record, just log"""
        try:
            self.analyze(report_id)
        except ReportAnalysisError:
            logger.warning(f"⚠️ [Report] background analysis ended with failure: {report_id}")
        except RecordNotFoundError:
            logger.warning(f"⚠️ [Report] report deleted before analysis finished: {report_id}")

    def list_reports(self) -> List[Dict[str, Any]]:
        """All reports, most recently updated first"""
        return sorted(self.reports.all(), key=lambda r: r["updated_at"], reverse=True)

    def get_report(self, report_id: str) -> Dict[str, Any]:
        return self.reports.get(report_id)

    def generate_insights(self, report_id: str) -> Optional[Dict[str, Any]]:
        """Current analysis (may be None); the caller schedules a fresh run"""
        return self.reports.get(report_id).get("ai_analysis")

    def delete_report(self, report_id: str):
        self.reports.delete(report_id)


# Singleton instance
_report_service: Optional[ReportService] = None


def get_report_service() -> ReportService:
    """Return the ReportService singleton"""
    global _report_service
    if _report_service is None:
        _report_service = ReportService()
    return _report_service
