# services/llm_service.py
"""
LLM Service

Medical report analysis through an OpenAI-compatible chat endpoint
(Kluster AI by default) using langchain-openai's ChatOpenAI in JSON mode.
"""

import json
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from pydantic import ValidationError

from models.record_schema import AIAnalysis
from utils.config import get_settings
from utils.logger import logger

load_dotenv()

SYSTEM_PROMPT = """You are a medical report analyzer. Analyze the given medical report and provide insights in JSON format.
Your response must be a valid JSON object with these exact fields:
{
  "summary": "A clear and concise summary of the medical report",
  "keyFindings": ["Finding 1", "Finding 2", ...],
  "recommendations": ["Recommendation 1", "Recommendation 2", ...],
  "confidence": 0.95,
  "needsReview": false
}
Do not include any text outside the JSON structure."""


class ReportAnalysisError(Exception):
    """The model could not be called or returned something unusable"""


def parse_analysis(raw: str) -> AIAnalysis:
    """
    Parse the model's JSON answer

    Some OpenAI-compatible backends wrap JSON mode output in a ``` fence,
    so that is stripped first.
    """
    if not raw or not raw.strip():
        raise ReportAnalysisError("No analysis received from the model")

    text = raw.strip()
    if text.startswith("```"):
        text = text.strip("`")
        if text.lower().startswith("json"):
            text = text[4:]

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ReportAnalysisError(f"Model returned invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ReportAnalysisError("Model returned JSON that is not an object")

    try:
        return AIAnalysis.model_validate(data)
    except ValidationError as e:
        raise ReportAnalysisError(f"Model returned an unexpected analysis shape: {e.error_count()} errors") from e


class LLMService:
    """Report analyzer backed by a langchain chat model"""

    def __init__(self, client: Optional[BaseChatModel] = None) -> None:
        self.settings = get_settings()
        self._client = client

    def _get_client(self) -> Any:
        """Lazily build the ChatOpenAI client (needs an API key)"""
        if self._client is not None:
            return self._client

        api_key = self.settings.report_api_key
        if not api_key:
            raise ReportAnalysisError("API key not configured")

        from langchain_openai import ChatOpenAI

        logger.info(f"🔄 [LLM] client init: {self.settings.REPORT_MODEL} @ {self.settings.LLM_BASE_URL}")
        llm = ChatOpenAI(
            model=self.settings.REPORT_MODEL,
            api_key=api_key,
            base_url=self.settings.LLM_BASE_URL,
            temperature=self.settings.LLM_TEMPERATURE,
            max_tokens=self.settings.LLM_MAX_TOKENS,
        )
        self._client = llm.bind(response_format={"type": "json_object"})
        return self._client

    def analyze_report(self, text: str) -> Dict[str, Any]:
        """
        Analyze cleaned report text

        Args:
            text: report content, already cleaned and truncated

        Returns:
            AIAnalysis as a dict (snake_case keys)

        Raises:
            ReportAnalysisError: missing key, API failure or unusable answer
        """
        client = self._get_client()
        messages = [SystemMessage(content=SYSTEM_PROMPT), HumanMessage(content=text)]

        try:
            logger.info(f"🔍 [LLM] analyzing report ({len(text)} chars)")
            response = client.invoke(messages)
        except Exception as e:
            logger.error(f"❌ [LLM] call failed: {e}")
            raise ReportAnalysisError(str(e)) from e

        analysis = parse_analysis(getattr(response, "content", response))
        logger.info(f"✅ [LLM] analysis done (needs_review={analysis.needs_review}, confidence={analysis.confidence})")
        return analysis.model_dump()


# Singleton instance
_llm_service: Optional[LLMService] = None


def get_llm_service() -> LLMService:
    """Return the LLMService singleton"""
    global _llm_service
    if _llm_service is None:
        _llm_service = LLMService()
    return _llm_service


def set_llm_service(service: Optional[LLMService]):
    """Swap the singleton (tests inject a fake chat model this way)"""
    global _llm_service
    _llm_service = service
