"""
Client for the external AI service that analyzes records and answers chats
"""
import logging
from typing import Dict, List, Optional

import requests

logger = logging.getLogger("main")


class AiClientException(Exception):
    """Raised when the AI service is unreachable or answers garbage"""
    pass


class AiClient:
    """Client for the AI analysis/chat API"""

    def __init__(self, base_url: str, api_key: str = "", timeout: int = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": "Corecord Backend",
            "Content-Type": "application/json",
        })
        if api_key:
            self.session.headers["Authorization"] = f"Bearer {api_key}"

    def _post(self, path: str, payload: Dict) -> Dict:
        try:
            response = self.session.post(f"{self.base_url}{path}", json=payload, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error(f"AI service error on {path}: {e}")
            raise AiClientException(f"AI service failed: {e}")
        except ValueError as e:
            logger.error(f"AI service returned invalid JSON on {path}: {e}")
            raise AiClientException(f"AI service returned invalid JSON: {e}")
        if not isinstance(data, dict):
            raise AiClientException(f"AI service returned a non-object body on {path}")
        return data

    def generate_analysis(self, content: str) -> Dict:
        """
        Analyze a record.

        Returns:
            {"comment": str, "keywordList": {keyword label: content}}
        """
        data = self._post("/analysis", {"content": content})
        comment = data.get("comment")
        keyword_list = data.get("keywordList")
        if not isinstance(comment, str) or not isinstance(keyword_list, dict):
            raise AiClientException("Analysis response is missing comment or keywordList")
        if not all(isinstance(label, str) and isinstance(text, str) for label, text in keyword_list.items()):
            raise AiClientException("Analysis keywordList must map keyword labels to text")
        return {"comment": comment, "keywordList": keyword_list}

    def generate_chat_response(self, messages: List[Dict]) -> str:
        """messages: [{"role": "user"|"assistant", "content": str}, ...] oldest first"""
        data = self._post("/chat", {"messages": messages})
        content = data.get("content")
        if not isinstance(content, str) or not content.strip():
            raise AiClientException("Chat response has no content")
        return content

    def generate_chat_summary(self, messages: List[Dict]) -> Dict:
        """Returns {"title": str, "content": str}"""
        data = self._post("/summary", {"messages": messages})
        title = data.get("title")
        content = data.get("content")
        if not isinstance(title, str) or not isinstance(content, str):
            raise AiClientException("Summary response is missing title or content")
        return {"title": title, "content": content}


_ai_client: Optional[AiClient] = None


def init_ai_client(app) -> None:
    global _ai_client
    injected = app.config.get("AI_CLIENT")
    if injected is not None:
        _ai_client = injected
        return
    _ai_client = AiClient(
        app.config["AI_BASE_URL"],
        api_key=app.config.get("AI_API_KEY", ""),
        timeout=app.config.get("AI_TIMEOUT", 30),
    )
    logger.info(f"AI client configured for {_ai_client.base_url}")


def get_ai_client() -> AiClient:
    if _ai_client is None:
        raise RuntimeError("AI client is not initialized, call init_ai_client(app) first")
    return _ai_client
