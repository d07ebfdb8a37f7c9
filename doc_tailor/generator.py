"""Generation Client Module

Handles communication with a hosted chat-completion API to rewrite the CV
and cover letter for a job description.
"""
import os
from typing import Dict, List, Optional, Protocol

import requests

from .config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    GENERATION_TIMEOUT_SECONDS,
)
from .exceptions import (
    GenerationAPIError,
    GenerationAuthenticationError,
    GenerationTimeoutError,
)


CV_PROMPT_TEMPLATE = """
You are an expert career advisor and resume writer. Given the following CV and job description, create a tailored CV that highlights the most relevant skills, experiences, and achievements for this specific role.

Original CV:
{cv}

Job Description:
{job_description}

Please provide a tailored CV that:
1. Emphasizes relevant skills and experiences from the original CV
2. Uses keywords from the job description
3. Maintains professional formatting
4. Highlights achievements that match the role requirements
5. Keeps the same factual information but reorganizes and emphasizes differently

Tailored CV:
"""

COVER_LETTER_PROMPT_TEMPLATE = """
You are an expert career advisor and cover letter writer. Given the following CV, optional cover letter, and job description, create a compelling tailored cover letter for this specific role.

CV:
{cv}

Original Cover Letter (if provided):
{cover_letter}

Job Description:
{job_description}

Please provide a tailored cover letter that:
1. Demonstrates enthusiasm for the specific role and company
2. Highlights the most relevant qualifications from the CV
3. Uses keywords from the job description
4. Shows how the candidate's experience aligns with the role requirements
5. Maintains a professional yet personable tone
6. Includes an opening, 2-3 body paragraphs, and a closing

Tailored Cover Letter:
"""


class TailoringGenerator(Protocol):
    """Black-box collaborator that rewrites a document for a target role."""

    def tailor_cv(self, cv: str, job_description: str) -> str:
        ...

    def tailor_cover_letter(self, cv: str, cover_letter: str, job_description: str) -> str:
        ...


class ChatCompletionGenerator:
    """Client for an OpenAI-compatible chat completions API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout: int = GENERATION_TIMEOUT_SECONDS,
    ):
        """
        Initialize chat completion client.

        Args:
            api_key: API key. If None, reads from OPENAI_API_KEY env var.
            base_url: API base URL. If None, reads OPENAI_BASE_URL or uses the OpenAI endpoint.
            model: Model name. If None, reads OPENAI_MODEL or uses gpt-3.5-turbo.
            temperature: Sampling temperature
            timeout: Per-request timeout in seconds

        Raises:
            GenerationAuthenticationError: If no API key is available
        """
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not self.api_key:
            raise GenerationAuthenticationError(
                "OPENAI_API_KEY not found. "
                "Set it in .env file or pass as parameter."
            )

        self.base_url = (base_url or os.getenv("OPENAI_BASE_URL") or DEFAULT_API_BASE_URL).rstrip("/")
        self.model = model or os.getenv("OPENAI_MODEL") or DEFAULT_MODEL
        self.temperature = temperature
        self.timeout = timeout

        self.headers = {
            "Authorization": f"Bearer {self.api_key}"
        }

    def tailor_cv(self, cv: str, job_description: str) -> str:
        """
        Rewrite a CV for a job description.

        Args:
            cv: Original CV text
            job_description: Target job description

        Returns:
            Tailored CV text
        """
        prompt = CV_PROMPT_TEMPLATE.format(cv=cv, job_description=job_description)
        return self.complete([{"role": "user", "content": prompt}])

    def tailor_cover_letter(self, cv: str, cover_letter: str, job_description: str) -> str:
        """
        Write a cover letter for a job description.

        Args:
            cv: Original CV text
            cover_letter: Original cover letter text, or placeholder text
            job_description: Target job description

        Returns:
            Tailored cover letter text
        """
        prompt = COVER_LETTER_PROMPT_TEMPLATE.format(
            cv=cv,
            cover_letter=cover_letter,
            job_description=job_description,
        )
        return self.complete([{"role": "user", "content": prompt}])

    def complete(self, messages: List[Dict[str, str]]) -> str:
        """
        Send one chat completion request and return the reply text.

        Args:
            messages: Chat messages in API format

        Returns:
            Content of the first choice

        Raises:
            GenerationTimeoutError: If the request exceeds the timeout
            GenerationAuthenticationError: If the API rejects the key
            GenerationAPIError: For other API failures or malformed responses
        """
        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "temperature": self.temperature,
            "messages": messages,
        }

        try:
            response = requests.post(
                url,
                headers=self.headers,
                json=payload,
                timeout=self.timeout
            )
        except requests.Timeout as e:
            raise GenerationTimeoutError(self.timeout) from e

        if response.status_code in (401, 403):
            raise GenerationAuthenticationError()
        if not response.ok:
            raise GenerationAPIError(response.status_code, self._error_message(response))

        try:
            return response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise GenerationAPIError(response.status_code, f"Malformed response: {e}") from e

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Extract the API error message, falling back to the raw body."""
        try:
            return response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            return response.text or response.reason or "Unknown error"
