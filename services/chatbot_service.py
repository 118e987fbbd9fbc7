"""ChatbotService for asking the summary bot to distill a transcript.

The service sends a single prompt to OpenAI's chat completions API in
JSON-object mode and returns the raw message text. Parsing and validation of
that text belong to the caller.
"""
import os
import logging

from openai import AsyncOpenAI


logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.3
JSON_OBJECT_FORMAT = "json_object"


class ChatbotServiceError(Exception):
    """Raised when the chatbot call fails."""
    pass


class ChatbotService:
    """Service wrapping the OpenAI client used as the summary bot."""

    def __init__(self):
        """Initialize the ChatbotService with an OpenAI client."""
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError("OPENAI_API_KEY environment variable is required")

        self.model = os.getenv("OPENAI_MODEL") or "gpt-4o"
        # No retries: a failed call ends the pipeline run
        self.client = AsyncOpenAI(api_key=api_key, max_retries=0)
        logger.info(f"ChatbotService initialized with model: {self.model}")

    async def ask(
        self,
        prompt: str,
        response_format: str = JSON_OBJECT_FORMAT,
        temperature: float = DEFAULT_TEMPERATURE
    ) -> str:
        """Send a prompt and return the raw response text.

        Args:
            prompt: The full instruction string
            response_format: OpenAI response format type
            temperature: Sampling temperature

        Returns:
            The message content, or an empty string if the model returned none

        Raises:
            ChatbotServiceError: If the OpenAI API call fails
        """
        logger.info(
            f"Asking summary bot: model={self.model}, "
            f"prompt_length={len(prompt)} chars, temperature={temperature}"
        )

        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                response_format={"type": response_format},
                temperature=temperature
            )
            content = completion.choices[0].message.content or ""
        except Exception as e:
            logger.error(f"Summary bot call failed: error={str(e)}", exc_info=True)
            raise ChatbotServiceError(f"Chatbot request failed: {e}") from e

        logger.info(f"Summary bot responded: response_length={len(content)} chars")
        return content
