"""
Tests for the LangChain-backed inference client.
"""
import asyncio
import json
from unittest.mock import AsyncMock, Mock

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage

from plant_identifier.exceptions import InferenceError
from plant_identifier.schemas import PlantInfo
from plant_identifier.tools import LLMInferenceClient


@pytest.fixture
def payload():
    return {
        "commonName": "Monstera",
        "scientificName": "Monstera deliciosa",
        "origin": "Central America",
        "description": "...",
        "isHealthy": True,
        "healthAssessment": "Leaves healthy",
        "careRecommendations": ["Water weekly", "Bright indirect light"],
    }


@pytest.fixture
def mock_llm(payload):
    """Create a mock chat model that answers with a valid reply."""
    llm = Mock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content=json.dumps(payload)))
    return llm


class TestIdentify:
    """Test the request/reply exchange."""

    def test_identify_with_fake_chat_model(self, payload):
        """Test a well-formed reply becomes a PlantInfo."""
        llm = FakeListChatModel(responses=[json.dumps(payload)])
        client = LLMInferenceClient(llm)

        plant = asyncio.run(client.identify("aGVsbG8=", "image/jpeg"))

        assert plant == PlantInfo.model_validate(payload)

    def test_request_carries_prompt_and_image(self, mock_llm):
        """Test one multimodal message with the image as a data URL."""
        client = LLMInferenceClient(mock_llm, prompt="Identify this plant")

        asyncio.run(client.identify("aGVsbG8=", "image/png"))

        mock_llm.ainvoke.assert_awaited_once()
        (messages,), _ = mock_llm.ainvoke.call_args
        assert len(messages) == 1
        message = messages[0]
        assert isinstance(message, HumanMessage)
        assert message.content[0] == {"type": "text", "text": "Identify this plant"}
        assert message.content[1]["image_url"]["url"] == "data:image/png;base64,aGVsbG8="

    def test_data_url_input_is_not_prefixed_twice(self, mock_llm):
        """Test a data URL passed as the image is sent as a single data URL."""
        client = LLMInferenceClient(mock_llm)

        asyncio.run(client.identify("data:image/png;base64,aGVsbG8=", "image/png"))

        (messages,), _ = mock_llm.ainvoke.call_args
        assert messages[0].content[1]["image_url"]["url"] == "data:image/png;base64,aGVsbG8="

    def test_transport_failure_is_inference_error(self, mock_llm):
        """Test network errors surface as InferenceError with the cause kept."""
        mock_llm.ainvoke.side_effect = ConnectionError("connection reset")
        client = LLMInferenceClient(mock_llm)

        with pytest.raises(InferenceError) as exc_info:
            asyncio.run(client.identify("aGVsbG8=", "image/jpeg"))
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_partial_reply_is_inference_error(self, mock_llm, payload):
        """Test a reply missing a field never yields a partial result."""
        del payload["healthAssessment"]
        mock_llm.ainvoke.return_value = AIMessage(content=json.dumps(payload))
        client = LLMInferenceClient(mock_llm)

        with pytest.raises(InferenceError, match="healthAssessment"):
            asyncio.run(client.identify("aGVsbG8=", "image/jpeg"))

    def test_only_one_attempt(self, mock_llm):
        """Test failures are not retried."""
        mock_llm.ainvoke.side_effect = TimeoutError()
        client = LLMInferenceClient(mock_llm)

        with pytest.raises(InferenceError):
            asyncio.run(client.identify("aGVsbG8=", "image/jpeg"))
        assert mock_llm.ainvoke.await_count == 1


class TestInputValidation:
    """Test inputs are checked before any request is made."""

    def test_empty_payload(self, mock_llm):
        client = LLMInferenceClient(mock_llm)
        with pytest.raises(InferenceError, match="empty"):
            asyncio.run(client.identify("", "image/jpeg"))
        mock_llm.ainvoke.assert_not_called()

    def test_data_url_without_payload(self, mock_llm):
        client = LLMInferenceClient(mock_llm)
        with pytest.raises(InferenceError, match="empty"):
            asyncio.run(client.identify("data:image/jpeg;base64,", "image/jpeg"))
        mock_llm.ainvoke.assert_not_called()

    def test_empty_mime_type(self, mock_llm):
        client = LLMInferenceClient(mock_llm)
        with pytest.raises(InferenceError, match="media type"):
            asyncio.run(client.identify("aGVsbG8=", ""))
        mock_llm.ainvoke.assert_not_called()
