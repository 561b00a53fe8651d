"""
Tests for parsing inference replies.

A reply is either a complete PlantInfo or an InferenceError, never a
partially filled result.
"""
import json

import pytest

from plant_identifier.exceptions import InferenceError
from plant_identifier.schemas import PlantInfo
from plant_identifier.tools import PlantInfoParser

REQUIRED_FIELDS = [
    "commonName",
    "scientificName",
    "origin",
    "description",
    "isHealthy",
    "healthAssessment",
    "careRecommendations",
]


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


class TestPlantInfoParser:
    """Test reply extraction and validation."""

    def test_parse_bare_json(self, payload):
        plant = PlantInfoParser.parse(json.dumps(payload))
        assert isinstance(plant, PlantInfo)
        assert plant.common_name == "Monstera"

    def test_parse_fenced_json(self, payload):
        """Test JSON wrapped in a markdown code fence."""
        text = f"```json\n{json.dumps(payload)}\n```"
        assert PlantInfoParser.parse(text).scientific_name == "Monstera deliciosa"

    def test_parse_json_with_prose(self, payload):
        """Test JSON surrounded by explanatory text."""
        text = f"Aquí está el resultado:\n{json.dumps(payload)}\n¡Suerte!"
        assert PlantInfoParser.parse(text).origin == "Central America"

    def test_parse_content_blocks(self, payload):
        """Test list-of-blocks message content is flattened."""
        content = [{"type": "text", "text": json.dumps(payload)}]
        assert PlantInfoParser.parse(content).is_healthy is True

    def test_empty_care_recommendations_allowed(self, payload):
        payload["careRecommendations"] = []
        assert PlantInfoParser.parse(json.dumps(payload)).care_recommendations == []

    @pytest.mark.parametrize("missing", REQUIRED_FIELDS)
    def test_missing_field_is_error(self, payload, missing):
        """Test a reply missing any required field is rejected."""
        del payload[missing]
        with pytest.raises(InferenceError, match=missing):
            PlantInfoParser.parse(json.dumps(payload))

    def test_wrong_type_is_error(self, payload):
        payload["careRecommendations"] = "Water weekly"
        with pytest.raises(InferenceError, match="careRecommendations"):
            PlantInfoParser.parse(json.dumps(payload))

    def test_invalid_json_is_error(self):
        with pytest.raises(InferenceError, match="not valid JSON"):
            PlantInfoParser.parse('{"commonName": "Monstera",')

    def test_no_json_is_error(self):
        with pytest.raises(InferenceError):
            PlantInfoParser.parse("I cannot identify this plant.")

    def test_empty_reply_is_error(self):
        with pytest.raises(InferenceError, match="Empty"):
            PlantInfoParser.parse("   ")

    def test_json_array_is_error(self, payload):
        with pytest.raises(InferenceError):
            PlantInfoParser.parse(json.dumps([payload]))
