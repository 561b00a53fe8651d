"""
Validated parsing of inference replies into PlantInfo.
"""
import json
import re
from typing import Any, Dict, List, Union

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import InferenceError
from ..schemas import PlantInfo

_CODE_FENCE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


class PlantInfoParser:
    @staticmethod
    def content_to_text(content: Union[str, List[Any]]) -> str:
        """
        Flatten chat message content to plain text.

        Some providers return a list of content blocks instead of a string.
        """
        if isinstance(content, str):
            return content

        parts = []
        for block in content or []:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)

    @staticmethod
    def extract_json(text: str) -> Dict[str, Any]:
        """
        Pull the JSON object out of a model reply.

        Accepts bare JSON, JSON inside a markdown code fence, or JSON
        surrounded by prose.

        :raises InferenceError: If no JSON object can be decoded
        """
        if not text or not text.strip():
            raise InferenceError("Empty reply from inference service")

        fenced = _CODE_FENCE.search(text)
        candidate = fenced.group(1) if fenced else text
        candidate = candidate.strip()

        try:
            data = json.loads(candidate)
        except json.JSONDecodeError as e:
            start = candidate.find("{")
            end = candidate.rfind("}")
            if start == -1:
                raise InferenceError("Reply does not contain a JSON object") from e
            try:
                data = json.loads(candidate[start:end + 1])
            except json.JSONDecodeError:
                raise InferenceError(f"Reply is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise InferenceError(f"Expected a JSON object, got {type(data).__name__}")

        return data

    @classmethod
    def validate(cls, data: Dict[str, Any]) -> PlantInfo:
        """
        Validate decoded data against the PlantInfo schema.

        :raises InferenceError: Listing every missing or mistyped field
        """
        try:
            return PlantInfo.model_validate(data)
        except PydanticValidationError as e:
            fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
            raise InferenceError(
                f"Reply does not match PlantInfo (invalid fields: {', '.join(fields)})"
            ) from e

    @classmethod
    def parse(cls, content: Union[str, List[Any]]) -> PlantInfo:
        """
        Parse a model reply into PlantInfo.

        Never returns a partial result: anything short of a complete,
        well-typed object raises InferenceError.
        """
        return cls.validate(cls.extract_json(cls.content_to_text(content)))
