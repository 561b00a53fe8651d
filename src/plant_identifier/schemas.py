from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class PlantInfo(BaseModel):
    """
    Structured result of one plant identification.

    Field aliases match the reply contract of the inference service
    (camelCase); Python code uses the snake_case names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    common_name: StrictStr = Field(alias="commonName")
    scientific_name: StrictStr = Field(alias="scientificName")
    origin: StrictStr
    description: StrictStr
    is_healthy: StrictBool = Field(alias="isHealthy")
    health_assessment: StrictStr = Field(alias="healthAssessment")
    care_recommendations: List[StrictStr] = Field(alias="careRecommendations")

    def to_wire(self) -> dict:
        """Serialize using the service's field names."""
        return self.model_dump(by_alias=True)
