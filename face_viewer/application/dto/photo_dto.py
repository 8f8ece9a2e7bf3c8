from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ...domain.models.detection import Detection


class LatestPhotoResponse(BaseModel):
    """DTO describing the user's current photo (camelCase on the wire)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    request_id: str
    timestamp: int
    has_photo: bool = True


class FacePredictionResponse(BaseModel):
    """DTO for one detected face, in source-image pixels"""
    model_config = ConfigDict(populate_by_name=True)

    x: float
    y: float
    width: float
    height: float
    confidence: float
    class_name: str = Field(alias="class")
    class_id: int
    detection_id: str

    @classmethod
    def from_detection(cls, detection: Detection) -> "FacePredictionResponse":
        return cls(
            x=detection.x,
            y=detection.y,
            width=detection.width,
            height=detection.height,
            confidence=detection.confidence,
            class_name=detection.class_name,
            class_id=detection.class_id,
            detection_id=detection.detection_id,
        )


class FacesResponse(BaseModel):
    """DTO for the face detection result of one photo"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    faces: List[FacePredictionResponse]
    count: int
    request_id: str
