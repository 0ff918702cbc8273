"""Evaluation request/result schemas. Wire format is camelCase; attributes are snake_case."""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from config import MIN_CV_CHARS

Role = Literal["data_science", "digital_marketing"]
ExperienceLevel = Literal["fresher", "experienced"]

ROLE_VALUES = ("data_science", "digital_marketing")


class EvaluationRequest(BaseModel):
    """One CV submitted for evaluation against a selected role."""

    role: Role = Field(..., description="Role the candidate is applying for")
    cv_text: str = Field(..., min_length=MIN_CV_CHARS, description="Plain-text CV content")


class ParameterScore(BaseModel):
    """One weighted sub-criterion of the readiness score."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    name: str = Field(..., description="Name of the parameter being evaluated")
    weight: float = Field(..., description="Weight percentage for this parameter (e.g. 40 for 40%)")
    score: float = Field(..., ge=0, le=100, description="Raw score for this parameter before weighting")
    weighted_score: float = Field(..., alias="weightedScore", description="Score multiplied by weight percentage")
    positive_indicators: List[str] = Field(
        ..., alias="positiveIndicators", description="Positive keywords/evidence found in valid sections"
    )
    negative_indicators: List[str] = Field(
        ..., alias="negativeIndicators", description="Negative/legacy keywords or gaps found"
    )
    reasoning: str = Field(..., description="Explanation of how score was determined")


class EvaluationResult(BaseModel):
    """Validated AI readiness evaluation returned by the model."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    overall_score: float = Field(..., alias="overallScore", ge=0, le=100, description="Final AI readiness score")
    function: Role = Field(..., description="Detected primary function of the candidate")
    function_label: str = Field(..., alias="functionLabel", description="Human readable label for the function")
    experience_level: ExperienceLevel = Field(
        ..., alias="experienceLevel", description="fresher for 0-2 years, experienced for 3+ years"
    )
    years_of_experience: float = Field(..., alias="yearsOfExperience", description="Estimated years of experience")
    parameters: List[ParameterScore] = Field(...)
    validation_notes: List[str] = Field(
        ..., alias="validationNotes", description="What was found in valid vs invalid CV sections"
    )
    risk_penalty_applied: bool = Field(
        ..., alias="riskPenaltyApplied", description="Whether the -20 stale factor penalty was applied"
    )
    # Required key, nullable value
    risk_penalty_reason: Optional[str] = Field(..., alias="riskPenaltyReason")
    summary: str = Field(..., description="2-3 sentence summary of the candidate AI readiness")
    recommendations: List[str] = Field(..., description="3-5 specific recommendations to improve")

    def to_wire(self) -> dict:
        """Serialize with camelCase keys, as returned by the HTTP API."""
        return self.model_dump(by_alias=True, mode="json")


class ErrorResponse(BaseModel):
    """Error body: human-readable message plus optional diagnostic detail."""

    error: str
    debug: Optional[Any] = None
