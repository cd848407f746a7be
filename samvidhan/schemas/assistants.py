"""
samvidhan/schemas/assistants.py
Request schemas for the domain assistants (RTI and sector guides)
"""
from typing import Optional
from pydantic import BaseModel, Field


class RTIRequest(BaseModel):
    applicant_name: Optional[str] = Field(None, alias="applicantName")
    applicant_address: Optional[str] = Field(None, alias="applicantAddress")
    department_name: Optional[str] = Field(None, alias="departmentName")
    subject: Optional[str] = None
    description: Optional[str] = None
    period_from: Optional[str] = Field(None, alias="periodFrom")
    period_to: Optional[str] = Field(None, alias="periodTo")
    language: str = "en"
    urgency: str = "normal"

    class Config:
        populate_by_name = True


class SectorRequest(BaseModel):
    """
    Guidance request for a sector assistant.

    Each sector names its own issue-type field (issueType, complaintType,
    emergencyType, rightsType, serviceType); it arrives as an extra field.
    """
    description: Optional[str] = None
    location: Optional[str] = None
    urgency: str = "normal"
    language: str = "en"

    class Config:
        extra = "allow"

    def field(self, name: str):
        if name in type(self).model_fields:
            return getattr(self, name)
        return (self.model_extra or {}).get(name)
