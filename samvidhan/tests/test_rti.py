"""
RTI application drafting and department directory.
"""
import re
from datetime import datetime

import pytest

from samvidhan.assistants import rti
from samvidhan.schemas.assistants import RTIRequest

APPLICATION = {
    "applicantName": "Ravi Kumar",
    "applicantAddress": "12 MG Road, Bengaluru",
    "departmentName": "Ministry of Finance",
    "subject": "Budget allocation for rural roads",
    "description": "Copies of sanction orders for 2023-24",
}


def make_request(**overrides) -> RTIRequest:
    return RTIRequest(**{**APPLICATION, **overrides})


class TestRenderApplication:
    def test_english_content(self):
        rendered = rti.render_application(make_request(), today=datetime(2024, 3, 5))
        content = rendered["content"]
        assert content.startswith("RIGHT TO INFORMATION ACT, 2005")
        assert "Name of Applicant: Ravi Kumar" in content
        assert "Period to which information relates: N/A to N/A" in content
        assert "Date: 05/03/2024" in content
        assert re.fullmatch(r"RTI/05032024/\d{1,3}", rendered["applicationNumber"])

    def test_hindi_content(self):
        rendered = rti.render_application(make_request(language="hi"))
        assert rendered["content"].startswith("सूचना का अधिकार अधिनियम, 2005")
        assert "आवेदक का नाम: Ravi Kumar" in rendered["content"]

    def test_unknown_language_uses_english(self):
        rendered = rti.render_application(make_request(language="ta"))
        assert rendered["content"].startswith("RIGHT TO INFORMATION ACT, 2005")

    @pytest.mark.parametrize("urgency,days", [("urgent", 5), ("priority", 10), ("normal", 30), ("later", 30)])
    def test_estimated_days(self, urgency, days):
        assert rti.render_application(make_request(urgency=urgency))["estimatedDays"] == days

    def test_word_count_is_subject_line_plus_description(self):
        request = make_request()
        expected = len(f"Particulars of Information Required: {request.subject}") + len(request.description)
        assert rti.render_application(request)["wordCount"] == expected


def test_department_lookups():
    assert rti.department_info("Ministry of Finance")["cpio"] == "Joint Secretary (Budget)"
    assert rti.department_info("Ministry of Magic") == rti.GENERIC_DEPARTMENT
    assert rti.submission_guidelines("Supreme Court", "urgent")["documents"].startswith("Case number")
    assert rti.submission_guidelines("Delhi Police", "urgent")["timeline"] == "48 hours for response"


def test_directory_filters():
    assert {d["name"] for d in rti.department_directory(category="judiciary")} == {"Supreme Court of India"}
    assert [d["name"] for d in rti.department_directory(department="delhi")] == [
        "Delhi Police",
        "Municipal Corporation of Delhi",
    ]
    assert rti.department_directory(category="state", department="ministry") == []


class TestRTIEndpoints:
    async def test_draft(self, client):
        response = await client.post("/api/rti", json={**APPLICATION, "urgency": "priority"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["rtiApplication"]["estimatedDays"] == 10
        assert data["departmentInfo"]["email"] == "finmin@nic.in"
        assert data["submissionGuidelines"]["timeline"] == "7 days for response"
        assert data["appealProcess"]
        assert data["sampleApplications"]
        assert data["constitutionalReferences"]

    @pytest.mark.parametrize("field", ["applicantName", "applicantAddress", "departmentName", "subject"])
    async def test_missing_required_field(self, client, field):
        body = {**APPLICATION, field: "  "}
        response = await client.post("/api/rti", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == rti.REQUIRED_FIELDS_MESSAGE

    async def test_directory(self, client):
        response = await client.get("/api/rti", params={"category": "central"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert {d["category"] for d in data["departments"]} == {"central"}
        assert len(data["successStories"]) == 3
        assert "lastUpdated" in data["statistics"]
        assert data["constitutionalBasis"]
        assert data["recentApplications"]
