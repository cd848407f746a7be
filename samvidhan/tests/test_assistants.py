"""
Sector guidance assistants.
"""
import pytest

from samvidhan.assistants import REGISTRY, SECTOR_ASSISTANTS, get_assistant
from samvidhan.assistants.base import scale_stages
from samvidhan.errors import ErrorCode
from samvidhan.schemas.assistants import SectorRequest

SECTOR_SLUGS = [
    "legal-emergency", "banking", "consumer", "digital-rights", "environmental", "gov-services",
    "womens-rights", "agriculture", "education", "healthcare", "housing", "business", "journalism",
    "library", "nri",
]

ALIASES = {
    "business-rights": "business",
    "citizen-journalism": "journalism",
    "nri-rights": "nri",
}

GUIDE_KEYS = {
    "strategy", "resources", "legalOptions", "actionPlan", "timeline", "checklists",
    "templates", "contacts", "statistics", "constitutionalBasis",
}

DIRECTORY_KEYS = {"issueTypes", "statistics", "recentCases", "locationResources", "constitutionalBasis", "laws"}


def guide_body(assistant, **extra) -> dict:
    body = {
        assistant.type_field: assistant.issue_types[-1].id,
        "description": "Need help with my case",
    }
    body.update(extra)
    return body


def test_registry_covers_every_sector_and_alias():
    assert set(SECTOR_SLUGS) | set(ALIASES) == set(REGISTRY)
    assert len(SECTOR_ASSISTANTS) == len(SECTOR_SLUGS)
    for alias, slug in ALIASES.items():
        assert get_assistant(alias) is get_assistant(slug)
    assert get_assistant("astrology") is None


@pytest.mark.parametrize("assistant", SECTOR_ASSISTANTS, ids=lambda a: a.slug)
def test_every_sector_has_a_default_remedy(assistant):
    assert "default" in assistant.legal_options
    assert set(assistant.templates) >= {"en", "hi"}
    assert assistant.templates["en"]


class TestScaleStages:
    def test_normal_keeps_windows(self):
        assert scale_stages({"complaint": "7-14 days"}, "normal") == {"complaint": "7-14 days"}

    def test_urgent_halves(self):
        assert scale_stages({"complaint": "7-14 days"}, "urgent") == {"complaint": "3.5-7 days"}

    def test_priority_three_quarters(self):
        assert scale_stages({"resolution": "30-60 days"}, "priority") == {"resolution": "22.5-45 days"}

    def test_unknown_urgency_is_normal(self):
        assert scale_stages({"complaint": "7-14 days"}, "whenever") == {"complaint": "7-14 days"}

    def test_unparseable_window_kept(self):
        assert scale_stages({"appeal": "ongoing"}, "urgent") == {"appeal": "ongoing"}


class TestGuide:
    def test_unknown_issue_type_uses_default(self):
        assistant = get_assistant("banking")
        data = assistant.guide(SectorRequest(issueType="crypto", description="x"))
        assert data["issueType"] == assistant.issue_types[0].id
        assert data["legalOptions"] == assistant.options_for(assistant.issue_types[0])

    def test_urgent_requests_are_high_priority(self):
        assistant = get_assistant("consumer")
        data = assistant.guide(SectorRequest(complaintType="product", description="x", urgency="urgent"))
        assert data["actionPlan"]["priority"] == "high"

    def test_templates_fall_back_to_english(self):
        assistant = get_assistant("housing")
        data = assistant.guide(SectorRequest(rightsType=assistant.issue_types[0].id, description="x", language="ta"))
        assert data["templates"] == assistant.templates["en"]

    def test_hindi_templates(self):
        assistant = get_assistant("housing")
        data = assistant.guide(SectorRequest(rightsType=assistant.issue_types[0].id, description="x", language="hi"))
        assert data["templates"] == assistant.templates["hi"]

    def test_local_contacts_by_body_field(self):
        banking = get_assistant("banking")
        data = banking.guide(SectorRequest(issueType="fraud", description="x", bankName="SBI"))
        assert data["contacts"]["local"] == banking.contacts["sbi"]
        assert data["contacts"]["national"] == banking.contacts["national"]

        nri = get_assistant("nri")
        data = nri.guide(SectorRequest(rightsType="nri_property", description="x", country="UAE"))
        assert data["contacts"]["local"] == nri.contacts["uae"]

    def test_unknown_location_has_no_local_contacts(self):
        data = get_assistant("banking").guide(SectorRequest(issueType="fraud", description="x", bankName="Nowhere"))
        assert data["contacts"]["local"] is None


class TestSectorEndpoints:
    @pytest.mark.parametrize("slug", SECTOR_SLUGS + list(ALIASES))
    async def test_post_returns_guidance(self, client, slug):
        assistant = REGISTRY[slug]
        response = await client.post(f"/api/{slug}", json=guide_body(assistant))
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert GUIDE_KEYS <= set(body["data"])
        assert body["data"]["issueType"] == assistant.issue_types[-1].id

    @pytest.mark.parametrize("slug", SECTOR_SLUGS + list(ALIASES))
    async def test_get_returns_directory(self, client, slug):
        response = await client.get(f"/api/{slug}")
        assert response.status_code == 200
        data = response.json()["data"]
        assert DIRECTORY_KEYS <= set(data)
        assert len(data["issueTypes"]) == len(REGISTRY[slug].issue_types)
        assert data["locationResources"] is None
        for key in REGISTRY[slug].extras:
            assert key in data

    @pytest.mark.parametrize("slug", SECTOR_SLUGS)
    async def test_missing_issue_type_is_400(self, client, slug):
        response = await client.post(f"/api/{slug}", json={"description": "help"})
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert REGISTRY[slug].type_field in body["error"]

    async def test_missing_description_is_400(self, client):
        response = await client.post("/api/consumer", json={"complaintType": "product", "description": "  "})
        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: description"

    async def test_non_string_location_is_400(self, client):
        response = await client.post(
            "/api/banking",
            json={"issueType": "fraud", "description": "x", "bankName": 5},
        )
        assert response.status_code == 400
        body = response.json()
        assert body["code"] == ErrorCode.INVALID_FORMAT
        assert body["details"] == {"field": "bankName"}

    async def test_type_filter(self, client):
        data = (await client.get("/api/banking", params={"type": "fraud"})).json()["data"]
        assert [i["id"] for i in data["issueTypes"]] == ["fraud"]

    async def test_location_resources(self, client):
        data = (await client.get("/api/banking", params={"bank": "hdfc"})).json()["data"]
        assert data["locationResources"]["local"] == REGISTRY["banking"].contacts["hdfc"]

        data = (await client.get("/api/nri-rights", params={"country": "usa"})).json()["data"]
        assert data["locationResources"]["local"] == REGISTRY["nri"].contacts["usa"]

    async def test_urgency_shortens_timeline(self, client):
        assistant = REGISTRY["womens-rights"]
        normal = (await client.post("/api/womens-rights", json=guide_body(assistant))).json()["data"]
        urgent = (await client.post(
            "/api/womens-rights",
            json=guide_body(assistant, urgency="urgent"),
        )).json()["data"]
        assert set(normal["timeline"]) == set(urgent["timeline"])
        assert normal["timeline"] != urgent["timeline"]
