"""
samvidhan/assistants/environmental.py
Environmental protection guidance (Articles 21, 48A and 51A(g))
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import NALSA, complaint_letters, legal_option

EPA = "Environmental Protection Act"
ENV_ARTICLES = ["Article 21", "Article 48A"]


def _pollution(issue_id, name, description, category, urgency, law, timeline, subject, evidence):
    return IssueType(
        id=issue_id,
        name=name,
        description=description,
        category=category,
        urgency=urgency,
        constitutional=list(ENV_ARTICLES),
        legal=[law, EPA],
        timeline=timeline,
        immediate=[
            evidence,
            "Identify the source and the responsible body",
            "Collect signatures from affected residents",
        ],
        remedies=[
            "Complain to the State Pollution Control Board",
            "Approach the National Green Tribunal",
            "File a public interest litigation in the High Court",
        ],
        milestones={
            "0-7 days": "Evidence and written complaint",
            "30-60 days": "Pollution Control Board inspection",
            "60-180 days": "Tribunal application if unresolved",
        },
        subject=subject,
    )


ISSUE_TYPES = [
    _pollution(
        "air_pollution", "Air Pollution",
        "Protection against air pollution and promotion of clean air",
        "air", "high", "Air Act", "30-60 days", "air pollution",
        "Record AQI readings and photograph smoke or dust",
    ),
    _pollution(
        "water_pollution", "Water Pollution",
        "Protection of water bodies and prevention of water pollution",
        "water", "high", "Water Act", "30-60 days", "water pollution",
        "Photograph discharge points and collect water samples",
    ),
    _pollution(
        "soil_pollution", "Soil Pollution",
        "Protection of soil quality and prevention of soil contamination",
        "soil", "medium", "Soil Conservation Act", "60-90 days", "soil contamination",
        "Photograph dumping sites and get soil tested",
    ),
    _pollution(
        "noise_pollution", "Noise Pollution",
        "Protection against noise pollution and promotion of peaceful environment",
        "noise", "medium", "Noise Pollution Rules", "30-60 days", "noise pollution",
        "Record noise levels with time stamps",
    ),
    IssueType(
        id="deforestation",
        name="Deforestation",
        description="Protection of forests and prevention of illegal deforestation",
        category="forest",
        urgency="high",
        constitutional=list(ENV_ARTICLES),
        legal=["Forest Conservation Act", EPA],
        timeline="60-180 days",
        immediate=[
            "Photograph felled trees with location data",
            "Ask the forest department whether felling was permitted",
        ],
        remedies=[
            "Complain to the Divisional Forest Officer",
            "Approach the National Green Tribunal for a stay",
        ],
        stages={
            "documentation": "1-3 days",
            "complaint": "7-14 days",
            "investigation": "30-60 days",
            "tribunal": "60-180 days",
        },
        subject="forest",
    ),
    IssueType(
        id="biodiversity_loss",
        name="Biodiversity Loss",
        description="Protection of biodiversity and prevention of species extinction",
        category="biodiversity",
        urgency="high",
        constitutional=list(ENV_ARTICLES),
        legal=["Biological Diversity Act", "Wildlife Protection Act"],
        timeline="60-180 days",
        immediate=[
            "Report poaching or habitat destruction to the forest department",
            "Record species and location details",
        ],
        remedies=[
            "Complain to the State Biodiversity Board",
            "Report wildlife crime to the Wildlife Crime Control Bureau",
        ],
        subject="biodiversity",
    ),
    IssueType(
        id="waste_management",
        name="Waste Management",
        description="Proper waste management and prevention of environmental pollution",
        category="waste",
        urgency="medium",
        constitutional=list(ENV_ARTICLES),
        legal=["Solid Waste Management Rules", EPA],
        timeline="30-60 days",
        immediate=[
            "Photograph uncollected or burning waste",
            "Complain on the municipal grievance portal",
        ],
        remedies=[
            "Escalate to the Municipal Commissioner",
            "Approach the National Green Tribunal",
        ],
        subject="waste",
    ),
    IssueType(
        id="climate_change",
        name="Climate Change",
        description="Addressing climate change impacts and promoting climate resilience",
        category="climate",
        urgency="high",
        constitutional=list(ENV_ARTICLES),
        legal=["Energy Conservation Act", EPA],
        timeline="60-180 days",
        immediate=[
            "Join local climate action groups",
            "Document local climate impacts",
        ],
        remedies=[
            "Participate in environmental impact assessment hearings",
            "File a public interest litigation",
        ],
        subject="climate",
    ),
]

LEGAL_OPTIONS = {
    "default": {
        "pcb": legal_option("Complaint to the State Pollution Control Board", "30-60 days", 60, "None", "Low"),
        "ngt": legal_option("Application before the National Green Tribunal", "90-180 days", 70, "Medium", "High"),
        "pil": legal_option("Public interest litigation in the High Court", "180-365 days", 65, "Medium", "High"),
    },
}

RESOURCES = {
    "authorities": [
        {"name": "Central Pollution Control Board", "website": "https://cpcb.nic.in", "type": "regulator"},
        {"name": "National Green Tribunal", "website": "https://greentribunal.gov.in", "type": "tribunal"},
    ],
}

CONTACTS = {
    "national": [
        {"name": "Central Pollution Control Board", "phone": "011-43102030", "type": "regulator"},
        NALSA,
    ],
    "delhi": [{"name": "Delhi Pollution Control Committee", "phone": "011-23869389", "type": "regulator"}],
}

STATISTICS = {
    "totalComplaints": 95000,
    "successRate": 55,
    "averageResolutionTime": 75,
    "categories": {
        "air": 35000,
        "water": 20000,
        "noise": 15000,
        "waste": 15000,
        "forest": 10000,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "water_pollution",
        "title": "Factory Discharge Stopped",
        "description": "Tribunal ordered closure of an untreated effluent outlet",
        "outcome": "success",
        "date": "2023-11-20",
        "timeline": "4 months",
    },
]

CONSTITUTIONAL_BASIS = {
    "article21": {
        "article": "Article 21",
        "title": "Right to a healthy environment",
        "description": "The right to life includes the right to pollution-free air and water",
    },
    "article48A": {
        "article": "Article 48A",
        "title": "Protection and improvement of environment",
        "description": "The State shall endeavour to protect the environment and safeguard forests and wildlife",
    },
    "article51Ag": {
        "article": "Article 51A(g)",
        "title": "Fundamental duty",
        "description": "Every citizen shall protect and improve the natural environment",
    },
    "landmark": {
        "case": "M.C. Mehta v. Union of India (1987)",
        "description": "Established absolute liability for hazardous industries",
    },
}

LAWS = [
    {"name": "Environment (Protection) Act, 1986", "description": "Umbrella law for environmental protection", "year": 1986},
    {"name": "Air (Prevention and Control of Pollution) Act, 1981", "description": "Air quality regulation", "year": 1981},
    {"name": "Water (Prevention and Control of Pollution) Act, 1974", "description": "Water quality regulation", "year": 1974},
    {"name": "National Green Tribunal Act, 2010", "description": "Specialised tribunal for environmental disputes", "year": 2010},
]

TEMPLATES = complaint_letters([
    {
        "type": "pollution",
        "title": "Pollution Complaint",
        "title_hi": "प्रदूषण की शिकायत",
        "authority": "Member Secretary, State Pollution Control Board",
        "authority_hi": "सदस्य सचिव, राज्य प्रदूषण नियंत्रण बोर्ड",
        "subject": "Complaint regarding pollution caused by [source]",
        "subject_hi": "[स्रोत] द्वारा किए जा रहे प्रदूषण के संबंध में शिकायत",
        "law": "the Environment (Protection) Act 1986",
    },
])

EXTRAS = {
    "environmentalLaws": LAWS,
    "governmentAgencies": [
        {"name": "Ministry of Environment, Forest and Climate Change", "website": "https://moef.gov.in"},
        {"name": "Central Pollution Control Board", "website": "https://cpcb.nic.in"},
        {"name": "National Green Tribunal", "website": "https://greentribunal.gov.in"},
    ],
}

assistant = SectorAssistant(
    slug="environmental",
    title="Environmental Rights Assistant",
    type_field="rightsType",
    issue_types=ISSUE_TYPES,
    legal_options=LEGAL_OPTIONS,
    resources=RESOURCES,
    contacts=CONTACTS,
    statistics=STATISTICS,
    recent_cases=RECENT_CASES,
    constitutional_basis=CONSTITUTIONAL_BASIS,
    laws=LAWS,
    templates=TEMPLATES,
    extras=EXTRAS,
)
